"""Tests for the error hierarchy."""

import pytest

from graphsuite.exceptions import (
    Disconnected,
    GraphError,
    GraphKindError,
    NegativeCycleDetected,
    NegativeWeightError,
    NoPathFound,
    ParseError,
    ValidationError,
    VertexNotFound,
)


@pytest.mark.parametrize(
    "exc_type",
    [
        Disconnected,
        GraphKindError,
        NegativeCycleDetected,
        NegativeWeightError,
        NoPathFound,
        ParseError,
        ValidationError,
        VertexNotFound,
    ],
)
def test_all_errors_derive_from_graph_error(exc_type):
    assert issubclass(exc_type, GraphError)


def test_line_number_prefix():
    err = ParseError("bad weight", 7)
    assert err.line_no == 7
    assert str(err) == "line 7: bad weight"
    assert str(ValidationError("no header")) == "no header"


def test_vertex_not_found_message_is_unquoted():
    err = VertexNotFound("X")
    assert err.label == "X"
    assert str(err) == "Vertex 'X' does not exist."
    assert isinstance(err, KeyError)
