"""Allow ``python -m graphsuite`` to run the CLI."""

from graphsuite.cli import main

if __name__ == "__main__":
    main()
