"""Main entry point for ``python -m garmgcp``."""

from garmgcp.cli.main import main


if __name__ == "__main__":
    main()
