"""Module entry point for `python -m openapi2schema`."""

from openapi2schema.cli import main

if __name__ == "__main__":
    main()
