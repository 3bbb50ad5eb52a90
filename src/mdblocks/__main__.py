"""Module entry point for running with python -m mdblocks."""

from mdblocks.cli import main

if __name__ == "__main__":
    raise SystemExit(main())
