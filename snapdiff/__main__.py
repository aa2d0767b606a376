"""Entry point for running snapdiff as a module."""

from snapdiff.cli import main

if __name__ == "__main__":
    raise SystemExit(main())
