"""Entry point for running gitlab_link as a module."""

from .cli import main

if __name__ == "__main__":
    raise SystemExit(main())
