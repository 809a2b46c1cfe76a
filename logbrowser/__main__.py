"""Allows running the tool as ``python -m logbrowser``."""

from .cli import main

if __name__ == "__main__":
    main()
