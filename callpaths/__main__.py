"""Module entrypoint for ``python -m callpaths``."""

from callpaths.cli import main

if __name__ == "__main__":
    main()
