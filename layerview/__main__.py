"""Module entrypoint for ``python -m layerview``."""

from .cli import main


if __name__ == "__main__":
    main()
