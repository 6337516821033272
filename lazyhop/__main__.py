"""Module entrypoint for ``python -m lazyhop``."""

from .cli import main


if __name__ == "__main__":
    main()
