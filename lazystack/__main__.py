"""Module entrypoint for ``python -m lazystack``.

All argument parsing and runtime setup happen in ``lazystack.cli``.
"""

from .cli import main


if __name__ == "__main__":
    main()
