"""Module entrypoint for ``python -m lazymonitor``.

All argument parsing and runtime setup happen in ``lazymonitor.cli``.
"""

from .cli import main


if __name__ == "__main__":
    main()
