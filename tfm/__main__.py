"""Module entrypoint for ``python -m tfm``.

All argument parsing and runtime setup happen in ``tfm.cli``.
"""

from .cli import main


if __name__ == "__main__":
    main()
