"""Module entrypoint for ``python -m dtree``.

Behaves exactly like the ``dtree`` console script; argument parsing and
exit handling live in ``dtree.cli``.
"""

from .cli import main


if __name__ == "__main__":
    main()
