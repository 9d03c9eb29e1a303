"""Module entrypoint for `python -m runtime_validation.cli`.

Delegates to the validation CLI implementation.
"""

from .run_validate import main


if __name__ == "__main__":
    main()
