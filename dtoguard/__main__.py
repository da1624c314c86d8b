"""Allow ``python -m dtoguard``."""

from dtoguard.cli import main

if __name__ == "__main__":
    main()
