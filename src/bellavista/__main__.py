"""Allow ``python -m bellavista``."""

from .cli import main

if __name__ == "__main__":
    main()
