"""Allow ``python -m capflow``."""

from capflow.cli import main

if __name__ == "__main__":
    main()
