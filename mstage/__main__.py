"""Allow ``python -m mstage``."""

from mstage.cli import main

if __name__ == "__main__":
    main()
