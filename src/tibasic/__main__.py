"""Allow ``python -m tibasic``."""

from tibasic.cli.tibasic import main

if __name__ == "__main__":
    main()
