import sys

from finitetop.cli import main

if __name__ == "__main__":
    sys.exit(main())
