"""Allow ``python -m graycode``."""

import sys

from graycode.cli import main

if __name__ == "__main__":
    sys.exit(main())
