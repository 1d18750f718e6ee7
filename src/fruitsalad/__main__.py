"""Allow ``python -m fruitsalad``."""

import sys

from fruitsalad.cli import main

if __name__ == "__main__":
    sys.exit(main())
