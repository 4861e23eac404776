#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Allow ``python -m html2wiki``."""

import sys

from html2wiki.cli import main

if __name__ == "__main__":
    sys.exit(main())
