"""
Entry point.

Run: python -m examples.store_demo.main
"""

import sys

from examples.store_demo.cli import main


if __name__ == "__main__":
    sys.exit(main())
