"""
Entry point for running the stringutils CLI as a module.

Usage:
    python -m stringutils tokenize , "a, b, c"
"""

import sys

from stringutils.cli import main

if __name__ == "__main__":
    sys.exit(main())
