"""
Entry point for running cyclo as a module.

Usage:
    python -m cyclo analyze ./src
    python -m cyclo --help
"""

import sys
from cyclo.cli import main

if __name__ == "__main__":
    sys.exit(main())
