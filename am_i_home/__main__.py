"""
Main entry point for the am_i_home package.

Allows running the tool as: python -m am_i_home
"""

import sys

from am_i_home.cli import main

if __name__ == "__main__":
    sys.exit(main())
