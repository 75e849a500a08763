"""
Entry point for running delta_render as a module.

Usage:
    python -m delta_render document.json --format html --output document.html
"""

import sys

from .cli import main

if __name__ == "__main__":
    sys.exit(main() or 0)
