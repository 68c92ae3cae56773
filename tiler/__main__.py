"""
Main entry point for running tiler as a module.

Usage:
    python -m tiler LAYOUT COUNT [options]
"""

from .preview import main

if __name__ == "__main__":
    import sys

    sys.exit(main())
