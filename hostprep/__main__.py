"""Allows running hostprep with `python -m hostprep`"""
import sys

from hostprep.main import main

if __name__ == "__main__":
    sys.exit(main())
