"""
Run with: python -m worldmap
"""
import sys

from worldmap.app.main import main

if __name__ == "__main__":
    sys.exit(main())
