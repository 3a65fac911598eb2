"""
Run with: python -m timingcurve
"""
import sys

from timingcurve.main import main

if __name__ == "__main__":
    sys.exit(main())
