"""
Creational CLI entry point.

Usage:
    python -m creational.cli gui --platform linux
    python -m creational.cli shapes --obround 9 2
    python -m creational.cli all
"""

import sys
from .main import main

if __name__ == "__main__":
    sys.exit(main())
