"""
Module execution entry point.

Allows running with: python -m cellguard_cli
"""

import sys
from cellguard_cli.main import main

if __name__ == "__main__":
    sys.exit(main())
