"""
Module execution entry point.

Allows running with: python -m requester_cli
"""

import sys
from requester_cli.main import main

if __name__ == "__main__":
    sys.exit(main())
