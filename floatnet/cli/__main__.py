#!/usr/bin/env python3
"""
Entry point for floatnet CLI tool.
"""

import sys

from floatnet.cli.cli import main

if __name__ == "__main__":
    sys.exit(main())
