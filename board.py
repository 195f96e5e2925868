#!/usr/bin/env python3
"""Thin loader delegating to the trackboard CLI."""

import sys

from trackboard.interface.cli import main

if __name__ == "__main__":
    sys.exit(main())
