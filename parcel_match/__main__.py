#!/usr/bin/env python3
"""
Parcel Label Matching Tool - Main Entry Point

This module allows the package to be run as a script:
    python -m parcel_match
"""

# Local imports
from parcel_match.adapters.cli.main import main

if __name__ == "__main__":
    raise SystemExit(main())
