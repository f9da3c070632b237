# parcel_match/adapters/cli/__init__.py

"""Command line interface for parcel_match"""

# Local imports
from parcel_match.adapters.cli.main import main

__all__ = ["main"]
