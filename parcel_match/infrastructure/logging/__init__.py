# parcel_match/infrastructure/logging/__init__.py

"""Logging infrastructure for parcel_match.

This module provides centralized logging configuration and setup.
"""

# Local imports
from parcel_match.infrastructure.logging._setup import log_match_summary
from parcel_match.infrastructure.logging._setup import set_up_logging as setup_logging

__all__ = ["setup_logging", "log_match_summary"]
