# parcel_match/infrastructure/__init__.py

"""System infrastructure components for configuration, logging and persistence.

This module provides infrastructure services including configuration
management and reference table loading and storage.
"""

# Local imports
from parcel_match.infrastructure.config import ConfigLoader
from parcel_match.infrastructure.persistence import ReferenceTableLoader
from parcel_match.infrastructure.persistence import ReferenceTableStore

__all__ = ["ConfigLoader", "ReferenceTableLoader", "ReferenceTableStore"]
