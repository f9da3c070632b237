# parcel_match/infrastructure/persistence/__init__.py

"""Reference table loading and storage"""

# Local imports
from parcel_match.infrastructure.persistence._reference_loader import (
    ReferenceTableLoader,
)
from parcel_match.infrastructure.persistence._table_store import ReferenceTableStore

__all__ = ["ReferenceTableLoader", "ReferenceTableStore"]
