# parcel_match/shared/mixins/__init__.py

"""Shared mixins for cross-cutting concerns"""

# Local imports
from parcel_match.shared.mixins.mixins import ConfigurableMixin

__all__ = ["ConfigurableMixin"]
