# parcel_match/core/types/__init__.py

"""Type definitions for parcel_match

Pure type definitions with no implementation logic.
"""

# Local imports
from parcel_match.core.types.json import JSONDict
from parcel_match.core.types.json import JSONList
from parcel_match.core.types.json import JSONPrimitive
from parcel_match.core.types.json import JSONType
from parcel_match.core.types.results import CachedTableDict
from parcel_match.core.types.results import MatchResultDict

__all__ = [
    "JSONDict",
    "JSONList",
    "JSONPrimitive",
    "JSONType",
    "CachedTableDict",
    "MatchResultDict",
]
