# parcel_match/core/types/results.py

"""Result-related TypedDict definitions"""

# Standard library imports
from typing import TypedDict


class MatchResultDict(TypedDict):
    """External representation of one ranked match"""

    record: dict[str, str]
    matchedFields: list[str]
    similarity: float
    confidence: float
    originalQueryText: str
    matchedSegment: str


class CachedTableDict(TypedDict):
    """On-disk representation of a cached reference table"""

    source_name: str
    loaded_at: str
    size_bytes: int
    rows: list[dict[str, str]]


__all__ = ["MatchResultDict", "CachedTableDict"]
