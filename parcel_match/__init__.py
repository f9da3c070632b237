# parcel_match/__init__.py

"""Parcel label matching package

A library for matching noisy OCR text read from parcel and PO box labels
against a reference table of recipients, returning a short ranked list of
candidate records with confidence scores.
"""

# Local imports
# High-level API
from parcel_match.application.processing.matching_engine import RecordMatcher
from parcel_match.application.processing.similarity_calculator import (
    SimilarityCalculator,
)

# Data models
from parcel_match.core.domain.errors import ConfigurationError
from parcel_match.core.domain.errors import ParcelMatchError
from parcel_match.core.domain.errors import ReferenceTableError
from parcel_match.core.domain.match_result import MatchOutcome
from parcel_match.core.domain.match_result import MatchResult
from parcel_match.core.domain.reference_record import ReferenceRecord
from parcel_match.core.domain.reference_record import ReferenceTable

# For users who want lower-level control
from parcel_match.application.processing.matching import get_policy
from parcel_match.infrastructure.config import ConfigLoader
from parcel_match.infrastructure.persistence import ReferenceTableLoader
from parcel_match.infrastructure.persistence import ReferenceTableStore

# Version info
__version__ = "0.1.0"

__all__: list[str] = [
    # Primary API
    "RecordMatcher",
    "ReferenceTableLoader",
    "ReferenceTableStore",
    # Data models
    "ReferenceRecord",
    "ReferenceTable",
    "MatchResult",
    "MatchOutcome",
    # Errors
    "ParcelMatchError",
    "ReferenceTableError",
    "ConfigurationError",
    # Advanced usage
    "SimilarityCalculator",
    "get_policy",
    "ConfigLoader",
    # Version
    "__version__",
]
