# parcel_match/application/processing/__init__.py

"""Core processing logic for normalization, scoring and matching"""

# Local imports
from parcel_match.application.processing.identifier_extractor import display_identifier
from parcel_match.application.processing.identifier_extractor import extract_identifier
from parcel_match.application.processing.matching import MatchingPolicy
from parcel_match.application.processing.matching import get_policy
from parcel_match.application.processing.matching_engine import RecordMatcher
from parcel_match.application.processing.similarity_calculator import (
    SimilarityCalculator,
)
from parcel_match.application.processing.text_processing import extract_keywords
from parcel_match.application.processing.text_processing import extract_leading_number
from parcel_match.application.processing.text_processing import normalize
from parcel_match.application.processing.text_processing import normalize_compact
from parcel_match.application.processing.text_processing import normalize_spaced
from parcel_match.application.processing.text_processing import remove_address_suffixes

__all__: list[str] = [
    "RecordMatcher",
    "SimilarityCalculator",
    "MatchingPolicy",
    "get_policy",
    "normalize",
    "normalize_compact",
    "normalize_spaced",
    "extract_keywords",
    "extract_leading_number",
    "remove_address_suffixes",
    "extract_identifier",
    "display_identifier",
]
