# parcel_match/application/processing/matching/__init__.py

"""Matching policies for label text against reference records"""

# Local imports
from parcel_match.application.processing.matching._address_prefix import (
    AddressPrefixPolicy,
)
from parcel_match.application.processing.matching._base import MatchingPolicy
from parcel_match.application.processing.matching._keyword_weighted import (
    KeywordWeightedPolicy,
)
from parcel_match.application.processing.matching._match_builder import (
    MatchResultBuilder,
)
from parcel_match.application.processing.matching._multi_field import MultiFieldPolicy
from parcel_match.application.processing.matching._registry import POLICIES
from parcel_match.application.processing.matching._registry import get_policy
from parcel_match.application.processing.matching._score_combiner import ScoreCombiner
from parcel_match.application.processing.matching._street_address import (
    StreetAddressPolicy,
)
from parcel_match.application.processing.matching._street_address import (
    StreetAddressScores,
)

__all__ = [
    "AddressPrefixPolicy",
    "get_policy",
    "KeywordWeightedPolicy",
    "MatchingPolicy",
    "MatchResultBuilder",
    "MultiFieldPolicy",
    "POLICIES",
    "ScoreCombiner",
    "StreetAddressPolicy",
    "StreetAddressScores",
]
