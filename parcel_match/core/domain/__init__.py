# parcel_match/core/domain/__init__.py

"""Core domain models"""

# Local imports
from parcel_match.core.domain.enums import PolicyName
from parcel_match.core.domain.enums import RecordField
from parcel_match.core.domain.enums import STREET_ADDRESS_FIELD
from parcel_match.core.domain.enums import StreetNumberCase
from parcel_match.core.domain.errors import ConfigurationError
from parcel_match.core.domain.errors import ParcelMatchError
from parcel_match.core.domain.errors import ReferenceTableError
from parcel_match.core.domain.match_result import FieldScore
from parcel_match.core.domain.match_result import MatchOutcome
from parcel_match.core.domain.match_result import MatchResult
from parcel_match.core.domain.reference_record import ReferenceRecord
from parcel_match.core.domain.reference_record import ReferenceTable

__all__ = [
    "ConfigurationError",
    "FieldScore",
    "MatchOutcome",
    "MatchResult",
    "ParcelMatchError",
    "PolicyName",
    "RecordField",
    "ReferenceRecord",
    "ReferenceTable",
    "ReferenceTableError",
    "STREET_ADDRESS_FIELD",
    "StreetNumberCase",
]
