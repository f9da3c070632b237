# parcel_match/core/domain/enums.py

"""Domain enumerations for parcel_match"""

# Standard library imports
from enum import Enum


class PolicyName(Enum):
    """Available record matching policies"""

    STREET_ADDRESS = "street_address"  # Street number + street name decomposition
    ADDRESS_PREFIX = "address_prefix"  # First characters of the address only
    MULTI_FIELD = "multi_field"  # Independent per-field thresholds
    KEYWORD_WEIGHTED = "keyword_weighted"  # Similarity blended with keyword overlap


class StreetNumberCase(Enum):
    """How street number information on the label relates to the record

    Each case has its own number score and acceptance rule in the
    street address policy.
    """

    NUMERIC_BOTH = "numeric_both"  # Label number and numeric record number
    LABEL_NUMBER_RECORD_TEXT = "label_number_record_text"  # Record uses a named prefix
    LABEL_TEXT_RECORD_TEXT = "label_text_record_text"  # No label number, named prefix
    NO_NUMBERS = "no_numbers"  # Nothing to contradict
    LABEL_NUMBER_ONLY = "label_number_only"  # Record has no street number
    RECORD_NUMBER_ONLY = "record_number_only"  # Label has no leading number


class RecordField(Enum):
    """Canonical reference record field names"""

    NAME = "name"
    ADDRESS = "address"
    STREET_NUMBER = "streetNumber"
    SUBURB = "suburb"
    IDENTIFIER = "identifier"


# Synthetic field reported by the street address policy
STREET_ADDRESS_FIELD = "streetAddress"
