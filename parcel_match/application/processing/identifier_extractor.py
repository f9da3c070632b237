# parcel_match/application/processing/identifier_extractor.py

"""Short identifier tokens for display next to a match

Reference tables usually carry the value a user wants to read off a label
(a PO box or locker number) in a free-form column such as "PO Box 1234".
"""

# Standard library imports
from collections.abc import Iterable
from collections.abc import Mapping
from re import IGNORECASE
from re import compile
from re import escape

# Local imports
from parcel_match.core.domain.enums import RecordField
from parcel_match.infrastructure.config import get_config

DIGIT_RUN_PATTERN = compile(r"\d+")

# Raw column names checked after the canonical identifier field
FALLBACK_IDENTIFIER_COLUMNS = ("PO Box", "po box", "pobox")


def extract_identifier(value: str, markers: Iterable[str] | None = None) -> str:
    """Extract a short identifier from a raw field value

    Digits following a marker token ("PO Box", "Locked Bag"...) win, then
    the first run of digits, then the stripped value itself.

    Args:
        value: Raw field value
        markers: Marker tokens, defaults to the configured identifier markers

    Returns:
        Identifier token, empty string for empty input
    """
    if not value:
        return ""

    text = value.strip()
    marker_list = list(markers) if markers is not None else list(get_config().identifier_markers)
    # Longest first so "po box" is tried before "box"
    for marker in sorted(marker_list, key=len, reverse=True):
        match = compile(rf"{escape(marker)}\s*[#:.-]?\s*(\d+)", IGNORECASE).search(text)
        if match:
            return match.group(1)

    digits = DIGIT_RUN_PATTERN.search(text)
    if digits:
        return digits.group(0)
    return text


def display_identifier(record: Mapping[str, str]) -> str:
    """Identifier to show for a record, checking common raw column names too"""
    for column in (RecordField.IDENTIFIER.value, *FALLBACK_IDENTIFIER_COLUMNS):
        value = record.get(column) or ""
        if value.strip():
            return extract_identifier(value)
    return ""
