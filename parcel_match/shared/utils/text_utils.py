# parcel_match/shared/utils/text_utils.py

"""Character-level text utilities shared by the normalizer and loaders"""

# Standard library imports
from unicodedata import normalize as unicode_normalize

# Third party imports
from unidecode import unidecode

# CJK Unified Ideographs Extension A and the main block
CJK_RANGES = ((0x3400, 0x4DBF), (0x4E00, 0x9FFF))


def is_cjk(char: str) -> bool:
    """Whether a single character is a CJK ideograph"""
    if len(char) != 1:
        return False
    code = ord(char)
    return any(start <= code <= end for start, end in CJK_RANGES)


def ascii_fold(text: str) -> str:
    """Convert accented Latin characters to their ASCII equivalents

    CJK ideographs are left untouched; unidecode would otherwise turn them
    into pinyin and break comparisons against Chinese reference data.

    Args:
        text: Input text with potential accented characters

    Returns:
        Text with every non-CJK character folded to ASCII
    """
    if not text:
        return ""

    if text.isascii():
        return text

    parts: list[str] = []
    for char in text:
        if char.isascii() or is_cjk(char):
            parts.append(char)
        else:
            parts.append(unidecode(char))
    return "".join(parts)


def normalize_unicode(text: str) -> str:
    """Apply NFKC normalization and ASCII folding

    NFKC turns full-width digits and letters (common in CJK label text)
    into their ASCII forms before folding.

    Args:
        text: Raw input text

    Returns:
        Normalized text
    """
    if not text:
        return ""

    return ascii_fold(unicode_normalize("NFKC", text))
