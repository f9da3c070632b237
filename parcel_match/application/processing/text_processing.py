# parcel_match/application/processing/text_processing.py

"""Text normalization and tokenization for noisy OCR label text

Two normalization modes are exposed because they serve different callers:

- normalize_compact: whitespace and punctuation removed entirely. Used by the
  similarity scorer, where OCR frequently inserts or drops spaces.
- normalize_spaced: words kept apart by single spaces (internal hyphens kept).
  Used wherever word boundaries matter, e.g. street suffix removal and
  address token matching.

Both keep only lowercase ASCII letters, digits and CJK ideographs, and both
are idempotent.
"""

# Standard library imports
from collections.abc import Iterable
from re import Match
from re import compile
from re import escape
from unicodedata import normalize as unicode_normalize

# Local imports
from parcel_match.infrastructure.config import get_config
from parcel_match.shared.utils.text_utils import is_cjk
from parcel_match.shared.utils.text_utils import normalize_unicode

CJK_CLASS = "\u3400-\u4dbf\u4e00-\u9fff"
CJK_RUN_PATTERN = compile(f"[{CJK_CLASS}]+")
LEADING_NUMBER_PATTERN = compile(r"\s*([0-9]+)")
# A numeric token with OCR letter confusions inside it (or a trailing O)
CONFUSED_NUMBER_PATTERN = compile(r"\b[0-9][0-9OoIlSB]*[0-9Oo]\b")
OCR_DIGIT_CORRECTIONS = str.maketrans({"O": "0", "o": "0", "I": "1", "l": "1", "S": "5", "B": "8"})

NAME_MIN_LENGTH = 2
NAME_MAX_LENGTH = 4
MARKER_CONTEXT_LENGTH = 3


def _is_kept(char: str) -> bool:
    return (char.isascii() and char.isalnum()) or is_cjk(char)


def normalize_compact(text: str, strip_digits: bool = False) -> str:
    """Normalize text for similarity comparison

    Args:
        text: Raw text
        strip_digits: Also remove digits (OCR often confuses digits and letters)

    Returns:
        Lowercase string of ASCII letters, digits and CJK ideographs only
    """
    if not text:
        return ""

    folded = normalize_unicode(text).lower()
    kept = "".join(char for char in folded if _is_kept(char))
    if strip_digits:
        return remove_digits(kept)
    return kept


def normalize(text: str) -> str:
    """Default normalization (compact mode)"""
    return normalize_compact(text)


def normalize_spaced(text: str) -> str:
    """Normalize text keeping single spaces between words

    Punctuation is removed, whitespace runs collapse to one space and
    hyphens survive only inside a word.

    Args:
        text: Raw text

    Returns:
        Normalized text with word boundaries preserved
    """
    if not text:
        return ""

    folded = normalize_unicode(text).lower()
    chars: list[str] = []
    for char in folded:
        if _is_kept(char) or char == "-":
            chars.append(char)
        elif char.isspace():
            chars.append(" ")

    words = [word.strip("-") for word in "".join(chars).split()]
    return " ".join(word for word in words if word)


def remove_digits(text: str) -> str:
    """Remove ASCII digits"""
    return "".join(char for char in text if not ("0" <= char <= "9"))


def tokenize(text: str, min_length: int = 2) -> list[str]:
    """Split text into normalized words of at least min_length characters"""
    return [word for word in normalize_spaced(text).split() if len(word) >= min_length]


def extract_keywords(text: str, markers: Iterable[str] | None = None) -> set[str]:
    """Extract CJK name candidates and address-unit anchored substrings

    Name candidates are CJK runs of 2-4 characters; for longer runs the 2 and
    3 character prefixes are used (surname plus given name). Address keywords
    are up to three characters immediately followed by an address unit
    marker such as 市 or 区, marker included.

    Args:
        text: Raw or normalized text
        markers: Address unit markers, defaults to the configured wordlist

    Returns:
        Deduplicated set of keywords (empty for purely Latin text)
    """
    # Spaced form so separate words never merge into one ideograph run
    normalized = normalize_spaced(text)
    if not normalized:
        return set()

    keywords: set[str] = set()
    for run_match in CJK_RUN_PATTERN.finditer(normalized):
        run = run_match.group(0)
        if NAME_MIN_LENGTH <= len(run) <= NAME_MAX_LENGTH:
            keywords.add(run)
        elif len(run) > NAME_MAX_LENGTH:
            keywords.add(run[:2])
            keywords.add(run[:3])

    marker_list = list(markers) if markers is not None else list(get_config().address_unit_markers)
    if marker_list:
        # Longest markers first so 大厦 is not cut down to a single character
        ordered = sorted(set(marker_list), key=lambda m: (-len(m), m))
        pattern = compile(
            f"[{CJK_CLASS}0-9]{{1,{MARKER_CONTEXT_LENGTH}}}"
            f"(?:{'|'.join(escape(m) for m in ordered)})"
        )
        keywords.update(m.group(0) for m in pattern.finditer(normalized))

    return keywords


def split_leading_number(text: str) -> tuple[str, str]:
    """Split a leading street number from the rest of the text

    Args:
        text: Raw label text

    Returns:
        Tuple of (leading digits or "", remainder with leading whitespace removed)
    """
    if not text:
        return "", ""

    text = unicode_normalize("NFKC", text)
    match = LEADING_NUMBER_PATTERN.match(text)
    if not match:
        return "", text.strip()
    return match.group(1), text[match.end() :].strip()


def extract_leading_number(text: str) -> str:
    """Longest prefix of decimal digits (after leading whitespace), or empty"""
    return split_leading_number(text)[0]


def remove_address_suffixes(text: str, suffixes: Iterable[str] | None = None) -> str:
    """Drop a trailing street type word (Road, St, Ave...)

    Only the final token is eligible and a single-token address is never
    emptied.

    Args:
        text: Raw address text
        suffixes: Street type words, defaults to the configured wordlist

    Returns:
        Spaced-normalized address without its street type
    """
    suffix_set = set(suffixes) if suffixes is not None else get_config().street_suffixes
    tokens = normalize_spaced(text).split()
    if len(tokens) > 1 and tokens[-1] in suffix_set:
        tokens = tokens[:-1]
    return " ".join(tokens)


def correct_ocr_digit_confusions(text: str) -> str:
    """Fix letters OCR commonly reads in place of digits, inside numbers only

    Only tokens that start with a digit and end with a digit (or O/o) are
    touched, so "3O" becomes "30" and "1B5" becomes "185", while "10B",
    "Sunnybank" or "BOX" are left alone. Letters are never turned into
    digits outside such a token, and digits are never turned into letters.

    Args:
        text: Raw label text

    Returns:
        Text with confusable letters corrected inside numeric tokens
    """
    if not text:
        return ""

    def _fix(match: Match[str]) -> str:
        return match.group(0).translate(OCR_DIGIT_CORRECTIONS)

    return CONFUSED_NUMBER_PATTERN.sub(_fix, text)
