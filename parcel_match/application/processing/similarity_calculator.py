# parcel_match/application/processing/similarity_calculator.py

"""Similarity scoring between short, noisy label strings"""

# Standard library imports
from logging import getLogger

# Third party imports
from Levenshtein import distance as levenshtein_distance

# Local imports
from parcel_match.application.processing.text_processing import extract_keywords
from parcel_match.application.processing.text_processing import normalize_compact
from parcel_match.infrastructure.config import ConfigLoader
from parcel_match.infrastructure.config import SimilarityWeights
from parcel_match.shared.mixins.mixins import ConfigurableMixin

logger = getLogger(__name__)


def edit_similarity(first: str, second: str) -> float:
    """1 - distance / longest length, 0 when both are empty"""
    longest = max(len(first), len(second))
    if longest == 0:
        return 0.0
    return 1.0 - levenshtein_distance(first, second) / longest


def jaccard_similarity(first: str, second: str) -> float:
    """Jaccard index over character sets (not multisets)"""
    first_chars = set(first)
    second_chars = set(second)
    union = first_chars | second_chars
    if not union:
        return 0.0
    return len(first_chars & second_chars) / len(union)


class SimilarityCalculator(ConfigurableMixin):
    """Computes bounded [0, 1] similarity between label text and record values

    Rules are applied in order and the first one that fires wins:

    1. either normalized string empty -> 0
    2. identical -> 1
    3. containment -> containment_base scaled up by the length ratio
    4. shared two-character prefix -> prefix_score refined by suffix edit distance
    5. weighted blend of edit distance, character Jaccard and keyword overlap
    """

    def __init__(self, config: ConfigLoader | None = None) -> None:
        """Initialize with scoring weights from configuration

        Args:
            config: Optional configuration loader
        """
        self.config = self._init_config(config)
        self.weights: SimilarityWeights = self.config.matching.similarity
        self.address_unit_markers = self.config.address_unit_markers

    def similarity(self, first: str, second: str, strip_digits: bool = False) -> float:
        """Similarity between two raw strings

        Args:
            first: First text (normalized internally)
            second: Second text (normalized internally)
            strip_digits: Ignore digits on both sides

        Returns:
            Similarity in [0, 1]
        """
        first_normalized = normalize_compact(first, strip_digits=strip_digits)
        second_normalized = normalize_compact(second, strip_digits=strip_digits)
        return self.normalized_similarity(first_normalized, second_normalized)

    def normalized_similarity(self, first: str, second: str) -> float:
        """Similarity between two already normalized strings"""
        if not first or not second:
            return 0.0
        if first == second:
            return 1.0

        containment = self.containment_score(first, second)
        if containment is not None:
            return containment

        weights = self.weights
        prefix_length = weights.prefix_length
        if (
            len(first) >= prefix_length
            and len(second) >= prefix_length
            and first[:prefix_length] == second[:prefix_length]
        ):
            suffix_similarity = edit_similarity(first[prefix_length:], second[prefix_length:])
            return _clamp(weights.prefix_score + weights.prefix_span * suffix_similarity)

        return _clamp(self.blended_similarity(first, second))

    def containment_score(self, first: str, second: str) -> float | None:
        """Score for one string containing the other, None when neither does"""
        if first in second:
            shorter, longer = first, second
        elif second in first:
            shorter, longer = second, first
        else:
            return None
        ratio = len(shorter) / len(longer)
        return _clamp(self.weights.containment_base + self.weights.containment_span * ratio)

    def blended_similarity(self, first: str, second: str) -> float:
        """Weighted blend of edit distance, Jaccard and keyword similarity

        Keyword similarity only takes part when both sides yield keywords;
        otherwise the edit and Jaccard weights are renormalized to sum to 1.
        """
        weights = self.weights
        edit = edit_similarity(first, second)
        jaccard = jaccard_similarity(first, second)
        keyword = self.keyword_similarity(first, second)

        if keyword is None or weights.keyword_weight == 0:
            total = weights.edit_weight + weights.jaccard_weight
            return (edit * weights.edit_weight + jaccard * weights.jaccard_weight) / total

        return (
            edit * weights.edit_weight
            + jaccard * weights.jaccard_weight
            + keyword * weights.keyword_weight
        )

    def keyword_similarity(self, first: str, second: str) -> float | None:
        """Fraction of keywords on both sides that pair up within a small edit distance

        Returns:
            Overlap in [0, 1], or None when either side has no keywords
        """
        first_keywords = extract_keywords(first, self.address_unit_markers)
        second_keywords = extract_keywords(second, self.address_unit_markers)
        if not first_keywords or not second_keywords:
            return None

        max_distance = self.weights.keyword_max_distance

        def _paired(keyword: str, candidates: set[str]) -> bool:
            return any(levenshtein_distance(keyword, other) <= max_distance for other in candidates)

        matched = sum(1 for kw in first_keywords if _paired(kw, second_keywords))
        matched += sum(1 for kw in second_keywords if _paired(kw, first_keywords))
        return matched / (len(first_keywords) + len(second_keywords))

    def find_best_substring(self, haystack: str, needle: str) -> str:
        """Locate needle inside haystack and return the original haystack text

        The match is found on normalized text and mapped back onto the
        original haystack by walking it character by character and counting
        how many normalized characters each original character produces.

        Args:
            haystack: Original (non-normalized) text, e.g. the OCR output
            needle: Text to look for

        Returns:
            The matching span of the original haystack, or "" when the
            normalized needle is not contained in the normalized haystack
        """
        normalized_haystack = normalize_compact(haystack)
        normalized_needle = normalize_compact(needle)
        if not normalized_needle:
            return ""

        start_index = normalized_haystack.find(normalized_needle)
        if start_index < 0:
            return ""
        end_index = start_index + len(normalized_needle)

        original_start: int | None = None
        consumed = 0
        for position, char in enumerate(haystack):
            produced = len(normalize_compact(char))
            if produced == 0:
                continue
            if original_start is None and consumed + produced > start_index:
                original_start = position
            consumed += produced
            if original_start is not None and consumed >= end_index:
                return haystack[original_start : position + 1]

        # Per-character normalization disagreed with whole-string normalization
        logger.debug(f"Could not map normalized span back onto original text: {haystack!r}")
        return ""


def _clamp(value: float) -> float:
    return max(0.0, min(1.0, value))
