# parcel_match/application/processing/matching/_street_address.py

"""Street address matching policy

The label's leading street number and the rest of its text are scored
separately against the record's street number and street name, combined
into a composite, and accepted by a rule that depends on which side
carries street number information.
"""

# Standard library imports
from dataclasses import dataclass
from logging import getLogger
from unicodedata import normalize as unicode_normalize

# Local imports
from parcel_match.application.processing.matching._base import MatchingPolicy
from parcel_match.application.processing.matching._score_combiner import ScoreCombiner
from parcel_match.application.processing.matching._score_combiner import clamp
from parcel_match.application.processing.similarity_calculator import (
    SimilarityCalculator,
)
from parcel_match.application.processing.text_processing import correct_ocr_digit_confusions
from parcel_match.application.processing.text_processing import normalize_compact
from parcel_match.application.processing.text_processing import normalize_spaced
from parcel_match.application.processing.text_processing import remove_address_suffixes
from parcel_match.application.processing.text_processing import split_leading_number
from parcel_match.application.processing.text_processing import tokenize
from parcel_match.core.domain.enums import PolicyName
from parcel_match.core.domain.enums import STREET_ADDRESS_FIELD
from parcel_match.core.domain.enums import StreetNumberCase
from parcel_match.core.domain.match_result import FieldScore
from parcel_match.core.domain.match_result import MatchOutcome
from parcel_match.core.domain.reference_record import ReferenceRecord
from parcel_match.infrastructure.config import ConfigLoader

logger = getLogger(__name__)


@dataclass(slots=True, frozen=True)
class StreetAddressScores:
    """Partial scores of one label/record comparison"""

    case: StreetNumberCase
    number_score: float
    body_score: float
    whole_score: float
    composite: float


class StreetAddressPolicy(MatchingPolicy):
    """Match on street number plus street name (the default policy)"""

    name = PolicyName.STREET_ADDRESS.value
    primary_field = STREET_ADDRESS_FIELD

    def __init__(
        self,
        config: ConfigLoader | None = None,
        similarity_calculator: SimilarityCalculator | None = None,
    ) -> None:
        super().__init__(config, similarity_calculator)
        self.thresholds = self.config.matching.street_address
        self.correct_digits = self.config.matching.enable_ocr_digit_correction
        self.street_suffixes = self.config.street_suffixes
        self.score_combiner = ScoreCombiner(self.config)

    def _match(self, ocr_text: str, record: ReferenceRecord) -> MatchOutcome:
        if not record.address.strip():
            return MatchOutcome.rejected()

        scores = self.score(ocr_text, record)
        accepted = self.is_accepted(scores)

        logger.debug(
            f"Street address '{ocr_text}' vs '{record.street_number} {record.address}': "
            f"case={scores.case.value} number={scores.number_score:.2f} "
            f"body={scores.body_score:.2f} whole={scores.whole_score:.2f} "
            f"composite={scores.composite:.2f} accepted={accepted}"
        )

        if not accepted:
            return MatchOutcome.rejected(scores.composite)

        return MatchOutcome(
            similarity=scores.composite,
            matched_fields=(STREET_ADDRESS_FIELD,),
            matched_segment=ocr_text,
            field_scores=(
                FieldScore(field=STREET_ADDRESS_FIELD, similarity=scores.composite, evidence=ocr_text),
            ),
        )

    def score(self, ocr_text: str, record: ReferenceRecord) -> StreetAddressScores:
        """Compute number, address body, whole string and composite scores

        Args:
            ocr_text: Raw OCR text of the label
            record: Reference record with a non-empty address

        Returns:
            StreetAddressScores for the pair
        """
        number_source = correct_ocr_digit_confusions(ocr_text) if self.correct_digits else ocr_text
        label_number, label_remainder = split_leading_number(number_source)
        if not label_number:
            # Nothing was split off, keep the uncorrected text for the body
            label_remainder = ocr_text.strip()

        # Same width folding as the label side, so "３４" is numeric
        record_number = unicode_normalize("NFKC", record.street_number).strip()
        case = self.classify(label_number, record_number)

        number_score = self.number_score(case, label_number, record_number, ocr_text)
        body_score = self.address_body_score(label_remainder or ocr_text, record.address)
        whole_score = self.whole_string_score(ocr_text, record_number, record.address)
        composite = self.score_combiner.combine_street_scores(number_score, body_score, whole_score)

        return StreetAddressScores(case, number_score, body_score, whole_score, composite)

    @staticmethod
    def classify(label_number: str, record_number: str) -> StreetNumberCase:
        """Which side carries street number information, and of what kind"""
        record_numeric = record_number.isascii() and record_number.isdigit()
        if label_number and record_numeric:
            return StreetNumberCase.NUMERIC_BOTH
        if record_number and not record_numeric:
            if label_number:
                return StreetNumberCase.LABEL_NUMBER_RECORD_TEXT
            return StreetNumberCase.LABEL_TEXT_RECORD_TEXT
        if not label_number and not record_number:
            return StreetNumberCase.NO_NUMBERS
        if label_number:
            return StreetNumberCase.LABEL_NUMBER_ONLY
        return StreetNumberCase.RECORD_NUMBER_ONLY

    def number_score(
        self, case: StreetNumberCase, label_number: str, record_number: str, ocr_text: str
    ) -> float:
        """Street number or named prefix score for a classified pair"""
        t = self.thresholds
        match case:
            case StreetNumberCase.NUMERIC_BOTH:
                return t.number_exact if label_number == record_number else t.number_mismatch
            case StreetNumberCase.LABEL_NUMBER_RECORD_TEXT:
                return t.number_named_prefix
            case StreetNumberCase.LABEL_TEXT_RECORD_TEXT:
                return self._named_prefix_score(ocr_text, record_number)
            case StreetNumberCase.NO_NUMBERS:
                return t.no_numbers
            case StreetNumberCase.LABEL_NUMBER_ONLY:
                return t.label_number_only
            case _:
                return t.record_number_only

    def _named_prefix_score(self, ocr_text: str, record_prefix: str) -> float:
        t = self.thresholds
        words = normalize_spaced(ocr_text).split()
        if not words:
            return t.prefix_unmatched

        first_word = words[0]
        if self.similarity_calculator.similarity(first_word, record_prefix) >= t.prefix_similarity_min:
            return t.prefix_similar

        first_normalized = normalize_compact(first_word)
        prefix_normalized = normalize_compact(record_prefix)
        if first_normalized and prefix_normalized and (
            first_normalized in prefix_normalized or prefix_normalized in first_normalized
        ):
            return t.prefix_contained
        return t.prefix_unmatched

    def address_body_score(self, label_text: str, record_address: str) -> float:
        """Score the street name part of the label against the record address

        Args:
            label_text: Label text with the leading street number removed
            record_address: Record address (street name)

        Returns:
            Address body score in [0, 1]
        """
        t = self.thresholds
        calculator = self.similarity_calculator

        label_filtered = remove_address_suffixes(label_text, self.street_suffixes)
        record_filtered = remove_address_suffixes(record_address, self.street_suffixes)
        label_compact = label_filtered.replace(" ", "")
        record_compact = record_filtered.replace(" ", "")

        if label_compact and record_compact:
            if label_compact in record_compact or record_compact in label_compact:
                shorter, longer = sorted((len(label_compact), len(record_compact)))
                return clamp(t.body_containment_base + t.body_containment_span * shorter / longer)

        label_tokens = tokenize(label_filtered, t.min_token_length)
        record_tokens = tokenize(record_filtered, t.min_token_length)
        score = self._token_score(label_tokens, record_tokens)

        if score < t.body_fallback_below:
            fallback = calculator.similarity(label_text, record_address) * t.body_fallback_scale
            score = max(score, fallback)

        return clamp(score)

    def _token_score(self, label_tokens: list[str], record_tokens: list[str]) -> float:
        t = self.thresholds
        if not label_tokens or not record_tokens:
            return 0.0

        calculator = self.similarity_calculator
        record_bigrams = [
            f"{first} {second}" for first, second in zip(record_tokens, record_tokens[1:])
        ]
        bigram_bonus = 0.0
        for first, second in zip(label_tokens, label_tokens[1:]):
            label_bigram = f"{first} {second}"
            if any(
                calculator.similarity(label_bigram, record_bigram) >= t.bigram_similarity_min
                for record_bigram in record_bigrams
            ):
                bigram_bonus += t.bigram_bonus

        matched_tokens = 0
        for token in label_tokens:
            best = max(calculator.similarity(token, other) for other in record_tokens)
            if best >= t.token_similarity_min:
                matched_tokens += 1

        base = matched_tokens / len(label_tokens) * t.token_weight
        return min(t.body_cap, base + bigram_bonus)

    def whole_string_score(self, ocr_text: str, record_number: str, record_address: str) -> float:
        """Whole label against street number plus address"""
        t = self.thresholds
        label_normalized = normalize_compact(ocr_text)
        record_text = f"{record_number} {record_address}" if record_number else record_address
        record_normalized = normalize_compact(record_text)
        if not label_normalized or not record_normalized:
            return 0.0

        if label_normalized in record_normalized or record_normalized in label_normalized:
            shorter, longer = sorted((len(label_normalized), len(record_normalized)))
            return clamp(t.whole_containment_base + t.whole_containment_span * shorter / longer)

        similarity = self.similarity_calculator.normalized_similarity(
            label_normalized, record_normalized
        )
        return clamp(similarity * t.whole_similarity_scale)

    def is_accepted(self, scores: StreetAddressScores) -> bool:
        """Case by case acceptance with a composite fallback for every case"""
        t = self.thresholds
        if scores.composite >= t.accept_composite:
            return True

        body = scores.body_score
        match scores.case:
            case StreetNumberCase.NUMERIC_BOTH:
                return scores.number_score >= t.number_exact and body >= t.accept_numeric_body
            case StreetNumberCase.LABEL_NUMBER_RECORD_TEXT:
                return body >= t.accept_label_number_body
            case StreetNumberCase.LABEL_TEXT_RECORD_TEXT:
                return (
                    scores.number_score >= t.accept_prefix_number and body >= t.accept_prefix_body
                ) or body >= t.accept_prefix_body_alone
            case StreetNumberCase.NO_NUMBERS:
                return body >= t.accept_no_numbers_body or scores.whole_score >= t.accept_no_numbers_whole
            case _:
                return scores.composite >= t.accept_other_composite or body >= t.accept_other_body
