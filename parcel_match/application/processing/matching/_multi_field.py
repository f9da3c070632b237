# parcel_match/application/processing/matching/_multi_field.py

"""Multi field matching policy

Each configured field is scored on its own and accepted against its own
threshold, so a label that only shows the recipient name can still match.
"""

# Standard library imports
from logging import getLogger
from re import compile
from re import escape

# Third party imports
from fuzzywuzzy import fuzz

# Local imports
from parcel_match.application.processing.identifier_extractor import extract_identifier
from parcel_match.application.processing.matching._base import MatchingPolicy
from parcel_match.application.processing.similarity_calculator import (
    SimilarityCalculator,
)
from parcel_match.application.processing.text_processing import correct_ocr_digit_confusions
from parcel_match.application.processing.text_processing import normalize_compact
from parcel_match.application.processing.text_processing import normalize_spaced
from parcel_match.core.domain.enums import PolicyName
from parcel_match.core.domain.enums import RecordField
from parcel_match.core.domain.match_result import FieldScore
from parcel_match.core.domain.match_result import MatchOutcome
from parcel_match.core.domain.reference_record import ReferenceRecord
from parcel_match.infrastructure.config import ConfigLoader

logger = getLogger(__name__)


class MultiFieldPolicy(MatchingPolicy):
    """Independent per-field scoring with per-field thresholds"""

    name = PolicyName.MULTI_FIELD.value

    def __init__(
        self,
        config: ConfigLoader | None = None,
        similarity_calculator: SimilarityCalculator | None = None,
    ) -> None:
        super().__init__(config, similarity_calculator)
        self.settings = self.config.matching.multi_field
        self.primary_field = self.settings.primary_field
        self.identifier_markers = self.config.identifier_markers

    def _match(self, ocr_text: str, record: ReferenceRecord) -> MatchOutcome:
        thresholds = self.settings.thresholds
        segments = self.candidate_segments(ocr_text)

        field_scores: list[FieldScore] = []
        for field in thresholds:
            value = record.field(field).strip()
            if not value:
                continue
            field_scores.append(self.score_field(field, value, ocr_text, segments))

        if not field_scores:
            return MatchOutcome.rejected()

        passing = [fs for fs in field_scores if fs.similarity >= thresholds[fs.field]]
        best = max(passing or field_scores, key=lambda fs: fs.similarity)

        logger.debug(
            f"Multi field '{ocr_text}': "
            + ", ".join(f"{fs.field}={fs.similarity:.2f}" for fs in field_scores)
        )

        return MatchOutcome(
            similarity=best.similarity,
            matched_fields=tuple(fs.field for fs in passing),
            matched_segment=best.evidence if passing else "",
            field_scores=tuple(field_scores),
        )

    def score_field(self, field: str, value: str, ocr_text: str, segments: list[str]) -> FieldScore:
        """Best similarity of one field value against the label and its lines

        Args:
            field: Record field name
            value: Non-empty field value
            ocr_text: Raw OCR text
            segments: Full label text followed by its lines

        Returns:
            FieldScore with the matched label text as evidence
        """
        calculator = self.similarity_calculator
        use_fuzzy = (
            field == RecordField.NAME.value
            and len(normalize_compact(value)) >= self.settings.min_fuzzy_length
        )

        best_score = 0.0
        best_index = 0
        for index, segment in enumerate(segments):
            score = calculator.similarity(segment, value)
            if field == RecordField.NAME.value:
                score = max(score, calculator.similarity(segment, value, strip_digits=True))
            if use_fuzzy:
                ratio = fuzz.token_sort_ratio(normalize_spaced(segment), normalize_spaced(value))
                score = max(score, ratio / 100.0)
            if score > best_score:
                best_score, best_index = score, index

        if field == RecordField.IDENTIFIER.value:
            best_score = max(best_score, self._identifier_token_score(value, ocr_text))

        evidence = calculator.find_best_substring(ocr_text, value)
        # segments[0] is the whole label, only a single line is usable evidence
        if not evidence and best_index > 0:
            evidence = segments[best_index]
        return FieldScore(field=field, similarity=min(1.0, best_score), evidence=evidence)

    def _identifier_token_score(self, value: str, ocr_text: str) -> float:
        token = extract_identifier(value, self.identifier_markers)
        if not (token.isascii() and token.isdigit()):
            return 0.0
        corrected = correct_ocr_digit_confusions(ocr_text)
        if compile(rf"(?<!\d){escape(token)}(?!\d)").search(corrected):
            return self.settings.identifier_token_score
        return 0.0
