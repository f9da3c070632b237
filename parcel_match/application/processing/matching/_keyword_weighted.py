# parcel_match/application/processing/matching/_keyword_weighted.py

"""Keyword weighted matching policy, tuned for Chinese name and address labels"""

# Standard library imports
from logging import getLogger

# Local imports
from parcel_match.application.processing.matching._base import MatchingPolicy
from parcel_match.application.processing.matching._score_combiner import ScoreCombiner
from parcel_match.application.processing.similarity_calculator import (
    SimilarityCalculator,
)
from parcel_match.core.domain.enums import PolicyName
from parcel_match.core.domain.enums import RecordField
from parcel_match.core.domain.match_result import FieldScore
from parcel_match.core.domain.match_result import MatchOutcome
from parcel_match.core.domain.reference_record import ReferenceRecord
from parcel_match.infrastructure.config import ConfigLoader

logger = getLogger(__name__)


class KeywordWeightedPolicy(MatchingPolicy):
    """Blend overall text similarity with name/address keyword overlap"""

    name = PolicyName.KEYWORD_WEIGHTED.value
    primary_field = RecordField.NAME.value

    def __init__(
        self,
        config: ConfigLoader | None = None,
        similarity_calculator: SimilarityCalculator | None = None,
    ) -> None:
        super().__init__(config, similarity_calculator)
        self.settings = self.config.matching.keyword_weighted
        self.score_combiner = ScoreCombiner(self.config)

    def _match(self, ocr_text: str, record: ReferenceRecord) -> MatchOutcome:
        settings = self.settings
        calculator = self.similarity_calculator

        values = {field: record.field(field).strip() for field in settings.fields}
        values = {field: value for field, value in values.items() if value}
        if not values:
            return MatchOutcome.rejected()

        combined = " ".join(values.values())
        similarity = calculator.similarity(ocr_text, combined)
        overlap = calculator.keyword_similarity(ocr_text, combined)
        confidence = self.score_combiner.combine_keyword_scores(similarity, overlap)

        field_scores = []
        for field, value in values.items():
            field_overlap = calculator.keyword_similarity(ocr_text, value) or 0.0
            score = max(calculator.similarity(ocr_text, value), field_overlap)
            evidence = calculator.find_best_substring(ocr_text, value)
            field_scores.append(FieldScore(field=field, similarity=score, evidence=evidence))

        accepted = confidence >= settings.threshold
        matched = [fs for fs in field_scores if fs.similarity >= settings.field_threshold]

        logger.debug(
            f"Keyword weighted '{ocr_text}' vs '{combined}': similarity={similarity:.2f} "
            f"keywords={overlap} confidence={confidence:.2f} accepted={accepted}"
        )

        if not accepted or not matched:
            return MatchOutcome(similarity=confidence, field_scores=tuple(field_scores))

        segment = next((fs.evidence for fs in matched if fs.evidence), "")
        return MatchOutcome(
            similarity=confidence,
            matched_fields=tuple(fs.field for fs in matched),
            matched_segment=segment,
            field_scores=tuple(field_scores),
        )
