# parcel_match/application/processing/matching/_address_prefix.py

"""Address prefix matching policy"""

# Standard library imports
from logging import getLogger

# Local imports
from parcel_match.application.processing.matching._base import MatchingPolicy
from parcel_match.application.processing.similarity_calculator import (
    SimilarityCalculator,
)
from parcel_match.application.processing.text_processing import normalize_compact
from parcel_match.core.domain.enums import PolicyName
from parcel_match.core.domain.enums import RecordField
from parcel_match.core.domain.match_result import FieldScore
from parcel_match.core.domain.match_result import MatchOutcome
from parcel_match.core.domain.reference_record import ReferenceRecord
from parcel_match.infrastructure.config import ConfigLoader

logger = getLogger(__name__)


class AddressPrefixPolicy(MatchingPolicy):
    """Match the first few normalized characters of the record address

    Cheap and robust when labels are dominated by address text, but blind
    to street numbers and names.
    """

    name = PolicyName.ADDRESS_PREFIX.value
    primary_field = RecordField.ADDRESS.value

    def __init__(
        self,
        config: ConfigLoader | None = None,
        similarity_calculator: SimilarityCalculator | None = None,
    ) -> None:
        super().__init__(config, similarity_calculator)
        self.settings = self.config.matching.address_prefix

    def _match(self, ocr_text: str, record: ReferenceRecord) -> MatchOutcome:
        settings = self.settings
        prefix = normalize_compact(record.address)[: settings.prefix_length]
        if not prefix:
            return MatchOutcome.rejected()

        ocr_normalized = normalize_compact(ocr_text)
        segment = ""
        if prefix in ocr_normalized:
            similarity = settings.containment_score
            matched_chars = len(prefix)
            segment = self.similarity_calculator.find_best_substring(ocr_text, prefix)
        else:
            similarity = self.similarity_calculator.normalized_similarity(ocr_normalized, prefix)
            # Characters equal at the same position, from the start of the label
            matched_chars = sum(1 for a, b in zip(ocr_normalized, prefix) if a == b)
            if similarity > settings.threshold:
                segment = self.similarity_calculator.find_best_substring(ocr_text, prefix)

        if not segment and similarity > settings.segment_fallback_min:
            segment = ocr_text[: settings.segment_fallback_length].strip()

        accepted = similarity >= settings.threshold and matched_chars > settings.min_matched_chars
        logger.debug(
            f"Address prefix '{prefix}' (from '{record.address}') vs '{ocr_text}': "
            f"{similarity:.2f}, matched chars {matched_chars}, accepted={accepted}"
        )

        field = RecordField.ADDRESS.value
        return MatchOutcome(
            similarity=similarity,
            matched_fields=(field,) if accepted else (),
            matched_segment=segment,
            field_scores=(FieldScore(field=field, similarity=similarity, evidence=segment),),
        )
