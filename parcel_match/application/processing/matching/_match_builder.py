# parcel_match/application/processing/matching/_match_builder.py

"""Build match results from policy outcomes"""

# Local imports
from parcel_match.core.domain.match_result import MatchOutcome
from parcel_match.core.domain.match_result import MatchResult
from parcel_match.core.domain.reference_record import ReferenceRecord


class MatchResultBuilder:
    """Builds MatchResult objects from records and policy outcomes"""

    @staticmethod
    def create_match_result(
        record: ReferenceRecord,
        outcome: MatchOutcome,
        query_text: str,
        ocr_confidence: float = 0.0,
        policy: str = "",
    ) -> MatchResult:
        """Create a match result

        Args:
            record: Matched reference record
            outcome: Accepted policy outcome for the record
            query_text: Original OCR text
            ocr_confidence: OCR engine confidence (0-100), passed through
            policy: Name of the policy that accepted the record

        Returns:
            MatchResult with all match information
        """
        return MatchResult(
            record=record,
            matched_fields=outcome.matched_fields,
            similarity=outcome.similarity,
            ocr_confidence=ocr_confidence,
            query_text=query_text,
            matched_segment=outcome.matched_segment,
            policy=policy,
        )
