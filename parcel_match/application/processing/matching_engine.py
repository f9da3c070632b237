# parcel_match/application/processing/matching_engine.py

"""Ranking engine matching label text against a reference table

The engine is stateless between calls: every call scores the records it is
given and returns a fresh ranked list.
"""

# Standard library imports
from collections.abc import Iterable
from collections.abc import Mapping
from logging import getLogger

# Local imports
from parcel_match.application.processing.matching._base import MatchingPolicy
from parcel_match.application.processing.matching._match_builder import (
    MatchResultBuilder,
)
from parcel_match.application.processing.matching._registry import get_policy
from parcel_match.application.processing.similarity_calculator import (
    SimilarityCalculator,
)
from parcel_match.core.domain.enums import PolicyName
from parcel_match.core.domain.match_result import MatchOutcome
from parcel_match.core.domain.match_result import MatchResult
from parcel_match.core.domain.reference_record import ReferenceRecord
from parcel_match.infrastructure.config import ConfigLoader
from parcel_match.shared.mixins.mixins import ConfigurableMixin

logger = getLogger(__name__)


class RecordMatcher(ConfigurableMixin):
    """Finds and ranks the reference records that match a label"""

    def __init__(
        self,
        config: ConfigLoader | None = None,
        policy: MatchingPolicy | PolicyName | str | None = None,
        similarity_calculator: SimilarityCalculator | None = None,
    ):
        """Initialize with configuration and a matching policy

        Args:
            config: Configuration loader, uses default if None
            policy: Policy instance or name, defaults to the configured policy

        Raises:
            ConfigurationError: If the policy name is unknown
        """
        self.config = self._init_config(config)
        self.similarity_calculator = similarity_calculator or SimilarityCalculator(self.config)

        if isinstance(policy, MatchingPolicy):
            self.policy = policy
        else:
            self.policy = get_policy(
                policy or self.config.matching.policy, self.config, self.similarity_calculator
            )

        self.max_results = self.config.matching.max_results
        self.match_builder = MatchResultBuilder()

    def match_record(self, ocr_text: str, record: Mapping[str, object]) -> MatchOutcome:
        """Apply the policy to a single record"""
        return self.policy.match(ocr_text, record)

    def find_matches(
        self,
        ocr_text: str,
        records: Iterable[Mapping[str, object]],
        ocr_confidence: float = 0.0,
        max_results: int | None = None,
    ) -> list[MatchResult]:
        """Rank the records matching the label text

        Records without any matched field are dropped. The rest are ordered
        with matches on the policy's primary field first, then by descending
        similarity, then by their position in the table.

        Args:
            ocr_text: Raw OCR text of the label
            records: Reference records (a ReferenceTable or any iterable of row mappings)
            ocr_confidence: OCR engine confidence (0-100), passed through
            max_results: Maximum number of results, configured default when None

        Returns:
            Ranked list of at most max_results MatchResult objects
        """
        if not ocr_text or not ocr_text.strip():
            return []

        limit = self.max_results if max_results is None else max(0, max_results)
        primary_field = self.policy.primary_field

        candidates: list[tuple[bool, float, int, ReferenceRecord, MatchOutcome]] = []
        scanned = 0
        for index, row in enumerate(records):
            scanned += 1
            record = ReferenceRecord.coerce(row)
            outcome = self.policy.match(ocr_text, record)
            if not outcome.accepted:
                continue
            primary_missed = primary_field not in outcome.matched_fields
            candidates.append((primary_missed, -outcome.similarity, index, record, outcome))

        candidates.sort(key=lambda candidate: candidate[:3])

        results = [
            self.match_builder.create_match_result(
                record, outcome, ocr_text, ocr_confidence, self.policy.name
            )
            for _, _, _, record, outcome in candidates[:limit]
        ]

        logger.debug(
            f"Matched '{ocr_text}' against {scanned} records with {self.policy.name}: "
            f"{len(candidates)} accepted, returning {len(results)}"
        )
        return results
