# parcel_match/application/processing/matching/_base.py

"""Base class for record matching policies"""

# Standard library imports
from collections.abc import Mapping
from logging import getLogger

# Local imports
from parcel_match.application.processing.similarity_calculator import (
    SimilarityCalculator,
)
from parcel_match.core.domain.match_result import MatchOutcome
from parcel_match.core.domain.reference_record import ReferenceRecord
from parcel_match.infrastructure.config import ConfigLoader
from parcel_match.shared.mixins.mixins import ConfigurableMixin

logger = getLogger(__name__)


class MatchingPolicy(ConfigurableMixin):
    """A named strategy deciding whether one record matches the label text

    Subclasses implement _match. Policies hold configuration only, so one
    instance can be shared across threads and match passes.
    """

    name: str = ""
    primary_field: str = ""

    def __init__(
        self,
        config: ConfigLoader | None = None,
        similarity_calculator: SimilarityCalculator | None = None,
    ) -> None:
        """Initialize policy with configuration and scorer

        Args:
            config: Configuration loader
            similarity_calculator: Similarity scorer, created from config when None
        """
        self.config = self._init_config(config)
        self.similarity_calculator = similarity_calculator or SimilarityCalculator(self.config)

    def match(self, ocr_text: str, record: Mapping[str, object]) -> MatchOutcome:
        """Score one record against the label text

        Args:
            ocr_text: Raw OCR text of the label
            record: Reference record or plain row mapping

        Returns:
            MatchOutcome, with empty matched_fields when the record is rejected
        """
        if not ocr_text or not ocr_text.strip():
            return MatchOutcome.rejected()
        return self._match(ocr_text, ReferenceRecord.coerce(record))

    def _match(self, ocr_text: str, record: ReferenceRecord) -> MatchOutcome:
        raise NotImplementedError

    @staticmethod
    def candidate_segments(ocr_text: str) -> list[str]:
        """The full label text followed by each non-empty line of it

        Labels are printed in lines (name, street, suburb), so comparing a
        short field against a single line is often much sharper than
        comparing it against the whole label.
        """
        lines = [line.strip() for line in ocr_text.splitlines() if line.strip()]
        if len(lines) <= 1:
            return [ocr_text]
        return [ocr_text, *lines]

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r})"
