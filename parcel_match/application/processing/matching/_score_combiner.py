# parcel_match/application/processing/matching/_score_combiner.py

"""Score combination and weighting logic for matching"""

# Standard library imports
from logging import getLogger

# Local imports
from parcel_match.infrastructure.config import ConfigLoader

logger = getLogger(__name__)


def clamp(value: float) -> float:
    """Clamp a score into [0, 1]"""
    return max(0.0, min(1.0, value))


class ScoreCombiner:
    """Combines partial scores into the overall similarity of a record"""

    def __init__(self, config: ConfigLoader):
        """Initialize with configuration

        Args:
            config: Configuration loader
        """
        self.config = config

        street = config.matching.street_address
        self.number_weight = street.number_weight
        self.body_weight = street.body_weight
        self.whole_weight = street.whole_weight

        keyword = config.matching.keyword_weighted
        self.similarity_weight = keyword.similarity_weight
        self.keyword_weight = keyword.keyword_weight

    def combine_street_scores(self, number_score: float, body_score: float, whole_score: float) -> float:
        """Weighted street number, address body and whole string scores

        Args:
            number_score: Street number / named prefix score
            body_score: Address body score
            whole_score: Whole string fallback score

        Returns:
            Composite similarity in [0, 1]
        """
        composite = (
            number_score * self.number_weight
            + body_score * self.body_weight
            + whole_score * self.whole_weight
        )
        return clamp(composite)

    def combine_keyword_scores(self, similarity: float, keyword_overlap: float | None) -> float:
        """Blend text similarity with keyword overlap

        Without keywords on both sides the similarity is used alone.
        """
        if keyword_overlap is None:
            return clamp(similarity)
        return clamp(similarity * self.similarity_weight + keyword_overlap * self.keyword_weight)
