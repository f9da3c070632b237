# parcel_match/core/domain/match_result.py

"""Match result domain models"""

# Third party imports
from pydantic import BaseModel
from pydantic import ConfigDict
from pydantic import Field
from pydantic import field_validator

# Local imports
from parcel_match.core.domain.reference_record import ReferenceRecord
from parcel_match.core.types.results import MatchResultDict


def _clamp_unit(value: float) -> float:
    return max(0.0, min(1.0, float(value)))


class FieldScore(BaseModel):
    """Similarity of one record field against the label text"""

    model_config = ConfigDict(frozen=True)

    field: str
    similarity: float = Field(0.0, ge=0.0, le=1.0)
    evidence: str = Field(default="", description="Matched label substring shown to the user")


class MatchOutcome(BaseModel):
    """Result of applying a matching policy to one record"""

    model_config = ConfigDict(frozen=True)

    similarity: float = Field(0.0, ge=0.0, le=1.0)
    matched_fields: tuple[str, ...] = Field(default=())
    matched_segment: str = ""
    field_scores: tuple[FieldScore, ...] = Field(default=())

    @field_validator("similarity", mode="before")
    @classmethod
    def clamp_similarity(cls, v: float) -> float:
        """Keep similarity inside [0, 1]"""
        return _clamp_unit(v)

    @property
    def accepted(self) -> bool:
        return bool(self.matched_fields)

    @classmethod
    def rejected(cls, similarity: float = 0.0) -> "MatchOutcome":
        """Outcome for a record that did not pass the policy"""
        return cls(similarity=similarity)


class MatchResult(BaseModel):
    """A ranked match between a label's OCR text and a reference record"""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    record: ReferenceRecord
    matched_fields: tuple[str, ...]
    similarity: float = Field(ge=0.0, le=1.0, description="Overall match confidence")
    ocr_confidence: float = Field(0.0, ge=0.0, le=100.0, description="OCR engine confidence")
    query_text: str = Field(default="", description="Original OCR text")
    matched_segment: str = ""
    policy: str = ""

    @field_validator("ocr_confidence", mode="before")
    @classmethod
    def clamp_ocr_confidence(cls, v: float) -> float:
        """OCR engines occasionally report values outside 0-100"""
        try:
            value = float(v)
        except (TypeError, ValueError):
            return 0.0
        if value != value:
            return 0.0
        return max(0.0, min(100.0, value))

    def to_dict(self) -> MatchResultDict:
        """External representation used by consumers and the CLI"""
        return {
            "record": self.record.to_dict(),
            "matchedFields": list(self.matched_fields),
            "similarity": self.similarity,
            "confidence": self.ocr_confidence,
            "originalQueryText": self.query_text,
            "matchedSegment": self.matched_segment,
        }
