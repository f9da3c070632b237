# parcel_match/infrastructure/config/_shared_models.py

"""Matching configuration models shared by the config file and the API"""

# Third party imports
from pydantic import BaseModel
from pydantic import ConfigDict
from pydantic import Field
from pydantic import model_validator


class SimilarityWeights(BaseModel):
    """Weights and constants of the general similarity scorer

    The blend weights must sum to 1.0. When keyword similarity does not
    apply, the edit and Jaccard weights are renormalized between themselves.
    """

    model_config = ConfigDict()

    edit_weight: float = Field(0.6, ge=0.0, le=1.0)
    jaccard_weight: float = Field(0.2, ge=0.0, le=1.0)
    keyword_weight: float = Field(0.2, ge=0.0, le=1.0)
    containment_base: float = Field(0.85, ge=0.0, le=1.0)
    containment_span: float = Field(0.10, ge=0.0, le=0.15)
    prefix_length: int = Field(2, ge=1, description="Shared prefix length for the prefix rule")
    prefix_score: float = Field(0.7, ge=0.0, le=1.0)
    prefix_span: float = Field(0.1, ge=0.0, le=0.3)
    keyword_max_distance: int = Field(1, ge=0, description="Edit distance for keyword pairing")

    @model_validator(mode="after")
    def validate_weights(self) -> "SimilarityWeights":
        """Ensure blend weights sum to 1.0"""
        total = self.edit_weight + self.jaccard_weight + self.keyword_weight
        if not (0.99 <= total <= 1.01):
            raise ValueError(f"Similarity weights must sum to 1.0, got {total}")
        if self.edit_weight + self.jaccard_weight <= 0:
            raise ValueError("edit_weight and jaccard_weight cannot both be zero")
        if self.containment_base + self.containment_span > 1.0:
            raise ValueError("containment_base + containment_span must not exceed 1.0")
        if self.prefix_score + self.prefix_span > 1.0:
            raise ValueError("prefix_score + prefix_span must not exceed 1.0")
        return self


class StreetAddressThresholds(BaseModel):
    """Street address policy calibration

    These values are an empirical starting calibration and are expected to
    be tuned against labelled OCR/record pairs.
    """

    model_config = ConfigDict()

    # Street number / named prefix scores
    number_exact: float = Field(1.0, ge=0.0, le=1.0)
    number_mismatch: float = Field(0.1, ge=0.0, le=1.0)
    number_named_prefix: float = Field(0.7, ge=0.0, le=1.0)
    prefix_similarity_min: float = Field(0.8, ge=0.0, le=1.0)
    prefix_similar: float = Field(0.95, ge=0.0, le=1.0)
    prefix_contained: float = Field(0.8, ge=0.0, le=1.0)
    prefix_unmatched: float = Field(0.4, ge=0.0, le=1.0)
    no_numbers: float = Field(1.0, ge=0.0, le=1.0)
    label_number_only: float = Field(0.5, ge=0.0, le=1.0)
    record_number_only: float = Field(0.3, ge=0.0, le=1.0)

    # Address body
    body_containment_base: float = Field(0.9, ge=0.0, le=1.0)
    body_containment_span: float = Field(0.05, ge=0.0, le=0.1)
    min_token_length: int = Field(2, ge=1)
    bigram_similarity_min: float = Field(0.9, ge=0.0, le=1.0)
    bigram_bonus: float = Field(0.3, ge=0.0, le=1.0)
    token_similarity_min: float = Field(0.8, ge=0.0, le=1.0)
    token_weight: float = Field(0.85, ge=0.0, le=1.0)
    body_cap: float = Field(0.95, ge=0.0, le=1.0)
    body_fallback_below: float = Field(0.6, ge=0.0, le=1.0)
    body_fallback_scale: float = Field(0.7, ge=0.0, le=1.0)

    # Whole string
    whole_containment_base: float = Field(0.9, ge=0.0, le=1.0)
    whole_containment_span: float = Field(0.05, ge=0.0, le=0.1)
    whole_similarity_scale: float = Field(0.8, ge=0.0, le=1.0)

    # Composite weights
    number_weight: float = Field(0.4, ge=0.0, le=1.0)
    body_weight: float = Field(0.5, ge=0.0, le=1.0)
    whole_weight: float = Field(0.1, ge=0.0, le=1.0)

    # Acceptance rules, one group per street number case
    accept_numeric_body: float = Field(0.7, ge=0.0, le=1.0)
    accept_label_number_body: float = Field(0.8, ge=0.0, le=1.0)
    accept_prefix_number: float = Field(0.8, ge=0.0, le=1.0)
    accept_prefix_body: float = Field(0.7, ge=0.0, le=1.0)
    accept_prefix_body_alone: float = Field(0.85, ge=0.0, le=1.0)
    accept_no_numbers_body: float = Field(0.85, ge=0.0, le=1.0)
    accept_no_numbers_whole: float = Field(0.8, ge=0.0, le=1.0)
    accept_other_composite: float = Field(0.7, ge=0.0, le=1.0)
    accept_other_body: float = Field(0.9, ge=0.0, le=1.0)
    accept_composite: float = Field(0.75, ge=0.0, le=1.0)

    @model_validator(mode="after")
    def validate_composite_weights(self) -> "StreetAddressThresholds":
        """Composite weights must sum to 1.0"""
        total = self.number_weight + self.body_weight + self.whole_weight
        if not (0.99 <= total <= 1.01):
            raise ValueError(f"Composite weights must sum to 1.0, got {total}")
        return self


class AddressPrefixConfig(BaseModel):
    """Address prefix policy configuration"""

    model_config = ConfigDict()

    prefix_length: int = Field(8, ge=1, description="Normalized address characters compared")
    containment_score: float = Field(0.9, ge=0.0, le=1.0)
    threshold: float = Field(0.85, ge=0.0, le=1.0)
    min_matched_chars: int = Field(3, ge=0, description="Matched characters must exceed this")
    segment_fallback_min: float = Field(0.8, ge=0.0, le=1.0)
    segment_fallback_length: int = Field(50, ge=1)


class MultiFieldConfig(BaseModel):
    """Multi field policy configuration"""

    model_config = ConfigDict()

    thresholds: dict[str, float] = Field(
        default={"name": 0.7, "address": 0.6, "identifier": 0.85},
        description="Per-field similarity thresholds; only listed fields are matched",
    )
    primary_field: str = Field("name", description="Field that ranks ahead on ties")
    identifier_token_score: float = Field(
        0.9, ge=0.0, le=1.0, description="Score when the identifier number appears as a token"
    )
    min_fuzzy_length: int = Field(
        4, ge=1, description="Shortest normalized name scored with the token sort ratio"
    )

    @model_validator(mode="after")
    def validate_thresholds(self) -> "MultiFieldConfig":
        """Thresholds must be within [0, 1]"""
        for field_name, value in self.thresholds.items():
            if not 0.0 <= value <= 1.0:
                raise ValueError(f"Threshold for {field_name} must be in [0, 1], got {value}")
        return self


class KeywordWeightedConfig(BaseModel):
    """Keyword weighted policy configuration"""

    model_config = ConfigDict()

    similarity_weight: float = Field(0.6, ge=0.0, le=1.0)
    keyword_weight: float = Field(0.4, ge=0.0, le=1.0)
    threshold: float = Field(0.6, ge=0.0, le=1.0)
    field_threshold: float = Field(0.5, ge=0.0, le=1.0)
    fields: list[str] = Field(default=["name", "address"])

    @model_validator(mode="after")
    def validate_weights(self) -> "KeywordWeightedConfig":
        """Blend weights must sum to 1.0"""
        total = self.similarity_weight + self.keyword_weight
        if not (0.99 <= total <= 1.01):
            raise ValueError(f"Keyword weighted blend must sum to 1.0, got {total}")
        return self


class MatchingConfig(BaseModel):
    """Matching engine configuration"""

    model_config = ConfigDict()

    policy: str = Field("street_address", description="Default matching policy")
    max_results: int = Field(8, ge=1, description="Maximum ranked results returned")
    enable_ocr_digit_correction: bool = Field(
        True, description="Fix O/l/S/B inside numeric tokens before number extraction"
    )
    similarity: SimilarityWeights = Field(default_factory=SimilarityWeights)
    street_address: StreetAddressThresholds = Field(default_factory=StreetAddressThresholds)
    address_prefix: AddressPrefixConfig = Field(default_factory=AddressPrefixConfig)
    multi_field: MultiFieldConfig = Field(default_factory=MultiFieldConfig)
    keyword_weighted: KeywordWeightedConfig = Field(default_factory=KeywordWeightedConfig)
