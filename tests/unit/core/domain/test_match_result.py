# tests/unit/core/domain/test_match_result.py

"""Tests for match outcomes and results"""

# Third party imports
from pydantic import ValidationError
import pytest

# Local imports
from parcel_match.core.domain.match_result import FieldScore
from parcel_match.core.domain.match_result import MatchOutcome
from parcel_match.core.domain.match_result import MatchResult
from parcel_match.core.domain.reference_record import ReferenceRecord


class TestMatchOutcome:
    """Test policy outcomes"""

    def test_rejected(self):
        outcome = MatchOutcome.rejected(0.42)
        assert not outcome.accepted
        assert outcome.similarity == 0.42
        assert outcome.matched_segment == ""

    def test_accepted_when_fields_matched(self):
        assert MatchOutcome(similarity=0.9, matched_fields=("name",)).accepted

    def test_similarity_is_clamped(self):
        assert MatchOutcome(similarity=1.0000001).similarity == 1.0
        assert MatchOutcome(similarity=-0.2).similarity == 0.0

    def test_frozen(self):
        outcome = MatchOutcome()
        with pytest.raises(ValidationError):
            outcome.similarity = 0.5

    def test_field_score_bounds(self):
        with pytest.raises(ValidationError):
            FieldScore(field="name", similarity=1.5)


class TestMatchResult:
    """Test the externally visible match result"""

    def make_result(self, **overrides) -> MatchResult:
        values = {
            "record": ReferenceRecord(name="Jane Citizen", streetNumber="34", address="ALF CASEY ROAD"),
            "matched_fields": ("streetAddress",),
            "similarity": 0.97,
            "ocr_confidence": 88.0,
            "query_text": "34 ALF CASEY ROAD",
            "matched_segment": "34 ALF CASEY ROAD",
            "policy": "street_address",
        }
        values.update(overrides)
        return MatchResult(**values)

    def test_to_dict_keys(self):
        payload = self.make_result().to_dict()

        assert payload == {
            "record": {"name": "Jane Citizen", "streetNumber": "34", "address": "ALF CASEY ROAD"},
            "matchedFields": ["streetAddress"],
            "similarity": 0.97,
            "confidence": 88.0,
            "originalQueryText": "34 ALF CASEY ROAD",
            "matchedSegment": "34 ALF CASEY ROAD",
        }

    @pytest.mark.parametrize(
        "given,expected",
        [(-5, 0.0), (150, 100.0), ("73.5", 73.5), ("n/a", 0.0), (None, 0.0), (float("nan"), 0.0)],
    )
    def test_ocr_confidence_is_clamped(self, given, expected):
        assert self.make_result(ocr_confidence=given).ocr_confidence == expected

    def test_similarity_must_be_in_range(self):
        with pytest.raises(ValidationError):
            self.make_result(similarity=1.2)
