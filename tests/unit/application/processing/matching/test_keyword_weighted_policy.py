# tests/unit/application/processing/matching/test_keyword_weighted_policy.py

"""Tests for the keyword weighted matching policy"""

# Local imports
from parcel_match.application.processing.matching import KeywordWeightedPolicy
from parcel_match.core.domain.reference_record import ReferenceRecord
from parcel_match.infrastructure.config import AppConfig
from parcel_match.infrastructure.config import ConfigLoader


class TestKeywordWeightedPolicy:
    """Test similarity blended with keyword overlap"""

    def setup_method(self):
        """Set up test fixtures"""
        self.policy = KeywordWeightedPolicy(ConfigLoader.from_app_config(AppConfig()))

    def test_chinese_name_and_address(self):
        record = ReferenceRecord(name="张三", address="北京市朝阳区建国路88号")
        outcome = self.policy.match("张三 北京市朝阳区建国路88号", record)

        assert outcome.matched_fields == ("name", "address")
        assert outcome.similarity == 1.0
        assert outcome.matched_segment == "张三"

    def test_latin_label_uses_similarity_alone(self):
        record = ReferenceRecord(name="Jane Citizen", address="Alf Casey Road")
        outcome = self.policy.match("Jane Citizen 34 Alf Casey Road", record)

        assert outcome.matched_fields == ("name", "address")
        assert outcome.similarity >= 0.6
        assert outcome.matched_segment == "Jane Citizen"

    def test_unrelated_label_is_rejected(self):
        record = ReferenceRecord(name="Jane Citizen", address="Alf Casey Road")
        outcome = self.policy.match("Queen Street", record)

        assert outcome.matched_fields == ()
        assert outcome.similarity < 0.6

    def test_record_without_name_or_address(self):
        outcome = self.policy.match("张三", ReferenceRecord(identifier="邮箱 1024"))
        assert outcome.matched_fields == ()
        assert outcome.similarity == 0.0

    def test_primary_field(self):
        assert self.policy.primary_field == "name"
