# tests/unit/application/processing/matching/test_street_address_policy.py

"""Tests for the street address matching policy"""

# Third party imports
import pytest

# Local imports
from parcel_match.application.processing.matching import StreetAddressPolicy
from parcel_match.application.processing.matching import StreetAddressScores
from parcel_match.core.domain.enums import STREET_ADDRESS_FIELD
from parcel_match.core.domain.enums import StreetNumberCase
from parcel_match.core.domain.reference_record import ReferenceRecord
from parcel_match.infrastructure.config import AppConfig
from parcel_match.infrastructure.config import ConfigLoader
from parcel_match.infrastructure.config import MatchingConfig


class TestStreetAddressMatching:
    """Test end-to-end accept/reject decisions"""

    def setup_method(self):
        """Set up test fixtures"""
        self.policy = StreetAddressPolicy(ConfigLoader.from_app_config(AppConfig()))

    def test_exact_street_address_is_accepted(self):
        record = ReferenceRecord(streetNumber="34", address="ALF CASEY ROAD")
        outcome = self.policy.match("34 ALF CASEY ROAD", record)

        assert outcome.matched_fields == (STREET_ADDRESS_FIELD,)
        assert outcome.similarity >= 0.9
        assert outcome.matched_segment == "34 ALF CASEY ROAD"

    def test_numeric_street_number_mismatch_is_vetoed(self):
        record = ReferenceRecord(streetNumber="34", address="Main Road")
        outcome = self.policy.match("12 Main Road", record)

        assert outcome.matched_fields == ()
        assert outcome.matched_segment == ""
        # Similarity is still reported for the rejected record
        assert 0.0 < outcome.similarity < 0.75

    def test_veto_scores(self):
        record = ReferenceRecord(streetNumber="34", address="Main Road")
        scores = self.policy.score("12 Main Road", record)

        assert scores.case is StreetNumberCase.NUMERIC_BOTH
        assert scores.number_score == pytest.approx(0.1)
        assert scores.body_score >= 0.9

    def test_full_width_record_number_is_still_vetoed(self):
        record = ReferenceRecord(streetNumber="３４", address="Main Road")
        scores = self.policy.score("12 Main Road", record)

        assert scores.case is StreetNumberCase.NUMERIC_BOTH
        assert scores.number_score == pytest.approx(0.1)
        assert self.policy.match("12 Main Road", record).matched_fields == ()

    def test_full_width_record_number_matches_ascii_label(self):
        record = ReferenceRecord(streetNumber="３４", address="Main Road")
        scores = self.policy.score("34 Main Road", record)

        assert scores.number_score == 1.0
        assert self.policy.match("34 Main Road", record).accepted

    def test_record_without_address_never_matches(self):
        record = ReferenceRecord(streetNumber="34", name="Jane Citizen")
        outcome = self.policy.match("34 ALF CASEY ROAD", record)

        assert outcome.matched_fields == ()
        assert outcome.similarity == 0.0

    def test_empty_label_text(self):
        record = ReferenceRecord(streetNumber="34", address="ALF CASEY ROAD")
        assert self.policy.match("", record).matched_fields == ()
        assert self.policy.match("   \n", record).matched_fields == ()

    def test_named_prefix_matches_first_word(self):
        record = ReferenceRecord(streetNumber="Riverside", address="Main Road")
        scores = self.policy.score("Riverside Main Road", record)

        assert scores.case is StreetNumberCase.LABEL_TEXT_RECORD_TEXT
        assert scores.number_score == pytest.approx(0.95)
        assert self.policy.match("Riverside Main Road", record).accepted

    def test_no_numbers_on_either_side(self):
        record = ReferenceRecord(address="Main Road")
        scores = self.policy.score("Main Road", record)

        assert scores.case is StreetNumberCase.NO_NUMBERS
        assert scores.number_score == 1.0
        assert self.policy.match("Main Road", record).accepted

    def test_label_number_only_accepted_by_composite(self):
        record = ReferenceRecord(address="Main Road")
        scores = self.policy.score("34 Main Road", record)

        assert scores.case is StreetNumberCase.LABEL_NUMBER_ONLY
        assert scores.number_score == pytest.approx(0.5)
        assert scores.composite >= 0.75
        assert self.policy.match("34 Main Road", record).accepted

    def test_missing_keys_are_tolerated(self):
        outcome = self.policy.match("34 ALF CASEY ROAD", ReferenceRecord())
        assert outcome.matched_fields == ()


class TestOcrDigitCorrectionInPolicy:
    """Test that OCR digit confusions are corrected before number extraction"""

    def test_corrected_number_matches(self):
        policy = StreetAddressPolicy(ConfigLoader.from_app_config(AppConfig()))
        record = ReferenceRecord(streetNumber="30", address="Main Road")

        scores = policy.score("3O Main Road", record)
        assert scores.number_score == 1.0
        assert policy.match("3O Main Road", record).accepted

    def test_correction_can_be_disabled(self):
        config = ConfigLoader.from_app_config(
            AppConfig(matching=MatchingConfig(enable_ocr_digit_correction=False))
        )
        policy = StreetAddressPolicy(config)
        record = ReferenceRecord(streetNumber="30", address="Main Road")

        assert not policy.match("3O Main Road", record).accepted


class TestStreetNumberClassification:
    """Test which street number case applies"""

    @pytest.mark.parametrize(
        "label_number,record_number,expected",
        [
            ("34", "34", StreetNumberCase.NUMERIC_BOTH),
            ("34", "12", StreetNumberCase.NUMERIC_BOTH),
            ("34", "Riverside", StreetNumberCase.LABEL_NUMBER_RECORD_TEXT),
            ("", "Riverside", StreetNumberCase.LABEL_TEXT_RECORD_TEXT),
            ("", "", StreetNumberCase.NO_NUMBERS),
            ("34", "", StreetNumberCase.LABEL_NUMBER_ONLY),
            ("", "34", StreetNumberCase.RECORD_NUMBER_ONLY),
        ],
    )
    def test_classify(self, label_number, record_number, expected):
        assert StreetAddressPolicy.classify(label_number, record_number) is expected


class TestAddressBodyScore:
    """Test address body scoring paths"""

    def setup_method(self):
        """Set up test fixtures"""
        self.policy = StreetAddressPolicy(ConfigLoader.from_app_config(AppConfig()))

    def test_containment_after_suffix_removal(self):
        # "main" == "main" after dropping Road/St
        assert self.policy.address_body_score("Main St", "Main Road") == pytest.approx(0.95)

    def test_reordered_tokens_score_by_token_matches(self):
        assert self.policy.address_body_score("Casey Alf", "Alf Casey") == pytest.approx(0.85)

    def test_bigram_bonus_is_capped(self):
        # Only "alf casey" earns the bigram bonus
        assert self.policy.address_body_score("Old Alf Casey", "Alf Casey Old") == pytest.approx(0.95)

    def test_unfiltered_fallback_for_noisy_tokens(self):
        expected = 0.7 * self.policy.similarity_calculator.similarity("Qeen Stret", "Queen Street")
        assert self.policy.address_body_score("Qeen Stret", "Queen Street") == pytest.approx(expected)

    def test_whole_string_containment(self):
        score = self.policy.whole_string_score("34 ALF CASEY ROAD", "34", "ALF CASEY ROAD")
        assert score == pytest.approx(0.95)


class TestAcceptanceRules:
    """Test the case by case acceptance table"""

    def setup_method(self):
        """Set up test fixtures"""
        self.policy = StreetAddressPolicy(ConfigLoader.from_app_config(AppConfig()))

    @staticmethod
    def scores(case, number=0.0, body=0.0, whole=0.0, composite=0.0):
        return StreetAddressScores(case, number, body, whole, composite)

    def test_numeric_both(self):
        case = StreetNumberCase.NUMERIC_BOTH
        assert self.policy.is_accepted(self.scores(case, number=1.0, body=0.7, composite=0.6))
        assert not self.policy.is_accepted(self.scores(case, number=0.1, body=0.95, composite=0.6))

    def test_label_number_record_text(self):
        case = StreetNumberCase.LABEL_NUMBER_RECORD_TEXT
        assert self.policy.is_accepted(self.scores(case, body=0.8, composite=0.5))
        assert not self.policy.is_accepted(self.scores(case, body=0.79, composite=0.5))

    def test_label_text_record_text(self):
        case = StreetNumberCase.LABEL_TEXT_RECORD_TEXT
        assert self.policy.is_accepted(self.scores(case, number=0.8, body=0.7, composite=0.5))
        assert self.policy.is_accepted(self.scores(case, number=0.4, body=0.85, composite=0.5))
        assert not self.policy.is_accepted(self.scores(case, number=0.4, body=0.84, composite=0.5))

    def test_no_numbers(self):
        case = StreetNumberCase.NO_NUMBERS
        assert self.policy.is_accepted(self.scores(case, body=0.85, composite=0.5))
        assert self.policy.is_accepted(self.scores(case, body=0.5, whole=0.8, composite=0.6))
        assert not self.policy.is_accepted(self.scores(case, body=0.84, whole=0.79, composite=0.6))

    def test_asymmetric_cases(self):
        for case in (StreetNumberCase.LABEL_NUMBER_ONLY, StreetNumberCase.RECORD_NUMBER_ONLY):
            assert self.policy.is_accepted(self.scores(case, composite=0.7))
            assert self.policy.is_accepted(self.scores(case, body=0.9, composite=0.5))
            assert not self.policy.is_accepted(self.scores(case, body=0.89, composite=0.69))

    def test_composite_fallback_applies_to_every_case(self):
        for case in StreetNumberCase:
            assert self.policy.is_accepted(self.scores(case, composite=0.75))
