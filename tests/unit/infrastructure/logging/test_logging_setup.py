# tests/unit/infrastructure/logging/test_logging_setup.py

"""Tests for logging setup and run summaries"""

# Standard library imports
from logging import DEBUG
from logging import FileHandler
from logging import INFO
from logging import WARNING
from logging import getLogger

# Local imports
from parcel_match.infrastructure.logging import log_match_summary
from parcel_match.infrastructure.logging import setup_logging


class TestSetupLogging:
    """Test root logger configuration"""

    def teardown_method(self):
        for handler in getLogger().handlers[:]:
            getLogger().removeHandler(handler)
            handler.close()

    def test_console_only_by_default(self):
        assert setup_logging(log_level="WARNING") is None

        root = getLogger()
        assert root.level == WARNING
        assert len(root.handlers) == 1
        assert not isinstance(root.handlers[0], FileHandler)

    def test_level_names_are_case_insensitive(self):
        setup_logging(log_level="debug")
        assert getLogger().level == DEBUG

    def test_unknown_level_falls_back_to_info(self):
        setup_logging(log_level="CHATTY")
        assert getLogger().level == INFO

    def test_silent(self):
        setup_logging(silent=True)
        assert getLogger().handlers == []

    def test_file_logging(self, tmp_path):
        log_file = tmp_path / "logs" / "parcel_match.log"

        result = setup_logging(log_file=str(log_file), log_level="WARNING", silent=True)
        getLogger("parcel_match.test").debug("written to file only")
        for handler in getLogger().handlers:
            handler.flush()

        assert result == str(log_file)
        assert getLogger().level == DEBUG
        assert "written to file only" in log_file.read_text(encoding="utf-8")

    def test_file_logging_can_be_disabled(self, tmp_path):
        log_file = tmp_path / "parcel_match.log"
        assert setup_logging(log_file=str(log_file), disable_file_logging=True) is None
        assert not log_file.exists()


class TestLogMatchSummary:
    """Test the end of run summary"""

    def test_summary_lines(self, caplog):
        with caplog.at_level(INFO):
            log_match_summary("sample.csv", 1234, 4, 3, 5, "street_address", 0.25)

        assert "MATCHING COMPLETE" in caplog.text
        assert "Reference table: sample.csv (1,234 records)" in caplog.text
        assert "With matches: 3 (75.0%)" in caplog.text
        assert "Results returned: 5" in caplog.text
        assert "Matching time: 0.250s" in caplog.text

    def test_no_queries(self, caplog):
        with caplog.at_level(INFO):
            log_match_summary("sample.csv", 4, 0, 0, 0, "multi_field", 0.0)

        assert "Label texts: 0" in caplog.text
        assert "With matches" not in caplog.text
