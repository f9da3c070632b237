# tests/conftest.py

"""Pytest configuration and fixtures for test suite"""

# Standard library imports
from logging import getLogger
from pathlib import Path

# Third party imports
from hypothesis import HealthCheck
from hypothesis import settings
import pytest

# Local imports
from parcel_match.core.domain.reference_record import ReferenceTable
from parcel_match.infrastructure.config import AppConfig
from parcel_match.infrastructure.config import ConfigLoader
from parcel_match.infrastructure.config import reset_config


# The autouse isolation fixture only resets global state, so sharing it
# across generated examples is safe
settings.register_profile(
    "parcel_match", suppress_health_check=[HealthCheck.function_scoped_fixture], deadline=None
)
settings.load_profile("parcel_match")


# Custom markers
def pytest_configure(config):
    """Register custom markers"""
    config.addinivalue_line("markers", "slow: mark test as slow running")


@pytest.fixture(autouse=True, scope="function")
def basic_isolation():
    """Minimal isolation for most tests - reset logging and the default config"""
    root_logger = getLogger()
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)
        handler.close()

    # Reset logging level
    root_logger.setLevel(30)  # WARNING level

    reset_config()

    yield

    reset_config()


@pytest.fixture
def default_config() -> ConfigLoader:
    """Configuration with built-in defaults, independent of the working directory"""
    return ConfigLoader.from_app_config(AppConfig())


@pytest.fixture
def sample_rows() -> list[dict[str, str]]:
    """Reference rows as they come out of a typical upload"""
    return [
        {
            "name": "Jane Citizen",
            "streetNumber": "34",
            "address": "ALF CASEY ROAD",
            "suburb": "Bundaberg",
            "identifier": "PO Box 1201",
        },
        {
            "name": "John Smith",
            "streetNumber": "12",
            "address": "Main Road",
            "suburb": "Gympie",
            "identifier": "PO Box 88",
        },
        {
            "name": "Mary Jones",
            "streetNumber": "7",
            "address": "Sunnybank Street",
            "suburb": "Sunnybank",
            "identifier": "Locked Bag 5",
        },
        {
            "name": "张三",
            "streetNumber": "",
            "address": "北京市朝阳区建国路88号",
            "suburb": "朝阳区",
            "identifier": "邮箱 1024",
        },
    ]


@pytest.fixture
def sample_table(sample_rows) -> ReferenceTable:
    """Reference table built from the sample rows"""
    return ReferenceTable.from_rows(sample_rows, source_name="sample.csv")


@pytest.fixture
def write_csv(tmp_path):
    """Write a CSV file into tmp_path and return its path"""

    def _write(content: str, name: str = "table.csv", encoding: str = "utf-8") -> Path:
        path = tmp_path / name
        path.write_text(content, encoding=encoding)
        return path

    return _write
