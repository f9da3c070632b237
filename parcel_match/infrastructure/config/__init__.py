# parcel_match/infrastructure/config/__init__.py

"""Configuration infrastructure for parcel_match.

This module manages configuration loading, validation, and models.
"""

# Local imports
from parcel_match.infrastructure.config._loader import ConfigLoader
from parcel_match.infrastructure.config._loader import get_config
from parcel_match.infrastructure.config._loader import reset_config
from parcel_match.infrastructure.config._models import AppConfig
from parcel_match.infrastructure.config._shared_models import AddressPrefixConfig
from parcel_match.infrastructure.config._shared_models import KeywordWeightedConfig
from parcel_match.infrastructure.config._shared_models import MatchingConfig
from parcel_match.infrastructure.config._shared_models import MultiFieldConfig
from parcel_match.infrastructure.config._shared_models import SimilarityWeights
from parcel_match.infrastructure.config._shared_models import StreetAddressThresholds
from parcel_match.infrastructure.config._wordlists import WordlistsConfig as Wordlists

__all__ = [
    "AddressPrefixConfig",
    "AppConfig",
    "ConfigLoader",
    "get_config",
    "KeywordWeightedConfig",
    "MatchingConfig",
    "MultiFieldConfig",
    "reset_config",
    "SimilarityWeights",
    "StreetAddressThresholds",
    "Wordlists",
]
