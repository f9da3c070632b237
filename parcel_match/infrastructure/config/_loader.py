# parcel_match/infrastructure/config/_loader.py

"""Main configuration loader using Pydantic models"""

# Standard library imports
from functools import cached_property
from logging import getLogger
from pathlib import Path

# Local imports
from parcel_match.core.types.json import JSONDict
from parcel_match.infrastructure.config._models import AppConfig
from parcel_match.infrastructure.config._models import CachingConfig
from parcel_match.infrastructure.config._models import LoggingConfig
from parcel_match.infrastructure.config._shared_models import MatchingConfig
from parcel_match.infrastructure.config._wordlists import WordlistsConfig

logger = getLogger(__name__)


class ConfigLoader:
    """Configuration loader that provides both config and wordlists"""

    def __init__(self, config_path: str | None = None):
        """Initialize configuration loader

        Args:
            config_path: Path to JSON configuration file, None for auto-detection
        """
        self.config_path = config_path
        self._app_config = AppConfig.load(config_path)
        self._wordlists = WordlistsConfig.load(self._find_wordlists_path())

    @classmethod
    def from_app_config(
        cls, app_config: AppConfig, wordlists: WordlistsConfig | None = None
    ) -> "ConfigLoader":
        """Build a loader around an already validated configuration

        Args:
            app_config: Validated application configuration
            wordlists: Wordlists to use, defaults when None

        Returns:
            ConfigLoader that does not touch the filesystem
        """
        loader = cls.__new__(cls)
        loader.config_path = None
        loader._app_config = app_config
        loader._wordlists = wordlists or WordlistsConfig()
        return loader

    def _find_wordlists_path(self) -> Path | None:
        """Find wordlists.json file"""
        # Check in same directory as config
        if self.config_path:
            wordlists_path = Path(self.config_path).parent / "wordlists.json"
            if wordlists_path.exists():
                return wordlists_path

        # Check in current directory
        wordlists_path = Path("wordlists.json")
        if wordlists_path.exists():
            return wordlists_path

        return None

    @property
    def config(self) -> JSONDict:
        """Full config as dict"""
        return self._app_config.model_dump()

    @property
    def app_config(self) -> AppConfig:
        return self._app_config

    @property
    def matching(self) -> MatchingConfig:
        """Matching configuration"""
        return self._app_config.matching

    @property
    def caching(self) -> CachingConfig:
        """Caching configuration"""
        return self._app_config.caching

    @property
    def logging(self) -> LoggingConfig:
        """Logging configuration"""
        return self._app_config.logging

    @property
    def wordlists(self) -> WordlistsConfig:
        return self._wordlists

    @cached_property
    def street_suffixes(self) -> frozenset[str]:
        """Street type words removable from the end of an address"""
        return frozenset(s.lower() for s in self._wordlists.get_patterns("street_suffixes"))

    @cached_property
    def address_unit_markers(self) -> tuple[str, ...]:
        """Address unit markers, longest first so multi-character markers win"""
        markers = self._wordlists.get_patterns("address_unit_markers")
        return tuple(sorted(set(markers), key=lambda m: (-len(m), m)))

    @cached_property
    def identifier_markers(self) -> tuple[str, ...]:
        """Identifier marker tokens, longest first"""
        markers = self._wordlists.get_patterns("identifier_markers")
        return tuple(sorted({m.lower() for m in markers}, key=lambda m: (-len(m), m)))

    @cached_property
    def header_aliases(self) -> dict[str, list[str]]:
        """Header aliases per canonical field, in matching order"""
        return {
            field: [alias.lower() for alias in aliases]
            for field, aliases in self._wordlists.header_aliases.items()
        }


# Global default instance
_default_config: ConfigLoader | None = None


def get_config(config_path: str | None = None) -> ConfigLoader:
    """Get configuration loader instance

    Args:
        config_path: Path to configuration file, None for default

    Returns:
        ConfigLoader instance
    """
    global _default_config

    if config_path:
        return ConfigLoader(config_path)

    if _default_config is None:
        _default_config = ConfigLoader(None)

    return _default_config


def reset_config() -> None:
    """Drop the cached default configuration (used by tests and the CLI)"""
    global _default_config
    _default_config = None
