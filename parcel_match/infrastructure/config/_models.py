# parcel_match/infrastructure/config/_models.py

"""Pydantic models for configuration with validation"""

# Standard library imports
from pathlib import Path

# Third party imports
from pydantic import BaseModel
from pydantic import Field
from pydantic import field_validator

# Local imports
from parcel_match.core.types.json import JSONDict
from parcel_match.infrastructure.config._shared_models import MatchingConfig


class CachingConfig(BaseModel):
    """Reference table cache configuration"""

    table_cache_path: str | None = Field(
        None, description="JSON file that keeps the last loaded reference table"
    )

    @field_validator("table_cache_path")
    @classmethod
    def validate_cache_path(cls, v: str | None) -> str | None:
        """Treat blank paths as disabled"""
        if v is not None and not v.strip():
            return None
        return v


class LoggingConfig(BaseModel):
    """Logging configuration"""

    debug: bool = Field(False, description="Enable debug logging")
    log_file: str | None = Field(None, description="Log file path")


class AppConfig(BaseModel):
    """Root application configuration model"""

    matching: MatchingConfig = Field(default_factory=MatchingConfig)
    caching: CachingConfig = Field(default_factory=CachingConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    @classmethod
    def load(cls, config_path: Path | str | None = None) -> "AppConfig":
        """Load configuration from JSON file with defaults

        Args:
            config_path: Path to configuration JSON file

        Returns:
            Validated AppConfig instance
        """
        # Standard library imports
        import json

        if isinstance(config_path, str):
            config_path = Path(config_path)

        # If no path provided, try to find config.json in current directory
        if config_path is None:
            config_path = Path("config.json")
            if not config_path.exists():
                return cls()

        if config_path.exists():
            try:
                with open(config_path, "r", encoding="utf-8") as f:
                    data = json.load(f)
                return cls.model_validate(data)
            except Exception as e:
                # Standard library imports
                import logging

                logging.getLogger(__name__).warning(
                    f"Failed to load config from {config_path}: {e}. Using defaults."
                )
                return cls()

        return cls()

    def to_dict(self) -> JSONDict:
        """Convert to dictionary"""
        return self.model_dump()
