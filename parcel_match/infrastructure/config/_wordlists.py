# parcel_match/infrastructure/config/_wordlists.py

"""Pydantic models for wordlists configuration"""

# Standard library imports
import json
from pathlib import Path

# Third party imports
from pydantic import BaseModel
from pydantic import ConfigDict
from pydantic import Field

DEFAULT_STREET_SUFFIXES = [
    "road",
    "rd",
    "street",
    "st",
    "avenue",
    "ave",
    "drive",
    "dr",
    "lane",
    "ln",
    "way",
    "close",
    "court",
    "ct",
    "place",
    "pl",
    "crescent",
    "cres",
    "terrace",
    "tce",
    "circuit",
    "cct",
    "boulevard",
    "blvd",
    "highway",
    "hwy",
    "esplanade",
    "esp",
    "parade",
    "pde",
    "grove",
    "gr",
    "walk",
    "gardens",
    "gdns",
]

# Administrative, street and building suffix ideographs
DEFAULT_ADDRESS_UNIT_MARKERS = [
    "大厦",
    "小区",
    "单元",
    "省",
    "市",
    "区",
    "县",
    "镇",
    "乡",
    "村",
    "路",
    "街",
    "道",
    "巷",
    "弄",
    "号",
    "栋",
    "幢",
    "楼",
    "室",
    "苑",
    "园",
    "座",
]

DEFAULT_IDENTIFIER_MARKERS = ["p.o. box", "po box", "p o box", "pobox", "locked bag", "pmb", "box"]

# Checked in order; the first canonical field whose alias matches a header wins
DEFAULT_HEADER_ALIASES = {
    "identifier": ["po box", "pobox", "box", "email", "identifier", "id", "邮箱", "编号", "信箱"],
    "streetNumber": [
        "street number",
        "streetnumber",
        "street no",
        "street num",
        "number",
        "no",
        "门牌",
        "门牌号",
    ],
    "address": ["address", "addr", "street", "street name", "地址"],
    "suburb": ["suburb", "city", "town", "locality", "区域", "城市"],
    "name": ["name", "recipient", "姓名", "收件人"],
}


class PatternsConfig(BaseModel):
    """Pattern lists configuration"""

    street_suffixes: list[str] = Field(default_factory=lambda: list(DEFAULT_STREET_SUFFIXES))
    address_unit_markers: list[str] = Field(
        default_factory=lambda: list(DEFAULT_ADDRESS_UNIT_MARKERS)
    )
    identifier_markers: list[str] = Field(
        default_factory=lambda: list(DEFAULT_IDENTIFIER_MARKERS)
    )

    model_config = ConfigDict(extra="allow")


class WordlistsConfig(BaseModel):
    """Root wordlists configuration model"""

    patterns: PatternsConfig = Field(default_factory=PatternsConfig)
    header_aliases: dict[str, list[str]] = Field(
        default_factory=lambda: {key: list(values) for key, values in DEFAULT_HEADER_ALIASES.items()}
    )

    @classmethod
    def load(cls, wordlists_path: Path | str | None = None) -> "WordlistsConfig":
        """Load wordlists from JSON file

        Args:
            wordlists_path: Path to wordlists.json file

        Returns:
            Validated WordlistsConfig instance
        """
        if wordlists_path is None:
            return cls()

        if isinstance(wordlists_path, str):
            wordlists_path = Path(wordlists_path)

        if wordlists_path.exists():
            try:
                with open(wordlists_path, "r", encoding="utf-8") as f:
                    data = json.load(f)
                return cls.model_validate(data)
            except Exception as e:
                # Standard library imports
                import logging

                logging.getLogger(__name__).warning(
                    f"Failed to load wordlists from {wordlists_path}: {e}. Using defaults."
                )

        return cls()

    def get_patterns(self, pattern_type: str) -> list[str]:
        """Get patterns by type

        Args:
            pattern_type: Pattern type name

        Returns:
            List of patterns
        """
        patterns_dict = self.patterns.model_dump()
        return patterns_dict.get(pattern_type, [])
