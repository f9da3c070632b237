# parcel_match/infrastructure/persistence/_table_store.py

"""Holder of the current reference table snapshot"""

# Standard library imports
from datetime import datetime
from json import dump as json_dump
from json import load as json_load
from logging import getLogger
from os import makedirs
from os import replace
from os.path import dirname
from os.path import exists
from pathlib import Path
from threading import Lock

# Local imports
from parcel_match.core.domain.reference_record import ReferenceRecord
from parcel_match.core.domain.reference_record import ReferenceTable
from parcel_match.core.types.results import CachedTableDict
from parcel_match.infrastructure.config import ConfigLoader

logger = getLogger(__name__)


class ReferenceTableStore:
    """Owns the current reference table and swaps it atomically

    Match passes take one snapshot() and keep using it, so replacing the
    table while a pass is running never exposes a half-loaded table.
    """

    def __init__(self, cache_path: str | Path | None = None) -> None:
        """Initialize store, restoring the cached table if there is one

        Args:
            cache_path: JSON file used to persist the last table, None to disable
        """
        self.cache_path = Path(cache_path) if cache_path else None
        self._lock = Lock()
        self._table = ReferenceTable()
        if self.cache_path is not None:
            cached = self._load_cache()
            if cached is not None:
                self._table = cached

    @classmethod
    def from_config(cls, config: ConfigLoader) -> "ReferenceTableStore":
        """Create a store using the configured cache path"""
        return cls(config.caching.table_cache_path)

    @property
    def current(self) -> ReferenceTable:
        """The current table"""
        return self.snapshot()

    def snapshot(self) -> ReferenceTable:
        """The current table, safe to use for a whole match pass"""
        with self._lock:
            return self._table

    def replace(self, table: ReferenceTable) -> ReferenceTable:
        """Swap in a new table and persist it

        Args:
            table: New table snapshot

        Returns:
            The previous table
        """
        with self._lock:
            previous = self._table
            self._table = table
        logger.info(f"Reference table replaced: {table.source_name} ({len(table):,} records)")
        if self.cache_path is not None:
            self._save_cache(table)
        return previous

    def clear(self) -> None:
        """Drop the current table and its cache file"""
        with self._lock:
            self._table = ReferenceTable()
        if self.cache_path is not None and exists(self.cache_path):
            try:
                self.cache_path.unlink()
            except OSError as e:
                logger.warning(f"Failed to remove table cache {self.cache_path}: {e}")
        logger.info("Reference table cleared")

    def _save_cache(self, table: ReferenceTable) -> None:
        assert self.cache_path is not None
        data: CachedTableDict = {
            "source_name": table.source_name,
            "loaded_at": table.loaded_at.isoformat(),
            "size_bytes": table.size_bytes,
            "rows": [record.to_dict() for record in table],
        }
        temp_path = self.cache_path.with_name(self.cache_path.name + ".tmp")
        try:
            cache_dir = dirname(self.cache_path)
            if cache_dir:
                makedirs(cache_dir, exist_ok=True)
            with open(temp_path, "w", encoding="utf-8") as f:
                json_dump(data, f, ensure_ascii=False, indent=2)
            replace(temp_path, self.cache_path)
            logger.debug(f"Saved reference table cache to {self.cache_path}")
        except (OSError, TypeError, ValueError) as e:
            logger.warning(f"Failed to save reference table cache to {self.cache_path}: {e}")

    def _load_cache(self) -> ReferenceTable | None:
        assert self.cache_path is not None
        if not exists(self.cache_path):
            return None

        try:
            with open(self.cache_path, "r", encoding="utf-8") as f:
                data = json_load(f)
            table = ReferenceTable(
                [ReferenceRecord(row) for row in data.get("rows", [])],
                source_name=str(data.get("source_name", "")),
                loaded_at=datetime.fromisoformat(data["loaded_at"]),
                size_bytes=int(data.get("size_bytes", 0)),
            )
        except (OSError, ValueError, KeyError, TypeError, AttributeError) as e:
            logger.warning(f"Failed to load reference table cache from {self.cache_path}: {e}")
            return None

        logger.info(
            f"Restored reference table {table.source_name} ({len(table):,} records) from cache"
        )
        return table
