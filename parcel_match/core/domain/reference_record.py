# parcel_match/core/domain/reference_record.py

"""Reference record and reference table domain entities"""

# Standard library imports
from collections.abc import Iterator
from collections.abc import Mapping
from datetime import datetime
from types import MappingProxyType
from typing import overload

# Local imports
from parcel_match.core.domain.enums import RecordField


class ReferenceRecord(Mapping[str, str]):
    """Immutable mapping from field name to field value

    Missing fields read as empty strings so matching code never has to
    guard against absent columns. Extra columns are preserved as-is.
    """

    __slots__ = ("_fields", "_hash")

    def __init__(self, fields: Mapping[str, object] | None = None, **extra: object) -> None:
        values: dict[str, str] = {}
        for source in (fields or {}, extra):
            for key, value in source.items():
                values[str(key)] = "" if value is None else str(value)
        self._fields: Mapping[str, str] = MappingProxyType(values)
        self._hash: int | None = None

    def __getitem__(self, key: str) -> str:
        return self._fields[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._fields)

    def __len__(self) -> int:
        return len(self._fields)

    def __hash__(self) -> int:
        if self._hash is None:
            self._hash = hash(frozenset(self._fields.items()))
        return self._hash

    def __eq__(self, other: object) -> bool:
        if isinstance(other, ReferenceRecord):
            return dict(self._fields) == dict(other._fields)
        if isinstance(other, Mapping):
            return dict(self._fields) == dict(other)
        return NotImplemented

    def __repr__(self) -> str:
        return f"ReferenceRecord({dict(self._fields)!r})"

    def field(self, name: str) -> str:
        """Get a field value, empty string when missing"""
        return self._fields.get(name, "")

    @property
    def name(self) -> str:
        return self.field(RecordField.NAME.value)

    @property
    def address(self) -> str:
        return self.field(RecordField.ADDRESS.value)

    @property
    def street_number(self) -> str:
        return self.field(RecordField.STREET_NUMBER.value)

    @property
    def suburb(self) -> str:
        return self.field(RecordField.SUBURB.value)

    @property
    def identifier(self) -> str:
        return self.field(RecordField.IDENTIFIER.value)

    def to_dict(self) -> dict[str, str]:
        """Plain dict copy of the record"""
        return dict(self._fields)

    @classmethod
    def coerce(cls, record: Mapping[str, object] | None) -> "ReferenceRecord":
        """Wrap a plain row mapping, returning records unchanged"""
        if isinstance(record, ReferenceRecord):
            return record
        return cls(record)


class ReferenceTable:
    """Immutable snapshot of one uploaded reference table

    Tables are replaced wholesale when a new file is loaded; nothing
    mutates a table after construction.
    """

    __slots__ = ("_records", "source_name", "loaded_at", "size_bytes")

    def __init__(
        self,
        records: "list[ReferenceRecord] | tuple[ReferenceRecord, ...]" = (),
        source_name: str = "",
        loaded_at: datetime | None = None,
        size_bytes: int = 0,
    ) -> None:
        self._records: tuple[ReferenceRecord, ...] = tuple(records)
        self.source_name = source_name
        self.loaded_at = loaded_at or datetime.now()
        self.size_bytes = size_bytes

    @classmethod
    def from_rows(
        cls, rows: list[Mapping[str, object]], source_name: str = "", size_bytes: int = 0
    ) -> "ReferenceTable":
        """Build a table from plain row mappings"""
        return cls([ReferenceRecord(row) for row in rows], source_name, size_bytes=size_bytes)

    @property
    def records(self) -> tuple[ReferenceRecord, ...]:
        return self._records

    def __iter__(self) -> Iterator[ReferenceRecord]:
        return iter(self._records)

    def __len__(self) -> int:
        return len(self._records)

    @overload
    def __getitem__(self, index: int) -> ReferenceRecord: ...

    @overload
    def __getitem__(self, index: slice) -> tuple[ReferenceRecord, ...]: ...

    def __getitem__(self, index: int | slice) -> ReferenceRecord | tuple[ReferenceRecord, ...]:
        return self._records[index]

    def __bool__(self) -> bool:
        return bool(self._records)

    def __repr__(self) -> str:
        return f"ReferenceTable(source_name={self.source_name!r}, records={len(self._records)})"
