# parcel_match/infrastructure/persistence/_reference_loader.py

"""Reference table loader for CSV and XLSX files"""

# Standard library imports
from collections.abc import Iterable
from collections.abc import Mapping
from csv import DictReader
from csv import Error as CSVError
from datetime import datetime
from logging import getLogger
from pathlib import Path
from re import compile
from zipfile import BadZipFile

# Third party imports
from openpyxl import load_workbook
from openpyxl.utils.exceptions import InvalidFileException

# Local imports
from parcel_match.core.domain.enums import RecordField
from parcel_match.core.domain.errors import ReferenceTableError
from parcel_match.core.domain.reference_record import ReferenceRecord
from parcel_match.core.domain.reference_record import ReferenceTable
from parcel_match.infrastructure.config import ConfigLoader
from parcel_match.infrastructure.config import get_config

logger = getLogger(__name__)

HEADER_SEPARATORS = compile(r"[\s_\-.]+")
SUPPORTED_EXTENSIONS = (".csv", ".xlsx")

# Rows need at least one of these to be matchable
REQUIRED_ANY_FIELDS = (
    RecordField.NAME.value,
    RecordField.ADDRESS.value,
    RecordField.IDENTIFIER.value,
)


class ReferenceTableLoader:
    """Loads reference tables and maps their headers onto canonical fields"""

    def __init__(self, config: ConfigLoader | None = None) -> None:
        """Initialize loader

        Args:
            config: Configuration loader providing the header aliases
        """
        self.config = config or get_config()
        self.header_aliases = self.config.header_aliases

    def load(self, path: str | Path) -> ReferenceTable:
        """Load a reference table from a CSV or XLSX file

        Args:
            path: Path to the table file

        Returns:
            ReferenceTable snapshot of the file's usable rows

        Raises:
            ReferenceTableError: If the file is missing, unsupported or unreadable
        """
        path = Path(path)
        if not path.is_file():
            raise ReferenceTableError(f"Reference table not found: {path}")

        extension = path.suffix.lower()
        if extension not in SUPPORTED_EXTENSIONS:
            raise ReferenceTableError(
                f"Unsupported reference table format '{extension}' for {path.name}; "
                f"expected one of {', '.join(SUPPORTED_EXTENSIONS)}"
            )

        logger.info(f"Loading reference table from {path}")
        if extension == ".csv":
            rows = self._read_csv(path)
        else:
            rows = self._read_xlsx(path)

        return self.load_records(rows, source_name=path.name, size_bytes=path.stat().st_size)

    def load_records(
        self,
        rows: Iterable[Mapping[str, object]],
        source_name: str = "",
        size_bytes: int = 0,
    ) -> ReferenceTable:
        """Build a table from in-memory rows

        Args:
            rows: Row mappings keyed by original header
            source_name: Name shown for the table
            size_bytes: Size of the source, if known

        Returns:
            ReferenceTable with canonical field names added
        """
        records: list[ReferenceRecord] = []
        skipped = 0
        for row in rows:
            record = self.canonicalize_row(row)
            if not any(record.field(field).strip() for field in REQUIRED_ANY_FIELDS):
                skipped += 1
                continue
            records.append(record)

        if skipped:
            logger.info(f"Skipped {skipped:,} rows without name, address or identifier")
        logger.info(f"Loaded {len(records):,} reference records from {source_name or 'memory'}")

        return ReferenceTable(
            records, source_name=source_name, loaded_at=datetime.now(), size_bytes=size_bytes
        )

    def canonical_field(self, header: str) -> str | None:
        """Canonical field name for a column header, None when unrecognized

        Fields are tried in alias table order and the first one with a
        matching alias wins. ASCII aliases match whole words (or a run of
        words for multi-word aliases); other aliases match as substrings.
        """
        cleaned = HEADER_SEPARATORS.sub(" ", str(header).strip().lower()).strip()
        if not cleaned:
            return None
        words = cleaned.split()
        padded = f" {cleaned} "

        for field, aliases in self.header_aliases.items():
            for alias in aliases:
                if not alias.isascii():
                    if alias in cleaned:
                        return field
                elif " " in alias:
                    if f" {alias} " in padded:
                        return field
                elif alias in words:
                    return field
        return None

    def canonicalize_row(self, row: Mapping[str, object]) -> ReferenceRecord:
        """Add canonical fields to a row, keeping the original columns"""
        fields: dict[str, str] = {}
        for header, value in row.items():
            if header is None:
                continue
            fields[str(header)] = _cell_to_str(value)

        canonical: dict[str, str] = {}
        for header, value in fields.items():
            field = self.canonical_field(header)
            if field is None or canonical.get(field):
                continue
            canonical[field] = value

        # Canonical values take precedence over same-named original columns
        return ReferenceRecord({**fields, **canonical})

    def _read_csv(self, path: Path) -> list[dict[str, object]]:
        try:
            # utf-8-sig drops the BOM spreadsheet exports put in front of the header
            with open(path, "r", encoding="utf-8-sig", newline="") as f:
                return [dict(row) for row in DictReader(f)]
        except (OSError, UnicodeDecodeError, CSVError) as e:
            raise ReferenceTableError(f"Failed to read CSV {path}: {e}") from e

    def _read_xlsx(self, path: Path) -> list[dict[str, object]]:
        try:
            workbook = load_workbook(path, read_only=True, data_only=True)
        except (OSError, BadZipFile, InvalidFileException, KeyError, ValueError) as e:
            raise ReferenceTableError(f"Failed to open workbook {path}: {e}") from e

        try:
            if not workbook.worksheets:
                return []
            rows = workbook.worksheets[0].iter_rows(values_only=True)
            header = next(rows, None)
            if header is None:
                return []
            headers = [_cell_to_str(cell).strip() for cell in header]

            table_rows: list[dict[str, object]] = []
            for values in rows:
                if values is None or all(cell is None for cell in values):
                    continue
                table_rows.append({name: value for name, value in zip(headers, values) if name})
            return table_rows
        finally:
            workbook.close()


def _cell_to_str(value: object) -> str:
    """Spreadsheet cell as text; whole floats lose their trailing .0"""
    if value is None:
        return ""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value).strip()
