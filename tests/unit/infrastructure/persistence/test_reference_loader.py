# tests/unit/infrastructure/persistence/test_reference_loader.py

"""Tests for loading reference tables from CSV and XLSX files"""

# Third party imports
from openpyxl import Workbook
import pytest

# Local imports
from parcel_match.core.domain.errors import ReferenceTableError
from parcel_match.infrastructure.config import AppConfig
from parcel_match.infrastructure.config import ConfigLoader
from parcel_match.infrastructure.persistence import ReferenceTableLoader


class TestLoadCsv:
    """Test CSV reference tables"""

    def setup_method(self):
        """Set up test fixtures"""
        self.loader = ReferenceTableLoader(ConfigLoader.from_app_config(AppConfig()))

    def test_canonical_headers(self, write_csv):
        path = write_csv(
            "name,streetNumber,address,suburb,identifier\n"
            "Jane Citizen,34,ALF CASEY ROAD,Bundaberg,PO Box 1201\n"
        )
        table = self.loader.load(path)

        assert len(table) == 1
        record = table[0]
        assert record.name == "Jane Citizen"
        assert record.street_number == "34"
        assert record.address == "ALF CASEY ROAD"
        assert record.identifier == "PO Box 1201"
        assert table.source_name == "table.csv"
        assert table.size_bytes == path.stat().st_size

    def test_byte_order_mark_is_ignored(self, write_csv):
        path = write_csv("name,address\n张三,北京市朝阳区建国路88号\n", encoding="utf-8-sig")
        table = self.loader.load(path)

        assert "name" in table[0]
        assert table[0].name == "张三"

    def test_header_aliases_keep_original_columns(self, write_csv):
        path = write_csv(
            "Recipient,Street No,Street,Suburb,PO Box\n"
            "Jane Citizen,34,ALF CASEY ROAD,Bundaberg,1201\n"
        )
        record = self.loader.load(path)[0]

        assert record.name == "Jane Citizen"
        assert record.street_number == "34"
        assert record.address == "ALF CASEY ROAD"
        assert record.suburb == "Bundaberg"
        assert record.identifier == "1201"
        assert record["Recipient"] == "Jane Citizen"

    def test_chinese_headers(self, write_csv):
        path = write_csv("收件人姓名,地址,邮箱\n张三,北京市朝阳区建国路88号,1024\n")
        record = self.loader.load(path)[0]

        assert record.name == "张三"
        assert record.address == "北京市朝阳区建国路88号"
        assert record.identifier == "1024"

    def test_first_non_empty_column_wins(self, write_csv):
        path = write_csv("Name,Recipient,Address\n,Jane Citizen,Main Road\n")
        assert self.loader.load(path)[0].name == "Jane Citizen"

    def test_rows_without_matchable_fields_are_dropped(self, write_csv, caplog):
        path = write_csv(
            "name,address,suburb\n"
            "Jane Citizen,,Bundaberg\n"
            ",,Gympie\n"
            ",Main Road,\n"
        )
        with caplog.at_level("INFO"):
            table = self.loader.load(path)

        assert [record.suburb for record in table] == ["Bundaberg", ""]
        assert "Skipped 1 rows" in caplog.text

    def test_header_only(self, write_csv):
        assert len(self.loader.load(write_csv("name,address\n"))) == 0

    def test_undecodable_file(self, tmp_path):
        path = tmp_path / "broken.csv"
        path.write_bytes(b"name\n\xff\xfe\xfa\n")
        with pytest.raises(ReferenceTableError, match="Failed to read CSV"):
            self.loader.load(path)


class TestLoadXlsx:
    """Test XLSX reference tables"""

    def setup_method(self):
        """Set up test fixtures"""
        self.loader = ReferenceTableLoader(ConfigLoader.from_app_config(AppConfig()))

    def write_workbook(self, path, rows):
        workbook = Workbook()
        sheet = workbook.active
        for row in rows:
            sheet.append(row)
        workbook.save(path)
        return path

    def test_first_sheet_is_loaded(self, tmp_path):
        path = self.write_workbook(
            tmp_path / "table.xlsx",
            [
                ["Name", "Street Number", "Address", "PO Box"],
                ["Jane Citizen", 34, "ALF CASEY ROAD", 1201.0],
                [None, None, None, None],
                ["John Smith", 12, "Main Road", None],
            ],
        )
        table = self.loader.load(path)

        assert [record.name for record in table] == ["Jane Citizen", "John Smith"]
        assert table[0].street_number == "34"
        # Whole floats lose their trailing .0
        assert table[0].identifier == "1201"
        assert table[1].identifier == ""
        assert table.source_name == "table.xlsx"

    def test_empty_workbook(self, tmp_path):
        path = self.write_workbook(tmp_path / "empty.xlsx", [])
        assert len(self.loader.load(path)) == 0

    def test_corrupt_workbook(self, tmp_path):
        path = tmp_path / "corrupt.xlsx"
        path.write_bytes(b"this is not a zip archive")
        with pytest.raises(ReferenceTableError, match="Failed to open workbook"):
            self.loader.load(path)


class TestLoaderErrors:
    """Test rejected inputs"""

    def setup_method(self):
        """Set up test fixtures"""
        self.loader = ReferenceTableLoader(ConfigLoader.from_app_config(AppConfig()))

    def test_missing_file(self, tmp_path):
        with pytest.raises(ReferenceTableError, match="not found"):
            self.loader.load(tmp_path / "missing.csv")

    def test_unsupported_extension(self, tmp_path):
        path = tmp_path / "table.txt"
        path.write_text("name\nJane\n", encoding="utf-8")
        with pytest.raises(ReferenceTableError, match="Unsupported reference table format"):
            self.loader.load(path)

    def test_extension_is_case_insensitive(self, write_csv):
        path = write_csv("name\nJane Citizen\n", name="TABLE.CSV")
        assert self.loader.load(path)[0].name == "Jane Citizen"


class TestCanonicalField:
    """Test header to canonical field mapping"""

    def setup_method(self):
        """Set up test fixtures"""
        self.loader = ReferenceTableLoader(ConfigLoader.from_app_config(AppConfig()))

    @pytest.mark.parametrize(
        "header,expected",
        [
            ("name", "name"),
            ("Recipient Name", "name"),
            ("street_number", "streetNumber"),
            ("Street No.", "streetNumber"),
            ("streetAddress", None),
            ("Street", "address"),
            ("Addr", "address"),
            ("City", "suburb"),
            ("P.O. Box", "identifier"),
            ("PO-Box", "identifier"),
            ("Email", "identifier"),
            ("门牌号", "streetNumber"),
            ("Phone", None),
            ("", None),
        ],
    )
    def test_canonical_field(self, header, expected):
        assert self.loader.canonical_field(header) == expected

    def test_load_records_from_memory(self):
        table = self.loader.load_records([{"Recipient": "Jane", "Street": "Main Road"}])

        assert table.source_name == ""
        assert table[0].name == "Jane"
        assert table[0].address == "Main Road"
