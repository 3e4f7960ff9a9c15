"""Tests for the headerless price CSV reader."""

from datetime import date
from decimal import Decimal
from pathlib import Path

import pytest

from stock_prediction.exceptions import ReadError
from stock_prediction.reader import parse_date, parse_price, parse_row, read_stock_data


class TestParsePrice:
    """Tests for parse_price."""

    def test_plain_decimal(self) -> None:
        assert parse_price("123.4500") == Decimal("123.4500")

    def test_surrounding_whitespace(self) -> None:
        assert parse_price(" 42.5 ") == Decimal("42.5")

    @pytest.mark.parametrize("text", ["", "abc", "12,5", "NaN", "Infinity"])
    def test_invalid_values_rejected(self, text: str) -> None:
        """Comma separators and non-finite values are not prices."""
        with pytest.raises(ValueError):
            parse_price(text)


class TestParseDate:
    """Tests for parse_date."""

    def test_padded_date(self) -> None:
        assert parse_date(" 05-03-2024 ") == date(2024, 3, 5)

    @pytest.mark.parametrize(
        "text", ["1-1-2024", "01-1-2024", "1-01-2024", "01-01-24", "2024-01-01", "01/01/2024"]
    )
    def test_other_shapes_rejected(self, text: str) -> None:
        """Days and months are two digits, years four."""
        with pytest.raises(ValueError):
            parse_date(text)

    def test_non_ascii_digits_rejected(self) -> None:
        with pytest.raises(ValueError):
            parse_date("\u0660\u0661-\u0660\u0661-\u0662\u0660\u0662\u0664")


class TestParseRow:
    """Tests for parse_row."""

    def test_three_fields(self) -> None:
        record = parse_row(["ABC", "05-03-2024", "101.25"])

        assert record.stock_id == "ABC"
        assert record.timestamp == date(2024, 3, 5)
        assert record.price == Decimal("101.25")

    def test_extra_fields_ignored(self) -> None:
        record = parse_row(["ABC", "05-03-2024", "101.25", "extra", "more"])

        assert record.price == Decimal("101.25")

    def test_missing_price_defaults_to_zero(self) -> None:
        record = parse_row(["ABC", "05-03-2024"])

        assert record.price == Decimal("0")

    def test_missing_date_and_price(self) -> None:
        record = parse_row(["ABC"])

        assert record.timestamp == date.min
        assert record.price == Decimal("0")

    def test_day_month_order(self) -> None:
        """The first component is the day, the second the month."""
        assert parse_row(["X", "13-01-2024", "1"]).timestamp == date(2024, 1, 13)
        with pytest.raises(ValueError):
            parse_row(["X", "01-13-2024", "1"])


class TestReadStockData:
    """Tests for read_stock_data."""

    def test_records_sorted_by_timestamp(self, tmp_path: Path) -> None:
        """Rows are re-sorted regardless of file order."""
        path = tmp_path / "ABC.csv"
        path.write_text(
            "ABC,03-01-2024,3\n"
            "ABC,01-01-2024,1\n"
            "ABC,02-02-2023,0\n"
            "ABC,02-01-2024,2\n"
        )

        records = read_stock_data(path)

        assert [r.price for r in records] == [Decimal("0"), Decimal("1"), Decimal("2"), Decimal("3")]
        timestamps = [r.timestamp for r in records]
        assert timestamps == sorted(timestamps)

    def test_duplicate_dates_keep_file_order(self, tmp_path: Path) -> None:
        """The sort is stable for rows sharing a date."""
        path = tmp_path / "ABC.csv"
        path.write_text("ABC,02-01-2024,20\nABC,01-01-2024,1\nABC,02-01-2024,21\n")

        records = read_stock_data(path)

        assert [r.price for r in records] == [Decimal("1"), Decimal("20"), Decimal("21")]

    def test_blank_lines_skipped(self, tmp_path: Path) -> None:
        path = tmp_path / "ABC.csv"
        path.write_text("ABC,01-01-2024,1\n\nABC,02-01-2024,2\n\n")

        assert len(read_stock_data(path)) == 2

    def test_empty_file(self, tmp_path: Path) -> None:
        path = tmp_path / "ABC.csv"
        path.write_text("")

        assert read_stock_data(path) == []

    def test_crlf_line_endings(self, tmp_path: Path) -> None:
        path = tmp_path / "ABC.csv"
        path.write_bytes(b"ABC,01-01-2024,1.5\r\nABC,02-01-2024,2.5\r\n")

        records = read_stock_data(path)

        assert [r.price for r in records] == [Decimal("1.5"), Decimal("2.5")]

    def test_byte_order_mark_stripped(self, tmp_path: Path) -> None:
        """Spreadsheet exports often start with a UTF-8 BOM."""
        path = tmp_path / "ABC.csv"
        path.write_bytes("ABC,01-01-2024,1\nABC,02-01-2024,2\n".encode("utf-8-sig"))

        records = read_stock_data(path)

        assert [r.stock_id for r in records] == ["ABC", "ABC"]

    def test_unpadded_date_raises_read_error(self, tmp_path: Path) -> None:
        path = tmp_path / "ABC.csv"
        path.write_text("ABC,1-1-2024,1\n")

        with pytest.raises(ReadError):
            read_stock_data(path)

    def test_missing_file_raises_read_error(self, tmp_path: Path) -> None:
        path = tmp_path / "missing.csv"

        with pytest.raises(ReadError) as exc_info:
            read_stock_data(path)

        assert exc_info.value.path == path
        assert isinstance(exc_info.value.cause, OSError)
        assert str(path) in str(exc_info.value)

    def test_bad_date_raises_read_error(self, tmp_path: Path) -> None:
        path = tmp_path / "ABC.csv"
        path.write_text("ABC,01-01-2024,1\nABC,2024-01-02,2\n")

        with pytest.raises(ReadError) as exc_info:
            read_stock_data(path)

        assert "line 2" in str(exc_info.value)

    def test_bad_price_raises_read_error(self, tmp_path: Path) -> None:
        path = tmp_path / "ABC.csv"
        path.write_text("ABC,01-01-2024,one\n")

        with pytest.raises(ReadError):
            read_stock_data(path)

    def test_header_row_is_not_skipped(self, tmp_path: Path) -> None:
        """The format has no header, so a header line fails conversion."""
        path = tmp_path / "ABC.csv"
        path.write_text("stock,date,price\nABC,01-01-2024,1\n")

        with pytest.raises(ReadError):
            read_stock_data(path)
