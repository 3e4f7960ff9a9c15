"""Headerless three-column price CSV reader.

Each row is ``stock_id, DD-MM-YYYY, price``. Prices are parsed straight into
Decimal from the text so no float rounding ever touches them.
"""

import csv
import re
from datetime import date, datetime
from decimal import Decimal, InvalidOperation
from operator import attrgetter
from pathlib import Path

from stock_prediction.exceptions import ReadError
from stock_prediction.models import DATE_FORMAT, PriceRecord

# strptime alone accepts unpadded days and months such as 1-1-2024.
_DATE_SHAPE = re.compile(r"[0-9]{2}-[0-9]{2}-[0-9]{4}")


def parse_price(text: str) -> Decimal:
    """Parse a culture-invariant decimal literal (``.`` as the separator)."""
    try:
        value = Decimal(text.strip())
    except InvalidOperation as e:
        raise ValueError(f"invalid price {text!r}") from e
    if not value.is_finite():
        raise ValueError(f"invalid price {text!r}")
    return value


def parse_date(text: str) -> date:
    """Parse an exact two-digit-day, two-digit-month, four-digit-year date."""
    text = text.strip()
    if not _DATE_SHAPE.fullmatch(text):
        raise ValueError(f"invalid date {text!r}, expected DD-MM-YYYY")
    return datetime.strptime(text, DATE_FORMAT).date()


def parse_row(row: list[str]) -> PriceRecord:
    """Convert one CSV row into a PriceRecord.

    Fields beyond the third are ignored. Missing trailing fields fall back to
    "", ``date.min`` and ``Decimal("0")`` instead of raising.
    """
    stock_id = row[0] if len(row) > 0 else ""
    timestamp = parse_date(row[1]) if len(row) > 1 else date.min
    price = parse_price(row[2]) if len(row) > 2 else Decimal("0")
    return PriceRecord(stock_id=stock_id, timestamp=timestamp, price=price)


def read_stock_data(path: str | Path) -> list[PriceRecord]:
    """Read a price file and return its records sorted ascending by timestamp.

    The sort is stable, so rows sharing a date keep their file order. A
    leading UTF-8 byte-order mark is dropped.

    Raises:
        ReadError: If the file cannot be opened or a field cannot be converted.
    """
    path = Path(path)
    records: list[PriceRecord] = []
    try:
        with path.open(newline="", encoding="utf-8-sig") as f:
            for line_no, row in enumerate(csv.reader(f), start=1):
                if not row:
                    continue
                try:
                    records.append(parse_row(row))
                except ValueError as e:
                    raise ValueError(f"line {line_no}: {e}") from e
    except (OSError, csv.Error, ValueError) as e:  # UnicodeDecodeError is a ValueError
        raise ReadError(path, e) from e

    records.sort(key=attrgetter("timestamp"))
    return records
