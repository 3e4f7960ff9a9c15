"""Shared test fixtures for the stock prediction pipeline."""

from collections.abc import Callable
from datetime import date, timedelta
from decimal import Decimal
from pathlib import Path

import pytest

from stock_prediction.config import AppSettings, PipelineSettings
from stock_prediction.models import DATE_FORMAT, PriceRecord
from stock_prediction.sampler import IndexProvider


def _make_records(
    prices: list[str],
    start: date = date(2024, 1, 1),
    stock_id: str = "ABC",
) -> list[PriceRecord]:
    """Build one record per price on consecutive days starting at ``start``."""
    return [
        PriceRecord(stock_id=stock_id, timestamp=start + timedelta(days=i), price=Decimal(p))
        for i, p in enumerate(prices)
    ]


def _csv_lines(records: list[PriceRecord]) -> list[str]:
    """Render records in the headerless ``id,DD-MM-YYYY,price`` input format."""
    return [f"{r.stock_id},{r.timestamp.strftime(DATE_FORMAT)},{r.price}" for r in records]


@pytest.fixture
def example_prices() -> list[str]:
    """Chronological window prices from the worked extrapolation example."""
    return ["10", "12", "9", "15", "11", "13", "14", "8", "16", "12"]


@pytest.fixture
def make_records() -> Callable[..., list[PriceRecord]]:
    """Factory building daily PriceRecords from price strings."""
    return _make_records


@pytest.fixture
def csv_lines() -> Callable[[list[PriceRecord]], list[str]]:
    """Factory rendering records as input CSV lines."""
    return _csv_lines


@pytest.fixture
def example_lines(example_prices: list[str]) -> list[str]:
    """The worked example as input CSV lines, starting 01-01-2024."""
    return _csv_lines(_make_records(example_prices))


@pytest.fixture
def first_index() -> IndexProvider:
    """Index provider that always picks the earliest window."""
    return lambda low, high: low


@pytest.fixture
def last_index() -> IndexProvider:
    """Index provider that always picks the latest window."""
    return lambda low, high: high


@pytest.fixture
def pipeline_settings(tmp_path: Path) -> PipelineSettings:
    """PipelineSettings rooted at a temporary Data directory."""
    return PipelineSettings(data_dir=str(tmp_path / "Data"))


@pytest.fixture
def app_settings(pipeline_settings: PipelineSettings) -> AppSettings:
    """AppSettings with test defaults."""
    return AppSettings(log_level="DEBUG", pipeline=pipeline_settings)


@pytest.fixture
def write_price_csv(tmp_path: Path) -> Callable[..., Path]:
    """Factory writing a price CSV under ``<tmp>/Data/<exchange>/<name>``."""

    def _write(
        name: str = "ABC.csv",
        lines: list[str] | None = None,
        exchange: str = "NYSE",
    ) -> Path:
        exchange_dir = tmp_path / "Data" / exchange
        exchange_dir.mkdir(parents=True, exist_ok=True)
        path = exchange_dir / name
        path.write_text("\n".join(lines or []) + ("\n" if lines else ""), encoding="utf-8")
        return path

    return _write
