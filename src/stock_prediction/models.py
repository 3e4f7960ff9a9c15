"""Shared data models for the stock prediction pipeline.

CRITICAL: All prices use Decimal. Never use float for prices.
"""

from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal
from enum import Enum
from pathlib import Path

from stock_prediction.exceptions import InsufficientDataKind

#: Number of consecutive records in a sample window.
WINDOW_SIZE = 10

#: Date layout of the input and output CSVs (DD-MM-YYYY).
DATE_FORMAT = "%d-%m-%Y"

#: Replaces the input extension: `ABC.csv` -> `ABC.predictions.csv`.
OUTPUT_SUFFIX = ".predictions.csv"


@dataclass(frozen=True)
class PriceRecord:
    """A single daily closing price for one stock."""

    stock_id: str
    timestamp: date
    price: Decimal


@dataclass(frozen=True)
class PredictionPoint:
    """One extrapolated (date, price) pair."""

    timestamp: date
    price: Decimal


class FileStatus(str, Enum):
    """Outcome of processing a single input file."""

    PROCESSED = "processed"
    SKIPPED = "skipped"
    FAILED = "failed"


@dataclass
class FileResult:
    """Per-file outcome returned by the orchestrator.

    ``output_path`` is set only for PROCESSED files, ``skip_kind`` only for
    SKIPPED files, and ``error_kind``/``message`` for SKIPPED and FAILED files.
    """

    path: Path
    status: FileStatus
    output_path: Path | None = None
    skip_kind: InsufficientDataKind | None = None
    error_kind: str | None = None  # exception class name, e.g. "ReadError"
    message: str = ""


@dataclass
class ExchangeResult:
    """Outcome of processing one exchange directory."""

    path: Path
    files: list[FileResult] = field(default_factory=list)
    no_files: bool = False
    error: str | None = None


@dataclass
class RunSummary:
    """Aggregate outcome of a whole pipeline run."""

    data_dir: Path
    exchanges: list[ExchangeResult] = field(default_factory=list)
    error: str | None = None  # set when the data root itself could not be listed

    @property
    def files(self) -> list[FileResult]:
        return [f for exchange in self.exchanges for f in exchange.files]

    def count(self, status: FileStatus) -> int:
        return sum(1 for f in self.files if f.status == status)

    @property
    def processed(self) -> int:
        return self.count(FileStatus.PROCESSED)

    @property
    def skipped(self) -> int:
        return self.count(FileStatus.SKIPPED)

    @property
    def failed(self) -> int:
        return self.count(FileStatus.FAILED)
