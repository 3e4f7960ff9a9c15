"""Custom exceptions for the stock prediction pipeline.

Every component-level failure lives here so the orchestrator can map each
one to a per-file outcome without importing the component modules.
"""

from enum import Enum
from pathlib import Path


class StockPredictionError(Exception):
    """Base exception for all pipeline errors."""


class UsageError(StockPredictionError):
    """Raised when the command line arguments are missing or out of range."""


class ReadError(StockPredictionError):
    """Raised when an input file cannot be opened or a field cannot be converted."""

    def __init__(self, path: str | Path, cause: Exception) -> None:
        self.path = Path(path)
        self.cause = cause
        super().__init__(f"Error while reading stock data from {self.path}: {cause}")


class InsufficientDataKind(str, Enum):
    """Which record count fell below the window size."""

    TOTAL_RECORDS = "total_records"
    SAMPLED_RECORDS = "sampled_records"


class InsufficientDataError(StockPredictionError):
    """Raised when there are not enough records to build a sample window."""

    def __init__(self, kind: InsufficientDataKind, available: int, required: int) -> None:
        self.kind = kind
        self.available = available
        self.required = required
        super().__init__(
            f"Insufficient {kind.value.replace('_', ' ')}: {available} available, {required} required"
        )


class PredictionError(StockPredictionError):
    """Raised when the extrapolator receives a window of the wrong size."""


class WriteError(StockPredictionError):
    """Raised when the predictions file cannot be written."""

    def __init__(self, path: str | Path, cause: Exception) -> None:
        self.path = Path(path)
        self.cause = cause
        super().__init__(f"Error writing predictions to {self.path}: {cause}")
