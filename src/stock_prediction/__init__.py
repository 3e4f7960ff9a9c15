"""Stock price window sampling and three-point extrapolation.

Reads per-exchange directories of daily price CSV files, samples a random
10-day window from each file, extrapolates three future prices and writes
``<name>.predictions.csv`` beside every processed input.
"""

from stock_prediction.exceptions import (
    InsufficientDataError,
    InsufficientDataKind,
    PredictionError,
    ReadError,
    StockPredictionError,
    UsageError,
    WriteError,
)
from stock_prediction.extrapolator import predict_next_values
from stock_prediction.models import (
    ExchangeResult,
    FileResult,
    FileStatus,
    PredictionPoint,
    PriceRecord,
    RunSummary,
)
from stock_prediction.pipeline import process_exchange, process_file, process_stock_data
from stock_prediction.reader import read_stock_data
from stock_prediction.sampler import get_random_consecutive_records
from stock_prediction.writer import output_path_for, write_predictions

__all__ = [
    "ExchangeResult",
    "FileResult",
    "FileStatus",
    "InsufficientDataError",
    "InsufficientDataKind",
    "PredictionError",
    "PredictionPoint",
    "PriceRecord",
    "ReadError",
    "RunSummary",
    "StockPredictionError",
    "UsageError",
    "WriteError",
    "get_random_consecutive_records",
    "output_path_for",
    "predict_next_values",
    "process_exchange",
    "process_file",
    "process_stock_data",
    "read_stock_data",
    "write_predictions",
]
