"""Predictions CSV writer.

Writes the sampled window followed by the extrapolated points to a sibling
file of the input, e.g. ``Data/NYSE/ABC.csv`` -> ``Data/NYSE/ABC.predictions.csv``.
"""

import csv
from collections.abc import Sequence
from decimal import Decimal
from pathlib import Path

from stock_prediction.exceptions import WriteError
from stock_prediction.models import DATE_FORMAT, OUTPUT_SUFFIX, PredictionPoint, PriceRecord


def output_path_for(input_path: str | Path, suffix: str = OUTPUT_SUFFIX) -> Path:
    """Replace the input file's extension with ``suffix``."""
    return Path(input_path).with_suffix(suffix)


def format_price(price: Decimal) -> str:
    """Render a price in positional notation (never ``1E+1``)."""
    return format(price, "f")


def write_predictions(
    input_path: str | Path,
    window: Sequence[PriceRecord],
    predictions: Sequence[PredictionPoint],
) -> Path:
    """Write window rows then prediction rows, overwriting any existing output.

    Prediction rows reuse the stock id of the window's first record.

    Returns:
        Path of the written file.

    Raises:
        WriteError: If the output file cannot be written.
    """
    output_path = output_path_for(input_path)
    stock_id = window[0].stock_id if window else ""

    try:
        with output_path.open("w", newline="", encoding="utf-8") as f:
            writer = csv.writer(f)
            for record in window:
                writer.writerow(
                    [record.stock_id, record.timestamp.strftime(DATE_FORMAT), format_price(record.price)]
                )
            for prediction in predictions:
                writer.writerow(
                    [stock_id, prediction.timestamp.strftime(DATE_FORMAT), format_price(prediction.price)]
                )
    except OSError as e:
        raise WriteError(output_path, e) from e

    return output_path
