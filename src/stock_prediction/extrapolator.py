"""Three-point price extrapolation from a sample window.

This is a fixed heuristic, not a statistical model:

    p1 = second-highest price in the window (duplicates retained)
    p2 = p1 - (last - p1) / 2
    p3 = p2 - (p1 - p2) / 4

where ``last`` is the price of the chronologically last record. The points
are dated one, two and three days after the window's last date.

CRITICAL: All computations use Decimal. Never use float.
"""

from collections.abc import Sequence
from datetime import timedelta

from stock_prediction.exceptions import PredictionError
from stock_prediction.models import WINDOW_SIZE, PredictionPoint, PriceRecord


def predict_next_values(window: Sequence[PriceRecord]) -> list[PredictionPoint]:
    """Extrapolate three future points from a time-ordered window.

    Args:
        window: Exactly ``WINDOW_SIZE`` records, oldest first.

    Returns:
        Three PredictionPoints on consecutive days after the window.

    Raises:
        PredictionError: If the window does not hold exactly ``WINDOW_SIZE`` records.
    """
    if len(window) != WINDOW_SIZE:
        raise PredictionError(
            f"Error predicting next values: window has {len(window)} records, expected {WINDOW_SIZE}"
        )

    sorted_prices = sorted((r.price for r in window), reverse=True)
    last = window[-1]

    p1 = sorted_prices[1]
    p2 = p1 - (last.price - p1) / 2
    p3 = p2 - (p1 - p2) / 4

    return [
        PredictionPoint(timestamp=last.timestamp + timedelta(days=offset), price=price)
        for offset, price in enumerate((p1, p2, p3), start=1)
    ]
