"""Random contiguous window sampling.

The only source of randomness in the pipeline. The start index comes from an
injected provider with ``random.randint`` semantics (both bounds inclusive),
so tests can pin the window while production draws uniformly.
"""

import random
from collections.abc import Callable, Sequence

from stock_prediction.exceptions import InsufficientDataError, InsufficientDataKind
from stock_prediction.models import WINDOW_SIZE, PriceRecord

#: ``(low, high) -> index`` with ``low <= index <= high``.
IndexProvider = Callable[[int, int], int]


def get_random_consecutive_records(
    records: Sequence[PriceRecord],
    index_provider: IndexProvider = random.randint,
    window_size: int = WINDOW_SIZE,
) -> list[PriceRecord]:
    """Return ``window_size`` consecutive records starting at a random offset.

    The start offset is drawn from ``[0, len(records) - window_size]``.

    Args:
        records: Time-sorted records, oldest first.
        index_provider: Source of the start offset.
        window_size: Number of records in the window.

    Returns:
        The sampled window, in source order.

    Raises:
        InsufficientDataError: If fewer than ``window_size`` records are given
            (TOTAL_RECORDS) or the chosen slice is shorter than the window
            (SAMPLED_RECORDS).
        ValueError: If the provider returns a negative offset.
    """
    if len(records) < window_size:
        raise InsufficientDataError(InsufficientDataKind.TOTAL_RECORDS, len(records), window_size)

    start = index_provider(0, len(records) - window_size)
    if start < 0:
        raise ValueError(f"start index must be non-negative, got {start}")

    window = list(records[start : start + window_size])
    if len(window) < window_size:
        raise InsufficientDataError(InsufficientDataKind.SAMPLED_RECORDS, len(window), window_size)
    return window
