"""Command line entry point for the stock prediction pipeline.

Usage:
    stock-prediction <num-files-to-process>

``num-files-to-process`` must be 1 or 2 and caps how many CSV files are
taken from each exchange directory. Usage problems print a message and
return normally; no non-zero exit status is signaled.
"""

import re
import sys

from stock_prediction.config import AppSettings
from stock_prediction.exceptions import UsageError
from stock_prediction.logging import get_logger, setup_logging
from stock_prediction.models import RunSummary
from stock_prediction.pipeline import process_stock_data

USAGE = "Usage: stock-prediction <num-files-to-process>"
RANGE_MESSAGE = "The number of files to process must be either 1 or 2."

MIN_FILES_PER_EXCHANGE = 1
MAX_FILES_PER_EXCHANGE = 2

# ASCII digits only: int() alone also takes "\u0662" and "0_1".
_COUNT_SHAPE = re.compile(r"\s*[+-]?[0-9]+\s*")


def parse_file_count(args: list[str]) -> int:
    """Validate the positional arguments and return the per-exchange file count.

    Raises:
        UsageError: On a wrong argument count, a non-integer, or a value
            outside [1, 2].
    """
    if len(args) != 1:
        raise UsageError(USAGE)
    if not _COUNT_SHAPE.fullmatch(args[0]):
        raise UsageError(RANGE_MESSAGE)
    count = int(args[0])
    if not MIN_FILES_PER_EXCHANGE <= count <= MAX_FILES_PER_EXCHANGE:
        raise UsageError(RANGE_MESSAGE)
    return count


def run(args: list[str], settings: AppSettings | None = None) -> RunSummary | None:
    """Parse ``args`` and run the pipeline. Returns None on a usage error."""
    try:
        num_files = parse_file_count(args)
    except UsageError as e:
        print(e)
        return None

    if settings is None:
        settings = AppSettings()
    setup_logging(settings.log_level, settings.log_format)

    return process_stock_data(settings.pipeline.data_dir, num_files, settings=settings.pipeline)


def main(argv: list[str] | None = None) -> None:
    """Synchronous entry point."""
    args = sys.argv[1:] if argv is None else argv
    try:
        run(args)
    except Exception as e:
        get_logger("stock_prediction.main").error("unexpected_error", error=str(e), exc_info=True)
        print(f"An unexpected error occurred: {e}")


if __name__ == "__main__":
    main()
