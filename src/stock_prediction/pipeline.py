"""Directory walker and per-file orchestration.

Walks ``<data_dir>/<exchange>/*.csv``, takes the first N files of each
exchange in directory-listing order and runs read -> sample -> predict ->
write on each. Failures are isolated at the narrowest scope that can still
make progress: a bad file never stops its exchange, a bad exchange never
stops the run.
"""

import random
from pathlib import Path

from stock_prediction.config import PipelineSettings
from stock_prediction.exceptions import (
    InsufficientDataError,
    InsufficientDataKind,
    ReadError,
    StockPredictionError,
    WriteError,
)
from stock_prediction.extrapolator import predict_next_values
from stock_prediction.logging import exchange_context, get_logger
from stock_prediction.models import (
    OUTPUT_SUFFIX,
    WINDOW_SIZE,
    ExchangeResult,
    FileResult,
    FileStatus,
    RunSummary,
)
from stock_prediction.reader import read_stock_data
from stock_prediction.sampler import IndexProvider, get_random_consecutive_records
from stock_prediction.writer import write_predictions

logger = get_logger(__name__)


def list_exchange_dirs(data_dir: Path) -> list[Path]:
    """Immediate subdirectories of ``data_dir``, in directory-listing order."""
    return [p for p in data_dir.iterdir() if p.is_dir()]


def list_csv_files(exchange_dir: Path) -> list[Path]:
    """CSV inputs of one exchange, in directory-listing order.

    Files ending in OUTPUT_SUFFIX are earlier outputs and never inputs.
    """
    return [
        p
        for p in exchange_dir.iterdir()
        if p.is_file()
        and p.suffix.lower() == ".csv"
        and not p.name.lower().endswith(OUTPUT_SUFFIX)
    ]


def _skipped(path: Path, error: InsufficientDataError) -> FileResult:
    return FileResult(
        path=path,
        status=FileStatus.SKIPPED,
        skip_kind=error.kind,
        error_kind=type(error).__name__,
        message=str(error),
    )


def _failed(path: Path, error: Exception) -> FileResult:
    return FileResult(
        path=path,
        status=FileStatus.FAILED,
        error_kind=type(error).__name__,
        message=str(error),
    )


def process_file(
    path: Path,
    index_provider: IndexProvider = random.randint,
) -> FileResult:
    """Run the read-sample-predict-write cycle for one input file.

    Never raises for pipeline errors: every outcome, including failures, is
    returned as a FileResult and logged once.
    """
    try:
        records = read_stock_data(path)
        if len(records) < WINDOW_SIZE:
            logger.warning(
                "file_insufficient_records",
                file=str(path),
                records=len(records),
                required=WINDOW_SIZE,
            )
            return _skipped(
                path,
                InsufficientDataError(InsufficientDataKind.TOTAL_RECORDS, len(records), WINDOW_SIZE),
            )

        window = get_random_consecutive_records(records, index_provider=index_provider)
        predictions = predict_next_values(window)
        output_path = write_predictions(path, window, predictions)
    except InsufficientDataError as e:
        event = (
            "file_insufficient_sampled_records"
            if e.kind == InsufficientDataKind.SAMPLED_RECORDS
            else "file_insufficient_records"
        )
        logger.warning(event, file=str(path), records=e.available, required=e.required)
        return _skipped(path, e)
    except ReadError as e:
        logger.error("file_read_failed", file=str(path), error=str(e.cause))
        return _failed(path, e)
    except WriteError as e:
        logger.error("file_write_failed", file=str(path), output=str(e.path), error=str(e.cause))
        return _failed(path, e)
    except StockPredictionError as e:
        logger.error("file_processing_failed", file=str(path), error=str(e))
        return _failed(path, e)
    except Exception as e:
        logger.error("file_processing_failed", file=str(path), error=str(e), exc_info=True)
        return _failed(path, e)

    logger.info(
        "predictions_written",
        file=str(path),
        output=str(output_path),
        window_start=window[0].timestamp.isoformat(),
        window_end=window[-1].timestamp.isoformat(),
        predictions=[str(p.price) for p in predictions],
    )
    return FileResult(path=path, status=FileStatus.PROCESSED, output_path=output_path)


def process_exchange(
    exchange_dir: Path,
    num_files: int,
    index_provider: IndexProvider = random.randint,
) -> ExchangeResult:
    """Process the first ``num_files`` CSV files of one exchange directory."""

    result = ExchangeResult(path=exchange_dir)
    try:
        files = list_csv_files(exchange_dir)
    except OSError as e:
        logger.error("exchange_processing_failed", exchange=str(exchange_dir), error=str(e))
        result.error = str(e)
        return result

    if not files:
        logger.info("exchange_no_files", exchange=str(exchange_dir))
        result.no_files = True
        return result

    with exchange_context(exchange_dir.name):
        for path in files[:num_files]:
            result.files.append(process_file(path, index_provider=index_provider))
    return result


def process_stock_data(
    data_dir: str | Path | None = None,
    num_files: int = 1,
    settings: PipelineSettings | None = None,
    index_provider: IndexProvider = random.randint,
) -> RunSummary:
    """Walk every exchange under ``data_dir`` and write predictions files.

    Args:
        data_dir: Root holding one subdirectory per exchange. Defaults to
            ``settings.data_dir``.
        num_files: Maximum number of CSV files to process per exchange.
        settings: Supplies the default data root. Defaults to PipelineSettings().
        index_provider: Start-offset source for window sampling.

    Returns:
        RunSummary with every exchange and file outcome.
    """
    if settings is None:
        settings = PipelineSettings()
    root = Path(data_dir if data_dir is not None else settings.data_dir)

    summary = RunSummary(data_dir=root)
    try:
        exchanges = list_exchange_dirs(root)
    except OSError as e:
        logger.error("stock_data_processing_failed", data_dir=str(root), error=str(e))
        summary.error = str(e)
        return summary

    for exchange_dir in exchanges:
        try:
            summary.exchanges.append(
                process_exchange(exchange_dir, num_files, index_provider=index_provider)
            )
        except Exception as e:
            logger.error(
                "exchange_processing_failed",
                exchange=str(exchange_dir),
                error=str(e),
                exc_info=True,
            )
            summary.exchanges.append(ExchangeResult(path=exchange_dir, error=str(e)))

    logger.info(
        "stock_data_run_complete",
        data_dir=str(root),
        exchanges=len(summary.exchanges),
        processed=summary.processed,
        skipped=summary.skipped,
        failed=summary.failed,
    )
    return summary
