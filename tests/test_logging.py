from __future__ import annotations

import io
import logging

from rich.console import Console
from rich.logging import RichHandler

from pdfshrink.logging import BatchSummary, setup_logging


def test_setup_logging_replaces_previous_handler() -> None:
    stream = io.StringIO()
    setup_logging(0)
    logger = setup_logging(1, console=Console(file=stream, width=200))
    rich_handlers = [h for h in logger.handlers if isinstance(h, RichHandler)]
    assert len(rich_handlers) == 1
    assert logger.level == logging.DEBUG

    logger.debug("Running gs -q")
    assert "Running gs -q" in stream.getvalue()


def test_default_verbosity_is_info() -> None:
    assert setup_logging(0).level == logging.INFO


def test_batch_summary_counts() -> None:
    summary = BatchSummary()
    summary.record("completed")
    summary.record("skipped", "INVALID_EXTENSION")
    summary.record("failed", "LAUNCH_ERROR")
    summary.record("skipped", "INVALID_EXTENSION")
    assert (summary.total, summary.completed, summary.skipped, summary.failed) == (4, 1, 2, 1)
    assert summary.codes == {"INVALID_EXTENSION": 2, "LAUNCH_ERROR": 1}
    assert summary.describe() == "Processed 4 files: 1 completed, 2 skipped, 1 failed."
