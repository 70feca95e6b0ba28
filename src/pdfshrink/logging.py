from __future__ import annotations

import logging
import time
from dataclasses import dataclass, field

from rich.console import Console
from rich.logging import RichHandler

LOGGER_NAME = "pdfshrink"


def verbosity_to_level(verbosity: int) -> int:
    return logging.DEBUG if verbosity > 0 else logging.INFO


def setup_logging(verbosity: int = 0, console: Console | None = None) -> logging.Logger:
    """Route the package logger through a single rich handler on stderr.

    Calling this again replaces the handler installed by a previous call.
    """
    logger = logging.getLogger(LOGGER_NAME)
    for handler in list(logger.handlers):
        if isinstance(handler, RichHandler):
            logger.removeHandler(handler)
    handler = RichHandler(
        console=console or Console(stderr=True),
        show_time=False,
        show_path=verbosity > 1,
        markup=False,
        rich_tracebacks=verbosity > 1,
    )
    handler.setFormatter(logging.Formatter("%(message)s"))
    logger.addHandler(handler)
    logger.setLevel(verbosity_to_level(verbosity))
    return logger


@dataclass(slots=True)
class BatchSummary:
    timestamp: float = field(default_factory=time.time)
    total: int = 0
    completed: int = 0
    skipped: int = 0
    failed: int = 0
    codes: dict[str, int] = field(default_factory=dict)

    def record(self, status: str, code: str | None = None) -> None:
        self.total += 1
        if status == "completed":
            self.completed += 1
        elif status == "skipped":
            self.skipped += 1
        else:
            self.failed += 1
        if code:
            self.codes[code] = self.codes.get(code, 0) + 1

    def describe(self) -> str:
        return (
            f"Processed {self.total} files: {self.completed} completed, "
            f"{self.skipped} skipped, {self.failed} failed."
        )
