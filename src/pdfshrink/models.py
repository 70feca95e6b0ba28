"""Domain models for PDF shrinking runs."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import ClassVar

from .logging import BatchSummary

DEFAULT_SUFFIX = "shrunk"


@dataclass(frozen=True, slots=True)
class Rename:
    """Write ``name.pdf`` to ``name.<suffix>.pdf`` next to the input."""

    suffix: str = DEFAULT_SUFFIX


@dataclass(frozen=True, slots=True)
class LegacyRename:
    """Rename with the fixed ``cmp`` suffix used by early releases."""

    suffix: ClassVar[str] = "cmp"


@dataclass(frozen=True, slots=True)
class Subdirectory:
    """Write ``dir/name.pdf`` to ``dir/<name>/name.pdf``."""

    name: str


@dataclass(frozen=True, slots=True)
class InPlace:
    """Replace the input file. Reserved: not supported yet."""


OutputMode = Rename | LegacyRename | Subdirectory | InPlace


class OutcomeStatus(str, Enum):
    COMPLETED = "completed"
    SKIPPED = "skipped"
    FAILED = "failed"


@dataclass(slots=True)
class ExecutionOutcome:
    """What happened to a single input file."""

    source: str
    status: OutcomeStatus
    output_path: str | None = None
    code: str | None = None
    message: str | None = None
    returncode: int | None = None
    stdout: str = ""
    stderr: str = ""
    elapsed_ms: float = 0.0

    @property
    def ok(self) -> bool:
        return self.status is OutcomeStatus.COMPLETED


@dataclass(slots=True)
class BatchResult:
    """Aggregate results for a batch of input files."""

    outcomes: list[ExecutionOutcome] = field(default_factory=list)
    summary: BatchSummary = field(default_factory=BatchSummary)


__all__ = [
    "DEFAULT_SUFFIX",
    "Rename",
    "LegacyRename",
    "Subdirectory",
    "InPlace",
    "OutputMode",
    "OutcomeStatus",
    "ExecutionOutcome",
    "BatchResult",
]
