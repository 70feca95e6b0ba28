"""Shrink PDF files with Ghostscript."""

from .commands import CommandSpec, build_dry_run_command, build_real_command
from .config import ConfigurationError, ShrinkConfig, build_config
from .core import ShrinkError, ShrinkService
from .models import (
    BatchResult,
    ExecutionOutcome,
    InPlace,
    LegacyRename,
    OutcomeStatus,
    Rename,
    Subdirectory,
)
from .paths import (
    resolve_into_subdir,
    resolve_legacy_rename,
    resolve_rename,
    resolve_subdir_of,
)

__all__ = [
    "BatchResult",
    "CommandSpec",
    "ConfigurationError",
    "ExecutionOutcome",
    "InPlace",
    "LegacyRename",
    "OutcomeStatus",
    "Rename",
    "ShrinkConfig",
    "ShrinkError",
    "ShrinkService",
    "Subdirectory",
    "build_config",
    "build_dry_run_command",
    "build_real_command",
    "resolve_into_subdir",
    "resolve_legacy_rename",
    "resolve_rename",
    "resolve_subdir_of",
]
