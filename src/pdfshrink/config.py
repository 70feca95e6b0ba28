from __future__ import annotations

import json
from dataclasses import dataclass, field

from .commands import DRY_RUN_PROGRAM, GS_PROGRAM
from .models import DEFAULT_SUFFIX, InPlace, LegacyRename, OutputMode, Rename, Subdirectory


class ConfigurationError(ValueError):
    def __init__(self, code: str, message: str) -> None:
        super().__init__(message)
        self.code = code


@dataclass(slots=True)
class ShrinkConfig:
    mode: OutputMode = field(default_factory=Rename)
    dry_run: bool = False
    verbosity: int = 0
    debug: bool = False
    gs_program: str = GS_PROGRAM
    dry_run_program: str = DRY_RUN_PROGRAM


def select_output_mode(
    *,
    inplace: bool = False,
    rename: bool = False,
    subdir: str | None = None,
    suffix: str = DEFAULT_SUFFIX,
) -> OutputMode:
    """Turn the three output selectors into a single mode.

    At most one selector may be given; with none, files are renamed.
    """
    requested = [
        flag
        for flag, present in (
            ("--inplace", inplace),
            ("--rename", rename),
            ("--subdir", subdir is not None),
        )
        if present
    ]
    if len(requested) > 1:
        raise ConfigurationError(
            "MODE_CONFLICT",
            f"Options {', '.join(requested)} are mutually exclusive",
        )
    if inplace:
        return InPlace()
    if subdir is not None:
        return Subdirectory(subdir)
    return Rename(suffix)


def validate_config(config: ShrinkConfig) -> None:
    mode = config.mode
    if isinstance(mode, InPlace):
        raise ConfigurationError("UNSUPPORTED_MODE", "In-place output (--inplace) is not supported yet")
    if isinstance(mode, Rename) and not mode.suffix:
        raise ConfigurationError("INVALID_SUFFIX", "The rename suffix must not be empty")
    if isinstance(mode, Subdirectory) and not mode.name:
        raise ConfigurationError("INVALID_SUBDIR", "The subdirectory name must not be empty")


def build_config(
    *,
    inplace: bool = False,
    rename: bool = False,
    subdir: str | None = None,
    suffix: str = DEFAULT_SUFFIX,
    dry_run: bool = False,
    verbosity: int = 0,
    debug: bool = False,
) -> ShrinkConfig:
    mode = select_output_mode(inplace=inplace, rename=rename, subdir=subdir, suffix=suffix)
    return ShrinkConfig(mode=mode, dry_run=dry_run, verbosity=verbosity, debug=debug)


def _describe_mode(mode: OutputMode) -> dict[str, str]:
    if isinstance(mode, Rename):
        return {"kind": "rename", "suffix": mode.suffix}
    if isinstance(mode, LegacyRename):
        return {"kind": "legacy-rename", "suffix": mode.suffix}
    if isinstance(mode, Subdirectory):
        return {"kind": "subdir", "name": mode.name}
    return {"kind": "inplace"}


def dump_config(config: ShrinkConfig) -> str:
    payload = {
        "mode": _describe_mode(config.mode),
        "dry_run": config.dry_run,
        "verbosity": config.verbosity,
        "debug": config.debug,
        "gs_program": config.gs_program,
        "dry_run_program": config.dry_run_program,
    }
    return json.dumps(payload, indent=2)


__all__ = [
    "ConfigurationError",
    "ShrinkConfig",
    "select_output_mode",
    "validate_config",
    "build_config",
    "dump_config",
]
