"""Ghostscript command lines for shrinking a PDF.

The real and the dry-run command share :data:`GS_OPTIONS`; the dry-run command
only swaps the program for a stand-in that prints its arguments, and passes
the real program name as the first argument so the printed line reads like
the command that would have been run.
"""

from __future__ import annotations

import os
import shlex
from dataclasses import dataclass

GS_PROGRAM = "gs"
DRY_RUN_PROGRAM = "echo"

# Basic "ebook" preset, images downsampled to 135 dpi.
GS_OPTIONS: tuple[str, ...] = (
    "-q",
    "-dBATCH",
    "-dSAFER",
    "-dNOPAUSE",
    "-sDEVICE=pdfwrite",
    "-dCompatibilityLevel=1.4",
    "-dPDFSETTINGS=/ebook",
    "-dAutoRotatePages=/None",
    "-dColorImageDownsampleType=/Bicubic",
    "-dColorImageResolution=135",
    "-dGrayImageDownsampleType=/Bicubic",
    "-dGrayImageResolution=135",
    "-dMonoImageDownsampleType=/Bicubic",
    "-dMonoImageResolution=135",
)


@dataclass(frozen=True, slots=True)
class CommandSpec:
    program: str
    args: tuple[str, ...]

    @property
    def argv(self) -> list[str]:
        return [self.program, *self.args]

    def render(self) -> str:
        """Shell-escaped command line, for display only."""
        return shlex.join(self.argv)


def gs_arguments(inpath: str | os.PathLike[str], outpath: str | os.PathLike[str]) -> tuple[str, ...]:
    return (*GS_OPTIONS, f"-sOutputFile={os.fspath(outpath)}", os.fspath(inpath))


def build_real_command(
    inpath: str | os.PathLike[str],
    outpath: str | os.PathLike[str],
    program: str = GS_PROGRAM,
) -> CommandSpec:
    """Ghostscript command that shrinks ``inpath`` and writes ``outpath``."""
    return CommandSpec(program=program, args=gs_arguments(inpath, outpath))


def build_dry_run_command(
    inpath: str | os.PathLike[str],
    outpath: str | os.PathLike[str],
    program: str = DRY_RUN_PROGRAM,
    real_program: str = GS_PROGRAM,
) -> CommandSpec:
    """Command that prints what :func:`build_real_command` would run."""
    return CommandSpec(program=program, args=(real_program, *gs_arguments(inpath, outpath)))


__all__ = [
    "GS_PROGRAM",
    "DRY_RUN_PROGRAM",
    "GS_OPTIONS",
    "CommandSpec",
    "gs_arguments",
    "build_real_command",
    "build_dry_run_command",
]
