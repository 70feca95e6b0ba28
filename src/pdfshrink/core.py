from __future__ import annotations

import logging
import os
import subprocess
import time
from typing import Callable, Iterable, Sequence

from .commands import CommandSpec, build_dry_run_command, build_real_command
from .config import ShrinkConfig, validate_config
from .models import BatchResult, ExecutionOutcome, InPlace, OutcomeStatus, Subdirectory
from .paths import has_pdf_extension, resolve_output, resolve_subdir_of

Runner = Callable[[Sequence[str]], "subprocess.CompletedProcess[str]"]

logger = logging.getLogger(__name__)

SKIP_CODES = frozenset({"INVALID_EXTENSION", "INVALID_OUTPUT", "INVALID_SUBDIR", "DIRECTORY_ERROR"})


class ShrinkError(RuntimeError):
    def __init__(self, code: str, message: str, returncode: int | None = None) -> None:
        super().__init__(message)
        self.code = code
        self.returncode = returncode

    @property
    def status(self) -> OutcomeStatus:
        return OutcomeStatus.SKIPPED if self.code in SKIP_CODES else OutcomeStatus.FAILED


def run_command(argv: Sequence[str]) -> subprocess.CompletedProcess[str]:
    # undecodable bytes are replaced; the output is only displayed
    return subprocess.run(
        list(argv),
        capture_output=True,
        text=True,
        encoding="utf-8",
        errors="replace",
        check=False,
    )


class ShrinkService:
    """Shrink PDF files one after the other.

    A file that cannot be processed is recorded as skipped or failed and the
    batch moves on; only configuration errors stop a batch, and they do so
    before the first file is touched.
    """

    def __init__(self, config: ShrinkConfig, runner: Runner | None = None) -> None:
        self._config = config
        self._runner = runner or run_command

    def process_batch(self, inputs: Iterable[str | os.PathLike[str]]) -> BatchResult:
        validate_config(self._config)
        result = BatchResult()
        for inpath in inputs:
            outcome = self.process_file(inpath)
            result.outcomes.append(outcome)
            result.summary.record(outcome.status.value, outcome.code)
        return result

    def process_file(self, inpath: str | os.PathLike[str]) -> ExecutionOutcome:
        source = os.fspath(inpath)
        logger.debug("Processing %r", source)
        start = time.perf_counter()
        outpath: str | None = None
        try:
            outpath = self._resolve(source)
            self._prepare_directory(source)
            command = self._build_command(source, outpath)
            logger.info("Compressing %r -> %r", source, outpath)
            logger.debug("%s", command.render())
            completed = self._execute(command)
        except ShrinkError as exc:
            logger.warning("Cannot process %r: %s", source, exc)
            return ExecutionOutcome(
                source=source,
                status=exc.status,
                output_path=outpath,
                code=exc.code,
                message=str(exc),
                returncode=exc.returncode,
                elapsed_ms=(time.perf_counter() - start) * 1000,
            )

        elapsed = (time.perf_counter() - start) * 1000
        outcome = ExecutionOutcome(
            source=source,
            status=OutcomeStatus.COMPLETED,
            output_path=outpath,
            returncode=completed.returncode,
            stdout=completed.stdout or "",
            stderr=completed.stderr or "",
            elapsed_ms=elapsed,
        )
        if completed.returncode != 0:
            outcome.status = OutcomeStatus.FAILED
            outcome.code = "EXIT_STATUS"
            outcome.message = f"{command.program} exited with status {completed.returncode}"
            logger.warning("Cannot process %r: %s", source, outcome.message)
        return outcome

    def _resolve(self, source: str) -> str:
        if isinstance(self._config.mode, InPlace):
            raise ShrinkError("UNSUPPORTED_MODE", "in-place output (--inplace) is not supported yet")
        outpath = resolve_output(source, self._config.mode)
        if outpath is not None:
            return outpath
        if not has_pdf_extension(source):
            raise ShrinkError("INVALID_EXTENSION", "the input does not have a .pdf extension")
        raise ShrinkError("INVALID_OUTPUT", "the computed output is invalid")

    def _prepare_directory(self, source: str) -> None:
        mode = self._config.mode
        if not isinstance(mode, Subdirectory) or self._config.dry_run:
            return
        subpath = resolve_subdir_of(source, mode.name)
        if subpath is None:
            raise ShrinkError("INVALID_SUBDIR", "the computed subdir is invalid")
        try:
            os.makedirs(subpath, exist_ok=True)
        except OSError as exc:
            raise ShrinkError("DIRECTORY_ERROR", f"cannot create {subpath!r}: {exc}") from exc

    def _build_command(self, source: str, outpath: str) -> CommandSpec:
        if self._config.dry_run:
            return build_dry_run_command(
                source,
                outpath,
                program=self._config.dry_run_program,
                real_program=self._config.gs_program,
            )
        return build_real_command(source, outpath, program=self._config.gs_program)

    def _execute(self, command: CommandSpec) -> subprocess.CompletedProcess[str]:
        try:
            completed = self._runner(command.argv)
        except OSError as exc:
            raise ShrinkError("LAUNCH_ERROR", f"failed to execute {command.program!r}: {exc}") from exc
        if completed.stdout:
            logger.info("STDOUT:\n%s", completed.stdout.rstrip())
        if completed.stderr:
            logger.debug("STDERR:\n%s", completed.stderr.rstrip())
        return completed


__all__ = ["ShrinkService", "ShrinkError", "run_command"]
