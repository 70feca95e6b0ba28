from __future__ import annotations

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from ..config import ConfigurationError, build_config, dump_config, validate_config
from ..core import ShrinkService
from ..logging import setup_logging
from ..models import DEFAULT_SUFFIX, BatchResult

console = Console()
err_console = Console(stderr=True)

app = typer.Typer(help="Shrink PDF files using Ghostscript", add_completion=False)

STATUS_STYLES = {
    "completed": "green",
    "skipped": "yellow",
    "failed": "red",
}


def _print_summary(result: BatchResult) -> None:
    table = Table(title="Batch summary")
    table.add_column("Input")
    table.add_column("Status")
    table.add_column("Output")
    table.add_column("Reason")
    for outcome in result.outcomes:
        style = STATUS_STYLES[outcome.status.value]
        table.add_row(
            escape(outcome.source),
            f"[{style}]{outcome.status.value}[/{style}]",
            escape(outcome.output_path or "-"),
            escape(outcome.message or "-"),
        )
    console.print(table)
    console.print(result.summary.describe())


@app.command(epilog="The options --inplace, --rename and --subdir are mutually exclusive.")
def shrink(
    inputs: list[str] = typer.Argument(..., metavar="INPUT...", help="Input PDF files to shrink"),
    verbose: int = typer.Option(0, "--verbose", "-v", count=True, help="Increase the level of verbosity"),
    inplace: bool = typer.Option(False, "--inplace", "-i", help="Replace the original file"),
    rename: bool = typer.Option(
        False,
        "--rename",
        "-r",
        help="Save the output to a renamed file: *.pdf -> *.<suffix>.pdf (default)",
    ),
    suffix: str = typer.Option(DEFAULT_SUFFIX, "--suffix", "-s", help="Suffix used when renaming"),
    subdir: str | None = typer.Option(
        None, "--subdir", "-d", metavar="SUBDIR", help="Save the output in a subdirectory"
    ),
    dry_run: bool = typer.Option(
        False, "--dry-run", "-n", help="Do not actually run the commands, just show them"
    ),
    debug: bool = typer.Option(False, "--debug", hidden=True, help="Debug the command line"),
) -> None:
    setup_logging(verbose)
    try:
        config = build_config(
            inplace=inplace,
            rename=rename,
            subdir=subdir,
            suffix=suffix,
            dry_run=dry_run,
            verbosity=verbose,
            debug=debug,
        )
        validate_config(config)
    except ConfigurationError as exc:
        err_console.print(f"[red]Configuration error[/red]: {exc.code} - {escape(str(exc))}")
        raise typer.Exit(2) from exc

    if config.debug:
        err_console.print_json(dump_config(config))

    service = ShrinkService(config)
    result = service.process_batch(inputs)
    _print_summary(result)


if __name__ == "__main__":
    app()
