"""Command-line interface for the strings/CSV converter."""

import logging
from pathlib import Path
from typing import Optional

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from .config import ERROR_POLICIES, config
from .conversion.converter import DocumentConverter, ErrorPolicy
from .conversion.document_io import default_output_path, read_document, split_lines
from .conversion.errors import ConversionError, LineConversionError
from .models.conversion_report import ConversionMode, ConversionReport
from .validation.round_trip_validator import RoundTripValidator

console = Console()


def _setup_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else config.log_level
    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=False)],
        force=True,
    )


@click.group()
@click.version_option(version="0.1.0")
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
def cli(verbose: bool):
    """Convert localization files between .strings and CSV."""
    errors = config.validate()
    if errors:
        console.print("[red]Configuration errors:[/red]")
        for error in errors:
            console.print(f"  - {error}")
        raise click.Abort()
    _setup_logging(verbose)


def _conversion_options(func):
    """Options shared by all conversion commands."""
    func = click.option(
        "--dry-run",
        is_flag=True,
        help="Print the converted document instead of saving it",
    )(func)
    func = click.option(
        "--on-error",
        type=click.Choice(ERROR_POLICIES),
        default=None,
        help="What to emit for lines that fail to convert (defaults to LOCALIZE_ON_ERROR)",
    )(func)
    func = click.option(
        "--output", "-o",
        "output_path",
        type=click.Path(dir_okay=False),
        help="Path to output file (defaults to input path with the target extension)",
    )(func)
    func = click.option(
        "--input", "-i",
        "input_path",
        required=True,
        type=click.Path(),
        help="Path to input file",
    )(func)
    return func


@cli.command("to-csv")
@_conversion_options
def to_csv(input_path: str, output_path: Optional[str], on_error: Optional[str], dry_run: bool):
    """Convert a .strings file to CSV."""
    _run_conversion(ConversionMode.STRINGS_TO_CSV, input_path, output_path, on_error, dry_run)


@cli.command("to-strings")
@_conversion_options
def to_strings(input_path: str, output_path: Optional[str], on_error: Optional[str], dry_run: bool):
    """Convert a CSV file to .strings."""
    _run_conversion(ConversionMode.CSV_TO_STRINGS, input_path, output_path, on_error, dry_run)


@cli.command()
@_conversion_options
@click.option(
    "--mode", "-m",
    required=True,
    type=click.Choice([mode.value for mode in ConversionMode]),
    help="Conversion direction",
)
def convert(
    input_path: str,
    output_path: Optional[str],
    on_error: Optional[str],
    dry_run: bool,
    mode: str,
):
    """Convert a file in the given direction."""
    _run_conversion(ConversionMode(mode), input_path, output_path, on_error, dry_run)


@cli.command()
@click.option(
    "--input", "-i",
    "input_path",
    required=True,
    type=click.Path(),
    help="Path to .strings or CSV file",
)
@click.option(
    "--format", "-f",
    "source_format",
    type=click.Choice(["strings", "csv"]),
    default=None,
    help="Format of the input (defaults to the file extension)",
)
def check(input_path: str, source_format: Optional[str]):
    """Check that every line survives a round trip through the other format."""
    if source_format is None:
        source_format = "csv" if Path(input_path).suffix.lower() == ".csv" else "strings"

    try:
        lines = split_lines(read_document(input_path, encoding=config.encoding))
    except ConversionError as exc:
        console.print(f"[red]Error:[/red] {escape(str(exc))}")
        raise click.Abort()

    validator = RoundTripValidator(config.dialect)
    results = validator.validate_lines(lines, source_format)

    failed = [
        number for number, issues in results.items()
        if any(issue.severity == "critical" for issue in issues)
    ]

    console.print(f"[blue]Checked:[/blue] {len(lines)} lines ({source_format})")

    if not results:
        console.print("[green]All lines round-trip cleanly[/green]")
        return

    table = Table(title="Round-trip issues")
    table.add_column("Line", justify="right", style="cyan")
    table.add_column("Severity")
    table.add_column("Type", style="dim")
    table.add_column("Message", max_width=80)

    for line_number, issues in results.items():
        for issue in issues:
            color = "red" if issue.severity == "critical" else "yellow"
            table.add_row(
                str(line_number),
                f"[{color}]{issue.severity}[/{color}]",
                issue.error_type,
                escape(issue.message),
            )

    console.print(table)

    if failed:
        console.print(f"[red]{len(failed)} line(s) do not round-trip[/red]")
        raise click.Abort()


def _run_conversion(
    mode: ConversionMode,
    input_path: str,
    output_path: Optional[str],
    on_error: Optional[str],
    dry_run: bool,
) -> None:
    policy = ErrorPolicy(on_error or config.on_error)
    converter = DocumentConverter(mode, dialect=config.dialect, error_policy=policy)

    output = None
    if not dry_run:
        output = Path(output_path) if output_path else default_output_path(input_path, mode)
        if output.resolve() == Path(input_path).resolve():
            raise click.UsageError(
                f"Output path {output} is the input file; pass a different --output"
            )

    console.print(f"[blue]Reading:[/blue] {input_path}")
    try:
        report = converter.convert_file(input_path, output, encoding=config.encoding)
    except LineConversionError as exc:
        console.print(f"[red]Conversion halted:[/red] {escape(str(exc))}")
        raise click.Abort()
    except ConversionError as exc:
        console.print(f"[red]Error:[/red] {escape(str(exc))}")
        raise click.Abort()

    if dry_run:
        console.print(Panel(Text(report.to_text()), title=f"{mode.value} (dry run)"))
    else:
        console.print(f"[blue]Writing:[/blue] {output}")

    _print_report(report)

    if not report.success:
        raise click.Abort()


def _print_report(report: ConversionReport) -> None:
    """Print conversion summary and failed lines."""
    console.print(
        f"[green]Converted:[/green] {report.converted_count}/{len(report.lines)} lines"
    )

    if report.success:
        console.print("[green]Done![/green]")
        return

    table = Table(title="Lines that failed to convert")
    table.add_column("Line", justify="right", style="cyan")
    table.add_column("Error", style="red")
    table.add_column("Content", max_width=60)

    for error in report.errors:
        table.add_row(str(error.line_number), escape(error.message), escape(error.content.strip()))

    console.print(table)


if __name__ == "__main__":
    cli()
