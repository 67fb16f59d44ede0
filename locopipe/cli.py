"""Command-line interface for the localization pipeline."""

import click
from pathlib import Path
from typing import Optional
from rich.console import Console
from rich.table import Table
from rich.panel import Panel

from . import __version__
from .config import config, GeneratorConfiguration
from .conversion import TSVFileGenerator, TSVFileParser
from .errors import LocoPipeError
from .models import ConversionResult
from .validation.arguments import validate_generator_arguments, validate_parser_arguments

console = Console()


def _debug(verbose: bool, message: str):
    """Print a debug line when --verbose is set."""
    if verbose:
        console.print(f"[dim]Debug:[/dim] {message}")


def _check_config():
    """Abort if the environment holds unusable defaults."""
    errors = config.validate()
    if errors:
        console.print("[red]Configuration errors:[/red]")
        for error in errors:
            console.print(f"  - {error}")
        raise click.Abort()


@click.group()
@click.version_option(version=__version__)
def cli():
    """LocoPipe: convert .tsv sheet exports to and from Localizable.strings files."""
    pass


@cli.command()
@click.argument("name")
@click.option(
    "--input", "-i",
    "input_path",
    required=True,
    type=click.Path(),
    help="Path to the input .tsv file"
)
@click.option(
    "--output", "-o",
    "output_path",
    required=True,
    type=click.Path(),
    help="Path to the output folder for the .lproj folders"
)
@click.option(
    "--delimiter", "-d",
    default=None,
    help="Column delimiter token (defaults to a literal \\t)"
)
@click.option(
    "--show-details",
    is_flag=True,
    help="Print every parsed entry"
)
@click.option(
    "--verbose", "-v",
    is_flag=True,
    help="Print debugging info as it runs"
)
def parse(
    name: str,
    input_path: str,
    output_path: str,
    delimiter: Optional[str],
    show_details: bool,
    verbose: bool,
):
    """Convert a .tsv sheet into NAME.strings files, one .lproj folder per language."""
    _check_config()
    configuration = validate_parser_arguments(
        name,
        input_path,
        output_path,
        delimiter=delimiter or config.delimiter,
        verbose=verbose,
    )
    _debug(configuration.verbose, "Parsing TSV File to Strings")
    _debug(configuration.verbose, f"Input File: {configuration.input_file}")
    _debug(configuration.verbose, f"Output Folder: {configuration.output_folder}")

    console.print(f"[blue]Reading:[/blue] {configuration.input_file}")
    parser = TSVFileParser(configuration)
    result = _run(parser.parse_and_generate_output)

    if show_details:
        _print_entries(result)
    _print_summary(result)


@cli.command()
@click.argument("name")
@click.option(
    "--input", "-i",
    "input_path",
    required=True,
    type=click.Path(),
    help="Path to the folder holding the .lproj folders"
)
@click.option(
    "--output", "-o",
    "output_path",
    required=True,
    type=click.Path(),
    help="Path to the output .tsv file"
)
@click.option(
    "--reference-language-code", "-r",
    "reference_language_code",
    default=None,
    help="Language code whose keys and comments are used as the reference"
)
@click.option(
    "--delimiter", "-d",
    default=None,
    help="Column delimiter token (defaults to a literal \\t)"
)
@click.option(
    "--show-details",
    is_flag=True,
    help="Print every parsed entry"
)
@click.option(
    "--verbose", "-v",
    is_flag=True,
    help="Print debugging info as it runs"
)
def generate(
    name: str,
    input_path: str,
    output_path: str,
    reference_language_code: Optional[str],
    delimiter: Optional[str],
    show_details: bool,
    verbose: bool,
):
    """Convert .lproj folders of NAME.strings files into a single .tsv sheet."""
    _check_config()
    configuration = validate_generator_arguments(
        name,
        input_path,
        output_path,
        reference_language_code or config.reference_language_code,
        delimiter=delimiter or config.delimiter,
        verbose=verbose,
    )
    _debug(configuration.verbose, f"Current Working Directory: {Path.cwd()}")
    _debug(configuration.verbose, "Parsing Localizable Strings to TSV")
    _debug(configuration.verbose, f"Reference Language: {configuration.reference_language_code}")

    console.print(f"[blue]Reading:[/blue] {configuration.input_folder}")
    generator = TSVFileGenerator(configuration)
    result = _run(generator.parse_and_generate_output)

    for warning in result.warnings:
        console.print(f"[yellow]Warning:[/yellow] {warning}")
    if show_details:
        _print_entries(result)
    _print_summary(result)


@cli.command()
@click.option(
    "--input", "-i",
    "input_path",
    required=True,
    type=click.Path(exists=True, file_okay=False),
    help="Path to the folder holding the .lproj folders"
)
@click.option(
    "--reference-language-code", "-r",
    "reference_language_code",
    default=None,
    help="Language code to measure coverage against"
)
@click.option(
    "--name", "-n",
    default=None,
    help="Name of the .strings file to prefer in each folder"
)
def stats(input_path: str, reference_language_code: Optional[str], name: Optional[str]):
    """Show key counts and coverage for a folder of .lproj folders."""
    reference = reference_language_code or config.reference_language_code
    configuration = GeneratorConfiguration(
        name=name or config.default_name,
        input_folder=Path(input_path),
        output_file=Path(input_path),  # never written by stats
        reference_language_code=reference,
    )
    generator = TSVFileGenerator(configuration)
    parsed = _run(generator.parse_languages)

    table = Table(title=f"Statistics for {Path(input_path).name}")
    table.add_column("Metric", style="cyan")
    table.add_column("Value", justify="right")

    table.add_row("Languages", ", ".join(sorted(parsed)) or "None")
    for code in sorted(parsed):
        table.add_row(f"  {code} keys", str(len(parsed[code])))

    if reference in parsed:
        reference_keys = set(parsed[reference])
        table.add_row("Reference language", reference)
        for code in sorted(parsed):
            if code == reference:
                continue
            translated = len(reference_keys & set(parsed[code]))
            total = len(reference_keys)
            coverage = (translated / total) * 100 if total else 0
            table.add_row(f"  {code} coverage", f"{translated}/{total} ({coverage:.1f}%)")
    elif reference:
        console.print(f"[yellow]Reference language {reference} not found[/yellow]")

    console.print(table)

    for warning in generator.strings_parser.warnings:
        console.print(f"[yellow]Warning:[/yellow] {warning}")


def _run(operation):
    """Run a converter step, turning its failures into a printed error."""
    try:
        return operation()
    except LocoPipeError as e:
        console.print(f"[red]Error:[/red] {e.description}")
        raise click.Abort()
    except OSError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise click.Abort()


def _print_entries(result: ConversionResult):
    """Print every entry, one table per language."""
    for code, entries in result.entries.items():
        table = Table(title=code, show_header=True)
        table.add_column("Key", style="dim", max_width=40)
        table.add_column("Value", max_width=60)
        table.add_column("Comment", max_width=40)
        for entry in entries:
            table.add_row(entry.key, entry.value, entry.comment)
        console.print(table)


def _print_summary(result: ConversionResult):
    """Print what was written."""
    files = "\n".join(f"  {path}" for path in result.files_written)
    panel_content = (
        f"[bold]Languages:[/bold] {', '.join(result.languages)}\n"
        f"[bold]Entries:[/bold] {result.entry_count}\n"
        f"[bold]Files written:[/bold]\n{files}"
    )
    if result.has_warnings:
        panel_content += f"\n[yellow]Warnings:[/yellow] {len(result.warnings)}"

    console.print(Panel(panel_content, title="Conversion Summary"))
    console.print("[green]Done![/green]")


if __name__ == "__main__":
    cli()
