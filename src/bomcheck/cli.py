"""CLI interface for bomcheck using Typer framework."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console
from ruamel.yaml import YAMLError

from bomcheck import __version__
from bomcheck.parser import DocumentLoader, DocumentParseError, DocumentSafetyError, parse_document
from bomcheck.service import validate_document
from bomcheck.settings import Settings
from bomcheck.validation import SpecVersion

EXIT_INVALID_DOCUMENT = 1
EXIT_UNREADABLE_INPUT = 2

app = typer.Typer(
    name="bomcheck",
    help="Validate SBOM documents and report every violation at once.",
    add_completion=False,
    rich_markup_mode="rich",
)

console = Console()
err_console = Console(stderr=True)

logger = logging.getLogger("bomcheck.cli")


def version_callback(value: bool) -> None:
    if value:
        console.print(f"bomcheck {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: Annotated[
        bool,
        typer.Option("--version", "-v", callback=version_callback, is_eager=True, help="Show version and exit"),
    ] = False,
) -> None:
    """Validate SBOM documents and report every violation at once."""


@app.command()
def validate(
    path: Annotated[Path, typer.Argument(help="Path to a YAML or JSON SBOM document")],
    spec_version: Annotated[
        SpecVersion | None,
        typer.Option("--spec-version", "-s", help="Spec version to validate against (default: from settings)"),
    ] = None,
    output_format: Annotated[
        str,
        typer.Option("--format", "-f", help="Output format: text, json (default: text)"),
    ] = "text",
) -> None:
    """Validate a document and print all errors."""
    settings = Settings()
    logging.basicConfig(level=settings.log_level.upper())

    if output_format not in ("text", "json"):
        err_console.print(f"[red]Error:[/red] Invalid format '{output_format}'. Must be one of: text, json")
        raise typer.Exit(EXIT_UNREADABLE_INPUT)

    version = spec_version or settings.spec_version
    logger.debug("Loading %s", path)
    try:
        raw, source_map = DocumentLoader().load(path)
        bom = parse_document(raw)
    except OSError as exc:
        err_console.print(f"[red]Error:[/red] Cannot read {path}: {exc}")
        raise typer.Exit(EXIT_UNREADABLE_INPUT) from None
    except (YAMLError, DocumentSafetyError) as exc:
        err_console.print(f"[red]Error:[/red] Cannot parse {path}: {exc}")
        raise typer.Exit(EXIT_UNREADABLE_INPUT) from None
    except DocumentParseError as exc:
        err_console.print(f"[red]Error:[/red] {exc.message}")
        for problem in exc.problems:
            err_console.print(f"  - {problem}", markup=False)
        raise typer.Exit(EXIT_UNREADABLE_INPUT) from None

    report = validate_document(bom, version, source_map)

    if output_format == "json":
        typer.echo(json.dumps(report.to_dict(), indent=2))
    elif report.passed:
        console.print(f"[green]OK[/green] {report.to_text()}")
    else:
        console.print(f"[red]FAILED[/red] {len(report.diagnostics)} error(s) for spec version {version}")
        console.print(report.to_text(), markup=False, highlight=False)

    if not report.passed:
        raise typer.Exit(EXIT_INVALID_DOCUMENT)
