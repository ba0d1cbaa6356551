"""CLI for docassembly: domains / build / exemplar / check commands."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Optional

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from docassembly.assembly import Artifact, assemble
from docassembly.core.config import AppSettings
from docassembly.core.logging_config import setup_logging
from docassembly.domains.registry import get_registry
from docassembly.exceptions import DocAssemblyError
from docassembly.formatters.json_formatter import JSONFormatter
from docassembly.validation import IssueSeverity, validate_wire

app = typer.Typer(name="docassembly", help="Assemble domain records into renderer section sequences")
console = Console()
err_console = Console(stderr=True)


def _settings(verbose: bool) -> AppSettings:
    settings = AppSettings()
    if verbose:
        settings.observability.log_level = "DEBUG"
    setup_logging(settings.observability)
    return settings


def _load_json(path: Path) -> Any:
    try:
        return json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise typer.BadParameter(f"{path} is not valid JSON: {exc}") from exc


def _emit(payload: bytes, output: Optional[Path]) -> None:
    if output:
        output.parent.mkdir(parents=True, exist_ok=True)
        output.write_bytes(payload)
        err_console.print(f"[green]Document plan saved to {output}[/green]")
    else:
        typer.echo(payload.decode("utf-8"))


@app.command()
def domains() -> None:
    """List registered adapters and the lens routes they serve."""
    table = Table(title="Domain Adapters")
    table.add_column("Name", style="cyan", no_wrap=True)
    table.add_column("Display Name", style="green")
    table.add_column("Routes")
    table.add_column("Description", max_width=50)

    for config in get_registry().list_domains():
        routes = ", ".join(f"{lens}/{action}" for lens, action in config.routes)
        table.add_row(config.name, config.display_name, routes, config.description)

    console.print(table)


@app.command()
def build(
    record_file: Path = typer.Argument(..., help="JSON file holding the domain record"),
    domain: Optional[str] = typer.Option(None, "--domain", "-d", help="Adapter name"),
    lens: Optional[str] = typer.Option(None, "--lens", help="Lens domain of the artifact"),
    action: Optional[str] = typer.Option(None, "--action", help="Lens action of the artifact"),
    title: str = typer.Option("", help="Artifact title"),
    artifact_id: str = typer.Option("artifact", "--id", help="Artifact identifier"),
    output: Optional[Path] = typer.Option(None, help="Output path for the plan JSON"),
    verbose: bool = typer.Option(False, "--verbose", "-v"),
) -> None:
    """Build the document plan for one record."""
    settings = _settings(verbose)
    if not domain and not (lens and action):
        raise typer.BadParameter("Pass --domain, or both --lens and --action")

    record = _load_json(record_file)
    artifact = Artifact(
        id=artifact_id,
        data=record,
        title=title,
        domain=lens if (lens and action) else (domain or ""),
        action=action if (lens and action) else "",
    )
    try:
        plan = assemble(artifact, slug_max_length=settings.output.slug_max_length)
    except DocAssemblyError as exc:
        err_console.print(f"[red]{escape(str(exc))}[/red]")
        raise typer.Exit(code=2) from exc

    formatter = JSONFormatter(indent=settings.output.json_indent or None)
    _emit(formatter.render_plan(plan), output)


@app.command()
def exemplar(
    name: str = typer.Argument(..., help="Adapter name, e.g. invoice"),
    output: Optional[Path] = typer.Option(None, help="Output path for the plan JSON"),
    verbose: bool = typer.Option(False, "--verbose", "-v"),
) -> None:
    """Build the reference record shipped with an adapter."""
    settings = _settings(verbose)
    registry = get_registry()
    try:
        config = registry.get(name)
    except KeyError as exc:
        err_console.print(f"[red]{escape(str(exc.args[0]))}[/red]")
        raise typer.Exit(code=2) from exc

    record = config.resolve("exemplar")
    artifact = Artifact(
        id=f"{config.name}-exemplar",
        data=record,
        title=str(record.get("title", "")),
        domain=config.name,
    )
    plan = assemble(artifact, registry=registry, slug_max_length=settings.output.slug_max_length)
    formatter = JSONFormatter(indent=settings.output.json_indent or None)
    _emit(formatter.render_plan(plan), output)


@app.command()
def check(
    sections_file: Path = typer.Argument(
        ..., help="JSON file: a section list, or a plan with a 'sections' key"
    ),
) -> None:
    """Validate a section payload against the renderer contract."""
    payload = _load_json(sections_file)
    if isinstance(payload, dict):
        payload = payload.get("sections", [])
    if not isinstance(payload, list):
        raise typer.BadParameter("Expected a JSON array of sections")

    report = validate_wire(payload)

    if report.issues:
        table = Table(title="Contract Issues")
        table.add_column("Rule", style="cyan")
        table.add_column("Severity")
        table.add_column("Section")
        table.add_column("Message", max_width=70)
        for issue in report.issues:
            style = "red" if issue.severity == IssueSeverity.ERROR else "yellow"
            table.add_row(
                issue.rule_id,
                f"[{style}]{issue.severity.value}[/{style}]",
                f"#{issue.section_index} {issue.section_type}",
                escape(issue.message),
            )
        console.print(table)

    console.print(
        f"Sections: {report.total_sections}, errors: {report.error_count}, "
        f"warnings: {report.warning_count}"
    )
    if report.has_errors():
        raise typer.Exit(code=1)


if __name__ == "__main__":
    app()
