"""
docx-sdt CLI
=============
Command-line interface for the docx-sdt library.

Commands:
    validate    Build a JSON form definition and report its diagnostics
    render      Render a definition to WordprocessingML body XML or fragment JSON
    version     Show version information

Usage::

    docx-sdt validate form.json --strict
    docx-sdt render form.json -o document.xml
    docx-sdt render form.json --format json
"""

from __future__ import annotations

import json
import logging
import sys
from pathlib import Path
from typing import Iterable, Iterator

import click
from rich import box
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from .. import __version__
from ..builder.loader import load_definition_file
from ..controls.base import ContentControl
from ..errors import ContentControlError
from ..models.content import XmlComponent
from ..ooxml.formatter import Formatter, render_body
from ..validator.diagnostics import Diagnostics, Severity

console = Console()

_SEVERITY_COLORS = {
    Severity.ERROR: "red",
    Severity.WARNING: "yellow",
    Severity.INFO: "blue",
}


@click.group()
@click.version_option(version=__version__, prog_name="docx-sdt")
@click.option("-v", "--verbose", is_flag=True, help="Log debug output to stderr")
def cli(verbose: bool) -> None:
    """
    docx-sdt – Word content controls (structured document tags).

    Build, check and render content controls described as JSON.
    """
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")


def _walk(nodes: Iterable[XmlComponent]) -> Iterator[ContentControl]:
    """Every content control in the tree, depth first."""
    for node in nodes:
        if isinstance(node, ContentControl):
            yield node
        if hasattr(node, "rows"):
            for row in node.rows:
                for cell in row.cells:
                    yield from _walk(cell.children)
        elif hasattr(node, "children"):
            yield from _walk(node.children)


def _load(path: Path, diagnostics: Diagnostics) -> list[XmlComponent]:
    try:
        return load_definition_file(path, diagnostics=diagnostics)
    except json.JSONDecodeError as e:
        console.print(f"[red]Invalid JSON in {escape(path.name)}: {e}[/red]")
        sys.exit(1)
    except ContentControlError as e:
        console.print(f"[red]{type(e).__name__}: {escape(str(e))}[/red]")
        sys.exit(1)


# ---------------------------------------------------------------------------
# validate
# ---------------------------------------------------------------------------


@cli.command()
@click.argument("definition", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("--strict", is_flag=True, help="Exit with code 1 if any warnings")
@click.option("--json-output", is_flag=True, help="Output results as JSON")
def validate(definition: Path, strict: bool, json_output: bool) -> None:
    """Build the content controls of a definition file and report diagnostics."""
    diagnostics = Diagnostics(forward_to_log=False)
    nodes = _load(definition, diagnostics)
    controls = list(_walk(nodes))
    has_warnings = bool(diagnostics.warnings)

    if json_output:
        output = {
            "file": str(definition),
            "passed": True,
            "control_count": len(controls),
            "controls": [
                {"type": c.control_name, "tag": c.tag, "id": c.id, "kind": c.kind.value}
                for c in controls
            ],
            "diagnostics": [
                {"rule": i.rule_id, "severity": i.severity.value, "source": i.source,
                 "msg": i.message}
                for i in diagnostics
            ],
        }
        click.echo(json.dumps(output, indent=2))
    else:
        console.print()
        status_str = (
            "[bold yellow]PASS (with warnings)[/bold yellow]" if has_warnings
            else "[bold green]PASS[/bold green]"
        )
        console.print(Panel(
            f"[bold]{definition.name}[/bold]\n"
            f"Status: {status_str}  |  "
            f"Controls: {len(controls)}  |  Diagnostics: {len(diagnostics)}",
            title="docx-sdt Validation",
            border_style="blue",
        ))

        if controls:
            t = Table(box=box.SIMPLE, title="Content Controls")
            t.add_column("ID", style="dim")
            t.add_column("Type")
            t.add_column("Tag")
            t.add_column("Title")
            t.add_column("Binding")
            for c in controls:
                t.add_row(
                    str(c.id),
                    c.control_name,
                    f"[cyan]{escape(c.tag)}[/cyan]",
                    escape(c.title or "—"),
                    escape(c.data_binding.xpath) if c.data_binding else "—",
                )
            console.print(t)

        for issue in diagnostics:
            color = _SEVERITY_COLORS[issue.severity]
            console.print(
                f"  [{color}]{issue.severity.value}[/{color}] \\[{issue.rule_id}] {escape(str(issue))}",
            )
        console.print()

    sys.exit(1 if strict and has_warnings else 0)


# ---------------------------------------------------------------------------
# render
# ---------------------------------------------------------------------------


@cli.command()
@click.argument("definition", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("--output", "-o", type=click.Path(dir_okay=False, path_type=Path), default=None,
              help="Output path (default: stdout)")
@click.option("--format", "output_format", type=click.Choice(["xml", "json"]), default="xml",
              help="Body XML or the nested fragment JSON")
def render(definition: Path, output: Path | None, output_format: str) -> None:
    """Render a definition file to document body XML."""
    nodes = _load(definition, Diagnostics())

    if output_format == "json":
        formatter = Formatter()
        text = json.dumps([formatter.format(n) for n in nodes], indent=2, ensure_ascii=False)
    else:
        text = render_body(nodes)

    if output is None:
        click.echo(text)
        return
    output.write_text(text, encoding="utf-8")
    console.print(
        f"[green]✓[/green] {len(list(_walk(nodes)))} content control(s) rendered to "
        f"[bold]{output}[/bold]"
    )


# ---------------------------------------------------------------------------
# version info
# ---------------------------------------------------------------------------


@cli.command("version")
def show_version() -> None:
    """Show detailed version information."""
    console.print(Panel(
        f"[bold cyan]docx-sdt[/bold cyan] v{__version__}\n\n"
        "Content controls (structured document tags) for WordprocessingML\n"
        "Variants: run, inline rich text, block, dropdown / combo box,\n"
        "          date picker, checkbox\n"
        "Namespaces: w (2006 main), w14 (Word 2010)",
        title="docx-sdt",
        border_style="cyan",
    ))
