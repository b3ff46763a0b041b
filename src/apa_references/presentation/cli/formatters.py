"""Rich formatting utilities for the CLI.

Keeps all Rich rendering (tables, panels, syntax) in one module that
knows nothing about how references are formatted.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.syntax import Syntax
from rich.table import Table

if TYPE_CHECKING:
    from apa_references.domain.models.results import FormattedReference, ValidationResult

console = Console()


# ---------------------------------------------------------------------------
# Success / error panels
# ---------------------------------------------------------------------------


def success_panel(message: str, title: str = "APA References") -> None:
    """Print a green success panel."""
    console.print(Panel(message, title=title, border_style="green"))


def error_message(message: str) -> None:
    """Print a red error message."""
    console.print(f"[bold red]❌ {escape(message)}[/]")


# ---------------------------------------------------------------------------
# JSON / config rendering
# ---------------------------------------------------------------------------


def json_panel(raw_json: str, title: str = "⚙️  Configuração ativa") -> None:
    """Render JSON inside a syntax-highlighted panel."""
    console.print(
        Panel(
            Syntax(raw_json, "json", theme="monokai", line_numbers=True),
            title=title,
            border_style="blue",
        )
    )


# ---------------------------------------------------------------------------
# Reference rendering
# ---------------------------------------------------------------------------


def reference_panel(result: FormattedReference, index: int | None = None) -> None:
    """Print the full entry and both citations of one formatted reference."""
    body = (
        f"{escape(result.full_reference)}\n\n"
        f"[cyan]Narrativa:[/] {escape(result.narrative_citation)}\n"
        f"[cyan]Parentética:[/] {escape(result.parenthetical_citation)}"
    )
    for warning in result.validation.warnings:
        body += f"\n[yellow]⚠️  {escape(warning)}[/]"
    for error in result.validation.errors:
        body += f"\n[red]❌ {escape(error)}[/]"
    title = f"📚 {result.detected_type.value}"
    if index is not None:
        title = f"#{index} {title}"
    border = "green" if result.validation.is_complete else "yellow"
    console.print(Panel(body, title=title, border_style=border))


def validation_table(rows: list[tuple[str, ValidationResult]]) -> None:
    """Print one row of diagnostics per validated reference."""
    table = Table(
        title="📋 Validação de referências",
        show_header=True,
        border_style="blue",
    )
    table.add_column("", width=3)
    table.add_column("Referência", style="cyan", width=30)
    table.add_column("Obrigatórios faltantes", width=25)
    table.add_column("Opcionais faltantes", width=25)
    table.add_column("Avisos", width=40)

    for label, result in rows:
        icon = "✅" if result.is_complete else ("⚠️" if result.is_valid else "❌")
        table.add_row(
            icon,
            escape(label),
            ", ".join(result.missing_required) or "—",
            ", ".join(result.missing_optional) or "—",
            escape("\n".join(result.warnings)) or "—",
        )

    console.print(table)

    valid = sum(1 for _, r in rows if r.is_valid)
    color = "green" if valid == len(rows) else "red"
    console.print(
        Panel(
            f"Válidas: [bold {color}]{valid}/{len(rows)}[/]",
            title="📊 Resumo",
            border_style=color,
        )
    )
