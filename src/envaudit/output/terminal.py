"""Rich terminal reporter — colour, icons, severity pills."""

from __future__ import annotations

from typing import Optional

from rich.console import Console
from rich.table import Table
from rich.text import Text

from envaudit.findings.models import PRIORITY_ORDER, ValidationResult
from envaudit.output.text_report import FAIR_SCORE, GOOD_SCORE, verdict

_LEVEL_STYLE = {
    "critical": "bold white on red",
    "high": "bold white on dark_orange",
    "error": "bold white on dark_orange",
    "medium": "bold black on yellow",
    "warning": "bold black on yellow",
    "low": "bold black on bright_cyan",
}

_LEVEL_ICON = {
    "critical": "🔴",
    "high": "🟠",
    "error": "🟠",
    "medium": "🟡",
    "warning": "🟡",
    "low": "🔵",
}


def _pill(level: str) -> Text:
    style = _LEVEL_STYLE.get(level, "")
    icon = _LEVEL_ICON.get(level, "")
    return Text(f" {icon} {level.upper()} ", style=style)


def _score_style(score: int) -> str:
    if score >= GOOD_SCORE:
        return "bold green"
    if score >= FAIR_SCORE:
        return "bold yellow"
    return "bold red"


def render(
    result: ValidationResult,
    *,
    show_summary: bool = True,
    console: Optional[Console] = None,
) -> None:
    """Print validation results to the terminal using Rich."""
    console = console or Console(stderr=True)

    console.print()
    console.print(
        f"[bold]🔒 Secrets Security Report[/bold]  "
        f"[{_score_style(result.score)}]{result.score}/100[/{_score_style(result.score)}]"
    )

    if result.errors or result.warnings:
        table = Table(
            title="Findings",
            show_lines=True,
            title_style="bold",
            border_style="dim",
        )
        table.add_column("Level", justify="center", width=14)
        table.add_column("Field", style="cyan", min_width=20)
        table.add_column("Issue")
        table.add_column("Fix", style="dim")

        for error in result.errors:
            table.add_row(
                _pill(error.severity.value), Text(error.field), Text(error.message), Text(error.suggestion)
            )
        for warning in result.warnings:
            table.add_row(
                _pill("warning"), Text(warning.field), Text(warning.message), Text(warning.suggestion)
            )
        console.print(table)

    if result.recommendations:
        console.print()
        console.print("[bold]Recommendations[/bold]")
        ordered = sorted(
            result.recommendations,
            key=lambda r: PRIORITY_ORDER[r.priority],
            reverse=True,
        )
        for rec in ordered:
            console.print(_pill(rec.priority.value), Text(f"{rec.field}: {rec.recommendation}"))

    if show_summary:
        _print_summary(console, result)

    # Final verdict
    console.print()
    style = _score_style(result.score)
    console.print(Text(verdict(result.score), style=style))
    if not result.is_valid:
        console.print("[bold red]Validation failed — fix the errors above before deploying.[/bold red]")


def _print_summary(console: Console, result: ValidationResult) -> None:
    console.print()
    console.print(f"[dim]Score:[/dim]           {result.score}/100")
    console.print(f"[dim]Errors:[/dim]          {len(result.errors)}")
    console.print(f"[dim]Critical:[/dim]        {len(result.critical_errors)}")
    console.print(f"[dim]Warnings:[/dim]        {len(result.warnings)}")
    console.print(f"[dim]Recommendations:[/dim] {len(result.recommendations)}")
