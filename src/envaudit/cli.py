"""envaudit CLI — Typer application with check, rules, and init commands."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from envaudit import __version__

app = typer.Typer(
    name="envaudit",
    help="Catch missing, placeholder, and weak secrets before they deploy.",
    add_completion=False,
    no_args_is_help=True,
)

console = Console(stderr=True)


def _configure_logging(verbose: bool) -> None:
    if not verbose:
        return
    logging.basicConfig(
        level=logging.DEBUG,
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=False)],
        force=True,
    )


def _load_config(config: Optional[str]):
    """Load config from the working directory, exit 2 on failure."""
    from envaudit.config.loader import ConfigError, load_config

    try:
        return load_config(Path.cwd(), config)
    except ConfigError as exc:
        console.print(f"[bold red]Config error:[/bold red] {exc}")
        raise typer.Exit(code=2) from exc


def _build_registry(cfg):
    from envaudit.rules.registry import RuleError, build_registry

    try:
        return build_registry(cfg, Path.cwd())
    except RuleError as exc:
        console.print(f"[bold red]Rule error:[/bold red] {exc}")
        raise typer.Exit(code=2) from exc


# ── check ─────────────────────────────────────────────────────────────────────


@app.command()
def check(
    env_file: Optional[str] = typer.Option(None, "--env-file", "-e", help="Dotenv file to validate"),
    no_environ: bool = typer.Option(False, "--no-environ", help="Ignore the process environment"),
    config: Optional[str] = typer.Option(None, "--config", "-c", help="Path to .envaudit.toml"),
    format: Optional[str] = typer.Option(None, "--format", "-f", help="Output format: text | terminal | json"),
    min_score: Optional[int] = typer.Option(None, "--min-score", help="Fail when the score is below this"),
    output: Optional[str] = typer.Option(None, "--output", "-o", help="Write report to file"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose output"),
) -> None:
    """Validate secrets and print a security report."""
    from envaudit.config.schema import OUTPUT_FORMATS
    from envaudit.environment import EnvFileError, collect_secrets
    from envaudit.output import json_report, terminal, text_report
    from envaudit.validator.engine import validate

    _configure_logging(verbose)
    cfg = _load_config(config)

    # --- CLI overrides ---
    if format:
        if format not in OUTPUT_FORMATS:
            console.print(f"[bold red]Invalid format:[/bold red] {format}")
            raise typer.Exit(code=2)
        cfg.output.format = format  # type: ignore[assignment]
    if min_score is not None:
        if not 0 <= min_score <= 100:
            console.print(f"[bold red]Invalid minimum score:[/bold red] {min_score}")
            raise typer.Exit(code=2)
        cfg.threshold.min_score = min_score
    if env_file:
        cfg.source.env_file = env_file
    if no_environ:
        cfg.source.include_environ = False

    registry = _build_registry(cfg)

    try:
        secrets = collect_secrets(cfg.source.env_file, include_environ=cfg.source.include_environ)
    except EnvFileError as exc:
        console.print(f"[bold red]Env file error:[/bold red] {exc}")
        raise typer.Exit(code=2) from exc

    if verbose:
        console.print(f"[dim]Rules loaded: {len(registry)}[/dim]")
        console.print(f"[dim]Variables read: {len(secrets)}[/dim]")

    result = validate(secrets, registry)

    # --- Output ---
    report_text: Optional[str] = None
    if cfg.output.format == "terminal":
        terminal.render(result, show_summary=cfg.output.show_summary)
    elif cfg.output.format == "json":
        report_text = json_report.render(result)
        print(report_text)
    else:
        report_text = text_report.render_report(result)
        print(report_text, end="")

    if output:
        # Terminal output has no text form of its own; write JSON instead
        if report_text is None:
            report_text = json_report.render(result)
        Path(output).write_text(report_text, encoding="utf-8")
        if verbose:
            console.print(f"[dim]Report written to {output}[/dim]")

    # --- Exit code ---
    if not result.is_valid or result.score < cfg.threshold.min_score:
        raise typer.Exit(code=1)
    raise typer.Exit(code=0)


# ── rules ─────────────────────────────────────────────────────────────────────


@app.command()
def rules(
    config: Optional[str] = typer.Option(None, "--config", "-c", help="Path to .envaudit.toml"),
) -> None:
    """List the enabled validation rules."""
    cfg = _load_config(config)
    registry = _build_registry(cfg)

    table = Table(title="envaudit rules", title_style="bold", border_style="dim")
    table.add_column("Field", style="cyan")
    table.add_column("Type")
    table.add_column("Required", justify="center")
    table.add_column("Level")
    table.add_column("Description")
    table.add_column("Example", style="dim")
    for rule in registry:
        table.add_row(
            rule.name,
            rule.type.value,
            "yes" if rule.required else "no",
            rule.security_level.value,
            rule.description,
            rule.example,
        )
    Console().print(table)


# ── init ──────────────────────────────────────────────────────────────────────


@app.command()
def init() -> None:
    """Generate a starter .envaudit.toml in the current directory."""
    from envaudit.config.defaults import DEFAULT_TOML
    from envaudit.config.loader import CONFIG_FILENAME

    config_path = Path.cwd() / CONFIG_FILENAME

    if config_path.exists():
        console.print(f"[yellow]⚠[/yellow]  {CONFIG_FILENAME} already exists at {config_path}")
        raise typer.Exit(code=1)

    config_path.write_text(DEFAULT_TOML, encoding="utf-8")
    console.print(f"[green]✓[/green] Created {config_path}")


# ── version ───────────────────────────────────────────────────────────────────


def _version_callback(value: bool) -> None:
    if value:
        print(f"envaudit {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool = typer.Option(
        False, "--version", "-V", callback=_version_callback,
        is_eager=True, help="Show version and exit",
    ),
) -> None:
    """envaudit — catch missing, placeholder, and weak secrets before they deploy."""
