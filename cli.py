"""Command line interface for the Airbnb listings analyzer."""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

import typer

from listings.config import load_settings, resolve_log_level
from listings.errors import ConfigError
from listings.session import run_session

app = typer.Typer(add_completion=False, help="Filter and summarise Airbnb listings from a CSV file.")


def _configure_logging(level: str) -> None:
    logging.basicConfig(level=level, format="%(levelname)s: %(message)s")


def ask(question: str) -> str:
    return typer.prompt(question, default="", show_default=False, prompt_suffix=" ")


@app.command()
def analyze(
    csv_path: Optional[Path] = typer.Option(None, "--csv", help="Listings CSV file (skips the path prompt)"),
    config: Optional[Path] = typer.Option(None, "--config", help="YAML settings file"),
    summary: Optional[Path] = typer.Option(None, "--summary", help="Also write statistics and top hosts as JSON"),
    debug: bool = typer.Option(False, "--debug", help="Enable verbose debug logging"),
) -> None:
    """Load listings, prompt for filters, print statistics and optionally export."""
    try:
        settings = load_settings(config)
    except ConfigError as exc:
        typer.echo(str(exc), err=True)
        raise typer.Exit(code=2)

    _configure_logging(resolve_log_level(settings, debug=debug))
    code = run_session(settings, ask=ask, echo=typer.echo, csv_path=csv_path, summary_path=summary)
    raise typer.Exit(code=code)


if __name__ == "__main__":
    app()
