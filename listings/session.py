"""Interactive analysis session: prompts, report rendering and exports."""

from __future__ import annotations

import logging
import os
from typing import Callable, Optional

from .config import Settings
from .errors import LOAD_ERRORS, ExportError
from .export import export_listings, export_summary
from .loader import load_listings
from .models import FilterCriteria
from .normalize import leading_float, leading_int
from .workflow import AnalysisResult, analyze

logger = logging.getLogger(__name__)

AskFunc = Callable[[str], str]
EchoFunc = Callable[..., None]

CSV_PATH_PROMPT = "Enter the path to the listings CSV file:"
EXPORT_PROMPT = "Enter the file path to export results (or press enter to skip):"
FILTER_PROMPTS = (
    ("min_price", "Enter min price (or press enter to skip):", leading_float),
    ("max_price", "Enter max price (or press enter to skip):", leading_float),
    ("min_rooms", "Enter min number of rooms (or press enter to skip):", leading_int),
    ("max_rooms", "Enter max number of rooms (or press enter to skip):", leading_int),
    ("min_review_score", "Enter min review score (or press enter to skip):", leading_float),
)


def prompt_csv_path(ask: AskFunc, prefix: str = "~> ") -> str:
    """Ask for the input file until a non-blank answer is given."""

    while True:
        answer = ask(f"{prefix}{CSV_PATH_PROMPT}").strip()
        if answer:
            return answer


def prompt_criteria(ask: AskFunc, prefix: str = "~> ") -> FilterCriteria:
    """Ask for each bound; blank or unparseable answers leave it unset."""

    values = {}
    for name, question, parse in FILTER_PROMPTS:
        answer = ask(f"{prefix}{question}")
        values[name] = parse(answer.strip()) if answer and answer.strip() else None
    return FilterCriteria(**values)


def render_report(result: AnalysisResult) -> str:
    stats = result.statistics
    lines = [f"Filtered Listings Count: {len(result.listings)}"]

    if stats.count > 0:
        lines.extend(
            [
                "",
                "Statistics Summary:",
                "",
                f"- Total Listings Considered: {stats.total_count}",
                f"- Valid Listings (price > 0): {stats.count}",
                f"- Average Price per Room: ${stats.avg_price_per_room:.2f}",
                f"- Average Price of All Valid Listings: ${stats.avg_price_valid_listings:.2f}",
            ]
        )
    else:
        lines.extend(["", "No valid listings found based on the applied filters."])

    if result.top_hosts:
        lines.extend(["", f"Top {result.host_limit} Hosts by Number of Listings:"])
        for index, host in enumerate(result.top_hosts, start=1):
            lines.append(f"{index}. Host ID: {host.host_id}, Listings: {host.count}")
    else:
        lines.extend(["", "No hosts found based on the applied filters."])
    return "\n".join(lines)


def run_session(
    settings: Settings,
    *,
    ask: AskFunc,
    echo: EchoFunc,
    csv_path: Optional[str | os.PathLike[str]] = None,
    summary_path: Optional[str | os.PathLike[str]] = None,
) -> int:
    """Run one analysis session and return the process exit status."""

    prefix = settings.prompt_prefix
    source = csv_path or settings.data_path or prompt_csv_path(ask, prefix)

    echo(f"Loading data from {source}...")
    try:
        listings = load_listings(source)
    except LOAD_ERRORS as exc:
        logger.debug("Loading %s failed", source, exc_info=True)
        echo(f"Error reading file: {exc}", err=True)
        return 1

    criteria = prompt_criteria(ask, prefix)
    result = analyze(listings, criteria, top_n=settings.top_hosts)
    echo(render_report(result))

    if summary_path:
        try:
            export_summary(summary_path, result)
        except ExportError as exc:
            echo(f"Error writing summary: {exc}", err=True)
        else:
            echo(f"Summary written to {summary_path}")

    export_path = ask(f"{prefix}{EXPORT_PROMPT}").strip()
    if export_path:
        try:
            written = export_listings(export_path, result.listings)
        except ExportError as exc:
            logger.debug("Export to %s failed", export_path, exc_info=True)
            echo(f"Error writing to file: {exc}", err=True)
        else:
            if written:
                echo(f"Results exported to {export_path}")
            else:
                echo("No data to export.")
    return 0


__all__ = [
    "prompt_csv_path",
    "prompt_criteria",
    "render_report",
    "run_session",
]
