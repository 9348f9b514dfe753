"""Write filtered listings and analysis summaries to disk."""
from __future__ import annotations

import csv
import json
import logging
import os
from pathlib import Path
from typing import Iterable

from .errors import ExportError
from .models import Listing
from .workflow import AnalysisResult

logger = logging.getLogger(__name__)


def export_listings(path: str | os.PathLike[str], listings: Iterable[Listing]) -> int:
    """Write *listings* to a CSV file at *path* and return the row count.

    The header follows the column order of the first listing. Nothing is
    written when there are no listings. Missing parent directories are not
    created.
    """

    rows = [listing.to_row() for listing in listings]
    if not rows:
        logger.info("No data to export to %s", path)
        return 0

    fieldnames = list(rows[0].keys())
    try:
        with open(path, "w", newline="", encoding="utf-8") as handle:
            writer = csv.DictWriter(handle, fieldnames=fieldnames, restval="", extrasaction="ignore")
            writer.writeheader()
            writer.writerows(rows)
    except (OSError, ValueError) as exc:
        raise ExportError(f"Cannot write {path}: {getattr(exc, 'strerror', None) or exc}") from exc
    logger.info("Wrote %s rows to %s", len(rows), path)
    return len(rows)


def export_summary(path: str | os.PathLike[str], result: AnalysisResult) -> None:
    """Write the statistics and host ranking of *result* as JSON."""

    payload = json.dumps(result.summary(), ensure_ascii=False, indent=2)
    try:
        Path(path).write_text(payload + "\n", encoding="utf-8")
    except (OSError, ValueError) as exc:
        raise ExportError(f"Cannot write {path}: {getattr(exc, 'strerror', None) or exc}") from exc
    logger.info("Wrote summary JSON to %s", path)


__all__ = ["export_listings", "export_summary"]
