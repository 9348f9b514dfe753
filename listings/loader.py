"""Read listing CSV files and turn their rows into :class:`Listing` objects."""
from __future__ import annotations

import csv
import logging
import os
from pathlib import Path
from typing import Dict, Iterable, List, Mapping, Optional, TextIO

from pydantic import ValidationError

from .errors import MalformedSourceError, SourceUnavailableError
from .models import SEMANTIC_FIELDS, Listing

logger = logging.getLogger(__name__)


def read_rows(path: str | os.PathLike[str]) -> List[Dict[str, str]]:
    """Parse the CSV at *path* into header-keyed rows with trimmed values."""

    file_path = Path(path)
    try:
        handle = open(file_path, "r", newline="", encoding="utf-8-sig")
    except (OSError, ValueError) as exc:
        raise SourceUnavailableError(f"Cannot open {file_path}: {getattr(exc, 'strerror', None) or exc}") from exc

    with handle:
        try:
            return _parse_rows(handle, file_path)
        except UnicodeDecodeError as exc:
            raise MalformedSourceError(f"{file_path} is not valid UTF-8 text: {exc.reason}") from exc
        except csv.Error as exc:
            raise MalformedSourceError(f"{file_path} is not valid CSV: {exc}") from exc
        except OSError as exc:
            raise SourceUnavailableError(f"Cannot read {file_path}: {getattr(exc, 'strerror', None) or exc}") from exc


def _parse_rows(handle: TextIO, file_path: Path) -> List[Dict[str, str]]:
    reader = csv.reader(handle, strict=True)
    header: Optional[List[str]] = None
    rows: List[Dict[str, str]] = []

    for record in reader:
        if not record or (len(record) == 1 and not record[0].strip()):
            continue
        if header is None:
            header = [name.strip() for name in record]
            continue
        if len(record) != len(header):
            raise MalformedSourceError(
                f"{file_path}: line {reader.line_num} has {len(record)} field(s), "
                f"expected {len(header)}"
            )
        rows.append({name: value.strip() for name, value in zip(header, record)})

    if header is None:
        raise MalformedSourceError(f"{file_path} has no header row")

    missing = [name for name in SEMANTIC_FIELDS if name not in header]
    if missing:
        logger.warning("%s is missing column(s): %s", file_path, ", ".join(missing))
    return rows


def normalize_row(row: Mapping[str, str]) -> Listing | None:
    try:
        return Listing.from_row(row)
    except ValidationError as exc:
        logger.debug("Dropping row with host_id %r: %s", row.get("host_id"), exc.errors()[0]["msg"])
        return None


def normalize_rows(rows: Iterable[Mapping[str, str]]) -> List[Listing]:
    """Normalize every row, dropping the ones without a numeric host id."""

    listings: List[Listing] = []
    for row in rows:
        listing = normalize_row(row)
        if listing is not None:
            listings.append(listing)
    return listings


def load_listings(path: str | os.PathLike[str]) -> List[Listing]:
    rows = read_rows(path)
    listings = normalize_rows(rows)
    logger.info(
        "Loaded %d listing(s) from %s (%d row(s) dropped)",
        len(listings),
        path,
        len(rows) - len(listings),
    )
    return listings


__all__ = ["read_rows", "normalize_row", "normalize_rows", "load_listings"]
