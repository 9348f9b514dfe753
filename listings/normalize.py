"""Normalization helpers for raw listing values."""
from __future__ import annotations

import logging
import math
import re
from typing import Any, Optional

logger = logging.getLogger(__name__)

PRICE_JUNK_RE = re.compile(r"[^0-9.]")
LEADING_FLOAT_RE = re.compile(r"\s*([+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?)")
LEADING_INT_RE = re.compile(r"\s*([+-]?\d+)")
HOST_ID_RE = re.compile(r"[0-9]+")


def leading_float(value: Any) -> Optional[float]:
    """Parse the decimal number at the start of *value*.

    Trailing text is ignored (``"4.5 stars"`` gives ``4.5``). Returns ``None``
    for blank, non-numeric or non-finite input.
    """

    if value is None:
        return None
    match = LEADING_FLOAT_RE.match(str(value))
    if not match:
        return None
    number = float(match.group(1))
    if not math.isfinite(number):
        logger.debug("Ignoring non-finite number %r", value)
        return None
    return number


def leading_int(value: Any) -> Optional[int]:
    """Parse the integer at the start of *value*, or return ``None``."""

    if value is None:
        return None
    match = LEADING_INT_RE.match(str(value))
    if not match:
        return None
    try:
        return int(match.group(1))
    except ValueError:
        # longer than the interpreter's int string limit
        logger.debug("Ignoring oversized integer in %.20r...", value)
        return None


def parse_price(value: Any) -> float:
    """Return a non-negative price from *value*.

    Numbers below zero give 0.0, while text keeps only digits and dots, so a
    leading minus sign is dropped (``"-$40"`` gives 40.0).
    """

    if isinstance(value, (int, float)) and not isinstance(value, bool):
        number = float(value)
        return number if math.isfinite(number) and number > 0 else 0.0
    if not value:
        return 0.0
    cleaned = PRICE_JUNK_RE.sub("", str(value))
    number = leading_float(cleaned)
    if number is None:
        logger.debug("Unable to parse price from %r", value)
        return 0.0
    return number


def parse_accommodates(value: Any) -> int:
    number = leading_int(value)
    if number is None or number < 1:
        return 1
    return number


def parse_rating(value: Any) -> float:
    number = leading_float(value)
    if number is None or number < 0:
        return 0.0
    # -0.0 collapses to 0.0
    return number + 0.0


def clean_host_id(value: Any) -> Optional[str]:
    """Return the trimmed host id when it is made of ASCII digits only."""

    if value is None:
        return None
    text = str(value).strip()
    if not HOST_ID_RE.fullmatch(text):
        return None
    return text


__all__ = [
    "leading_float",
    "leading_int",
    "parse_price",
    "parse_accommodates",
    "parse_rating",
    "clean_host_id",
]
