"""Typed errors raised by the listings pipeline."""

from __future__ import annotations


class ListingsError(RuntimeError):
    """Base class for listings analyzer failures."""


class SourceUnavailableError(ListingsError):
    """The input CSV file is missing or cannot be read."""


class MalformedSourceError(ListingsError):
    """The input file could not be parsed as CSV."""


class ExportError(ListingsError):
    """An output file could not be written."""


class ConfigError(ListingsError):
    """The settings file is missing, unreadable or invalid."""


# Errors that abort a session before any analysis output.
LOAD_ERRORS = (SourceUnavailableError, MalformedSourceError)


__all__ = [
    "ListingsError",
    "SourceUnavailableError",
    "MalformedSourceError",
    "ExportError",
    "ConfigError",
    "LOAD_ERRORS",
]
