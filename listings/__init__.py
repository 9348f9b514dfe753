"""Airbnb listings analysis package."""

from .errors import (
    ConfigError,
    ExportError,
    ListingsError,
    MalformedSourceError,
    SourceUnavailableError,
)
from .export import export_listings, export_summary
from .filters import build_predicate, filter_listings
from .loader import load_listings, normalize_rows, read_rows
from .models import FilterCriteria, HostRanking, Listing, Statistics
from .stats import TOP_HOSTS, compute_statistics, rank_hosts
from .workflow import AnalysisResult, analyze

__all__ = [
    "Listing",
    "FilterCriteria",
    "Statistics",
    "HostRanking",
    "AnalysisResult",
    "read_rows",
    "normalize_rows",
    "load_listings",
    "build_predicate",
    "filter_listings",
    "compute_statistics",
    "rank_hosts",
    "TOP_HOSTS",
    "analyze",
    "export_listings",
    "export_summary",
    "ListingsError",
    "SourceUnavailableError",
    "MalformedSourceError",
    "ExportError",
    "ConfigError",
]
