"""High-level helper that runs the filter, statistics and ranking steps."""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Any, Dict, Iterable, Optional, Tuple

import logging

from .filters import filter_listings
from .models import FilterCriteria, HostRanking, Listing, Statistics
from .stats import TOP_HOSTS, compute_statistics, rank_hosts


logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class AnalysisResult:
    """Outcome of analysing one set of listings."""

    listings: Tuple[Listing, ...]
    statistics: Statistics
    top_hosts: Tuple[HostRanking, ...]
    criteria: FilterCriteria = field(default_factory=FilterCriteria)
    host_limit: int = TOP_HOSTS

    def summary(self) -> Dict[str, Any]:
        """Return a JSON-serialisable digest of the analysis."""

        return {
            "criteria": asdict(self.criteria),
            "filtered_count": len(self.listings),
            "statistics": asdict(self.statistics),
            "top_hosts": [asdict(host) for host in self.top_hosts],
        }


def analyze(
    listings: Iterable[Listing],
    criteria: Optional[FilterCriteria] = None,
    *,
    top_n: int = TOP_HOSTS,
) -> AnalysisResult:
    criteria = criteria or FilterCriteria()
    filtered = filter_listings(listings, criteria)
    statistics = compute_statistics(filtered)
    top_hosts = rank_hosts(filtered, limit=top_n)
    logger.debug(
        "Analysis kept %d listing(s), %d valid, %d host(s) ranked",
        len(filtered),
        statistics.count,
        len(top_hosts),
    )
    return AnalysisResult(
        listings=tuple(filtered),
        statistics=statistics,
        top_hosts=tuple(top_hosts),
        criteria=criteria,
        host_limit=top_n,
    )


__all__ = ["AnalysisResult", "analyze"]
