"""Summary statistics and host ranking over filtered listings."""

from __future__ import annotations

from typing import Dict, Iterable, List, Sequence

from .models import HostRanking, Listing, Statistics

TOP_HOSTS = 15


def compute_statistics(listings: Sequence[Listing]) -> Statistics:
    """Summarise *listings*; averages only consider listings with a price."""

    valid = [listing for listing in listings if listing.price > 0]
    count = len(valid)
    if not count:
        return Statistics(total_count=len(listings))

    # accommodates is at least 1 by construction
    total_room_price = sum(listing.price / listing.accommodates for listing in valid)
    total_price = sum(listing.price for listing in valid)
    return Statistics(
        total_count=len(listings),
        count=count,
        avg_price_per_room=total_room_price / count,
        avg_price_valid_listings=total_price / count,
    )


def rank_hosts(listings: Iterable[Listing], limit: int = TOP_HOSTS) -> List[HostRanking]:
    """Return the hosts with the most listings, busiest first.

    Hosts with equal counts keep the order in which they were first seen.
    """

    if limit <= 0:
        return []
    counts: Dict[str, int] = {}
    for listing in listings:
        counts[listing.host_id] = counts.get(listing.host_id, 0) + 1
    # sorted() is stable, ties keep insertion order
    ordered = sorted(counts.items(), key=lambda item: item[1], reverse=True)
    return [HostRanking(host_id=host_id, count=count) for host_id, count in ordered[:limit]]


__all__ = ["TOP_HOSTS", "compute_statistics", "rank_hosts"]
