"""Filter listings against user supplied numeric bounds."""

from __future__ import annotations

import logging
from typing import Callable, Iterable, List, Optional

from .models import FilterCriteria, Listing

_LOGGER = logging.getLogger(__name__)

Predicate = Callable[[Listing], bool]


def _listing_matches(listing: Listing, criteria: FilterCriteria, logger: logging.Logger) -> bool:
    # Price
    if criteria.min_price is not None and listing.price < criteria.min_price:
        logger.debug("FILTER price: %s (need >= %s)", listing.price, criteria.min_price)
        return False
    if criteria.max_price is not None and listing.price > criteria.max_price:
        logger.debug("FILTER price: %s (max %s)", listing.price, criteria.max_price)
        return False
    # Rooms
    if criteria.min_rooms is not None and listing.accommodates < criteria.min_rooms:
        logger.debug("FILTER accommodates: %s (need >= %s)", listing.accommodates, criteria.min_rooms)
        return False
    if criteria.max_rooms is not None and listing.accommodates > criteria.max_rooms:
        logger.debug("FILTER accommodates: %s (max %s)", listing.accommodates, criteria.max_rooms)
        return False
    # Reviews
    if criteria.min_review_score is not None and listing.review_scores_rating < criteria.min_review_score:
        logger.debug(
            "FILTER review score: %s (need >= %s)",
            listing.review_scores_rating,
            criteria.min_review_score,
        )
        return False
    return True


def build_predicate(criteria: FilterCriteria, logger: Optional[logging.Logger] = None) -> Predicate:
    """Return a predicate that accepts listings satisfying every set bound."""

    log = logger or _LOGGER

    def predicate(listing: Listing) -> bool:
        return _listing_matches(listing, criteria, log)

    return predicate


def filter_listings(
    listings: Iterable[Listing],
    criteria: Optional[FilterCriteria] = None,
    *,
    logger: Optional[logging.Logger] = None,
) -> List[Listing]:
    items = list(listings)
    if criteria is None or criteria.is_empty:
        return items
    predicate = build_predicate(criteria, logger)
    kept = [listing for listing in items if predicate(listing)]
    _LOGGER.debug("%d of %d listing(s) kept by %s", len(kept), len(items), criteria)
    return kept


__all__ = ["Predicate", "build_predicate", "filter_listings"]
