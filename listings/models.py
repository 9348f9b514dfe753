"""Data models for Airbnb listing analysis."""

from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Any, Dict, Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .normalize import clean_host_id, parse_accommodates, parse_price, parse_rating

SEMANTIC_FIELDS = ("price", "accommodates", "review_scores_rating", "host_id")


class Listing(BaseModel):
    """A single CSV row with its numeric columns normalized.

    Columns other than the four semantic ones are kept verbatim in ``raw``.
    """

    model_config = ConfigDict(frozen=True)

    host_id: str
    price: float = Field(default=0.0, ge=0)
    accommodates: int = Field(default=1, ge=1)
    review_scores_rating: float = Field(default=0.0, ge=0)
    raw: Dict[str, Any] = Field(default_factory=dict, repr=False)

    @field_validator("price", mode="before")
    @classmethod
    def coerce_price(cls, v):
        return parse_price(v)

    @field_validator("accommodates", mode="before")
    @classmethod
    def coerce_accommodates(cls, v):
        return parse_accommodates(v)

    @field_validator("review_scores_rating", mode="before")
    @classmethod
    def coerce_rating(cls, v):
        return parse_rating(v)

    @field_validator("host_id", mode="before")
    @classmethod
    def check_host_id(cls, v):
        host_id = clean_host_id(v)
        if host_id is None:
            raise ValueError(f"host_id must be made of digits, got {v!r}")
        return host_id

    @classmethod
    def from_row(cls, row: Mapping[str, Any]) -> "Listing":
        return cls(
            host_id=row.get("host_id"),
            price=row.get("price"),
            accommodates=row.get("accommodates"),
            review_scores_rating=row.get("review_scores_rating"),
            raw=dict(row),
        )

    def to_row(self) -> Dict[str, Any]:
        """Return the original columns with normalized values written in place."""

        row: Dict[str, Any] = dict(self.raw)
        row.update(
            price=self.price,
            accommodates=self.accommodates,
            review_scores_rating=self.review_scores_rating,
            host_id=self.host_id,
        )
        return row


@dataclass(frozen=True, slots=True)
class FilterCriteria:
    """Optional numeric bounds; ``None`` leaves a bound unset."""

    min_price: Optional[float] = None
    max_price: Optional[float] = None
    min_rooms: Optional[int] = None
    max_rooms: Optional[int] = None
    min_review_score: Optional[float] = None

    @property
    def is_empty(self) -> bool:
        return all(getattr(self, f.name) is None for f in fields(self))


@dataclass(frozen=True, slots=True)
class Statistics:
    total_count: int = 0
    count: int = 0
    avg_price_per_room: float = 0.0
    avg_price_valid_listings: float = 0.0


@dataclass(frozen=True, slots=True)
class HostRanking:
    host_id: str
    count: int


__all__ = [
    "Listing",
    "FilterCriteria",
    "Statistics",
    "HostRanking",
    "SEMANTIC_FIELDS",
]
