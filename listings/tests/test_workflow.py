from dataclasses import FrozenInstanceError

import pytest

from listings.loader import load_listings
from listings.models import FilterCriteria
from listings.workflow import AnalysisResult, analyze


def test_analyze_runs_filter_statistics_and_ranking(sample_csv):
    listings = load_listings(sample_csv)

    result = analyze(listings, FilterCriteria(min_rooms=2))

    assert [listing.raw["id"] for listing in result.listings] == ["1", "2", "6"]
    assert result.statistics.total_count == 3
    assert result.statistics.count == 3
    assert result.statistics.avg_price_valid_listings == pytest.approx((1200.50 + 80 + 100) / 3)
    assert [(host.host_id, host.count) for host in result.top_hosts] == [("7", 2), ("42", 1)]


def test_analyze_without_criteria_keeps_everything(sample_csv):
    listings = load_listings(sample_csv)

    result = analyze(listings)

    assert list(result.listings) == listings
    assert result.statistics.total_count == 4
    assert result.statistics.count == 3
    assert result.host_limit == 15


def test_analyze_respects_host_limit(sample_csv):
    result = analyze(load_listings(sample_csv), top_n=1)

    assert len(result.top_hosts) == 1
    assert result.host_limit == 1


def test_analysis_result_is_immutable(sample_csv):
    result = analyze(load_listings(sample_csv))

    assert isinstance(result, AnalysisResult)
    with pytest.raises(FrozenInstanceError):
        result.listings = ()  # type: ignore[misc]
