from __future__ import annotations

import textwrap
from pathlib import Path

import pytest


SAMPLE_CSV = textwrap.dedent(
    """\
    id,name,host_id,price,accommodates,review_scores_rating
    1,Sunny loft,42,"$1,200.50",4,4.9
    2,Garden flat, 7 ,$80.00,2,4.5
    3,No host,,$95.00,2,4.1
    4,Bad host,abc123,$60.00,1,3.0
    5,Free room,42,,0x,
    6,Harbour view,7,$100.00,3,4.7
    """
)


@pytest.fixture
def csv_factory(tmp_path: Path):
    """Write CSV text into the test's tmp path and return the file path."""

    def _factory(text: str = SAMPLE_CSV, filename: str = "listings.csv", encoding: str = "utf-8") -> Path:
        path = tmp_path / filename
        path.write_text(text, encoding=encoding)
        return path

    return _factory


@pytest.fixture
def sample_csv(csv_factory) -> Path:
    return csv_factory()
