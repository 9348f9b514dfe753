from __future__ import annotations

from pathlib import Path
import sys

sys.path.append(str(Path(__file__).resolve().parents[1]))

from typer.testing import CliRunner

from cli import app


runner = CliRunner()

CSV_TEXT = (
    "id,host_id,price,accommodates,review_scores_rating\n"
    "1,42,$150.00,2,4.8\n"
    "2,42,$90.00,1,4.2\n"
    "3,7,$0.00,2,\n"
    "4,oops,$70.00,2,4.0\n"
)


def write_listings(tmp_path: Path) -> Path:
    path = tmp_path / "listings.csv"
    path.write_text(CSV_TEXT, encoding="utf-8")
    return path


def test_cli_prompts_for_path_and_prints_report(tmp_path):
    source = write_listings(tmp_path)
    answers = "\n".join(["", str(source), "", "", "", "", "", ""]) + "\n"

    result = runner.invoke(app, [], input=answers)

    assert result.exit_code == 0, result.output
    assert f"Loading data from {source}..." in result.output
    assert "Filtered Listings Count: 3" in result.output
    assert "- Valid Listings (price > 0): 2" in result.output
    assert "- Average Price per Room: $82.50" in result.output
    assert "- Average Price of All Valid Listings: $120.00" in result.output
    assert "1. Host ID: 42, Listings: 2" in result.output
    assert "2. Host ID: 7, Listings: 1" in result.output


def test_cli_exports_filtered_listings(tmp_path):
    source = write_listings(tmp_path)
    target = tmp_path / "out.csv"
    answers = "\n".join(["100", "", "", "", "", str(target)]) + "\n"

    result = runner.invoke(app, ["--csv", str(source)], input=answers)

    assert result.exit_code == 0, result.output
    assert "Filtered Listings Count: 1" in result.output
    assert target.read_text(encoding="utf-8").splitlines() == [
        "id,host_id,price,accommodates,review_scores_rating",
        "1,42,150.0,2,4.8",
    ]


def test_cli_missing_file_exits_non_zero(tmp_path):
    result = runner.invoke(app, ["--csv", str(tmp_path / "missing.csv")])

    assert result.exit_code == 1
    assert "Error reading file" in result.output
    assert "Filtered Listings Count" not in result.output


def test_cli_invalid_config_exits_with_usage_error(tmp_path):
    config = tmp_path / "bad.yml"
    config.write_text("top_hosts: many\n", encoding="utf-8")

    result = runner.invoke(app, ["--config", str(config)])

    assert result.exit_code == 2
    assert "Invalid config" in result.output


def test_cli_uses_config_settings(tmp_path):
    source = write_listings(tmp_path)
    config = tmp_path / "analyzer.yml"
    config.write_text(f"data_path: {source}\ntop_hosts: 1\n", encoding="utf-8")
    answers = "\n" * 6

    result = runner.invoke(app, ["--config", str(config)], input=answers)

    assert result.exit_code == 0, result.output
    assert "Top 1 Hosts by Number of Listings:" in result.output
    assert "2. Host ID" not in result.output
