import json
from decimal import Decimal as D

import pytest

from canada_spends.cli import EXIT_CONFIG_ERROR, main


def test_calc_json(capsys):
    assert main(["calc", "100000", "-j", "ON", "--year", "2024", "--json"]) == 0
    body = json.loads(capsys.readouterr().out)
    assert D(body["total_tax"]) == D("27449.6624")
    assert body["jurisdiction"] == "ontario"


def test_calc_table(capsys):
    assert main(["--no-color", "calc", "100,000", "--year", "2024"]) == 0
    out = capsys.readouterr().out
    assert "Ontario Surtax" in out
    assert "$27,449.66" in out
    assert "Net income" in out


def test_calc_defaults_from_environment(capsys, monkeypatch):
    monkeypatch.setenv("CANADA_SPENDS_DEFAULT_YEAR", "2023")
    monkeypatch.setenv("CANADA_SPENDS_DEFAULT_JURISDICTION", "alberta")
    assert main(["calc", "50000", "--json"]) == 0
    body = json.loads(capsys.readouterr().out)
    assert body["year"] == "2023"
    assert D(body["total_tax"]) == D("11731.45")


def test_breakdown_table(capsys):
    assert main(["--no-color", "breakdown", "100000", "--year", "2024", "--view", "all"]) == 0
    out = capsys.readouterr().out
    assert "Where your taxes go" in out
    assert "Federal spending" in out
    assert "Provincial spending" in out
    assert "Retirement Benefits" in out


def test_breakdown_coming_soon(capsys):
    assert main(["--no-color", "breakdown", "100000", "-j", "yukon"]) == 0
    assert "coming soon" in capsys.readouterr().out


def test_breakdown_json_without_spending(capsys):
    assert main(["breakdown", "100000", "-j", "NU", "--json"]) == 0
    assert json.loads(capsys.readouterr().out) is None


def test_compare_json(capsys):
    assert main(["compare", "100000", "--year", "2025", "--json"]) == 0
    rows = json.loads(capsys.readouterr().out)
    assert len(rows) == 13
    totals = [D(row["total_tax"]) for row in rows]
    assert totals == sorted(totals)


def test_years(capsys):
    assert main(["--no-color", "years"]) == 0
    out = capsys.readouterr().out
    for year in ("2023", "2024", "2025", "2026"):
        assert f"{year}: AB, BC" in out


def test_missing_configuration_exits_2(capsys):
    assert main(["calc", "50000", "--year", "1999"]) == EXIT_CONFIG_ERROR
    assert "Tax data not available for ontario in 1999" in capsys.readouterr().err


def test_compare_unknown_year_exits_2(capsys):
    assert main(["compare", "50000", "--year", "1999"]) == EXIT_CONFIG_ERROR
    assert "Tax data not available" in capsys.readouterr().err


@pytest.mark.parametrize("income", ["-1", "lots"])
def test_invalid_income_rejected(income, capsys):
    with pytest.raises(SystemExit) as excinfo:
        main(["calc", income])
    assert excinfo.value.code == 2
