from decimal import Decimal as D

import pytest
from fastapi.testclient import TestClient

from canada_spends.main import app


@pytest.fixture
def client():
    with TestClient(app) as test_client:
        yield test_client


def _dec(value) -> D:
    return D(str(value))


def test_health(client, monkeypatch):
    body = client.get("/health").json()
    assert body["status"] == "ok"
    assert body["default_year"] == "2024"
    assert body["years"] == ["2023", "2024", "2025", "2026"]


def test_health_includes_build_meta(monkeypatch):
    monkeypatch.setenv("BUILD_VERSION", "1.2.3")
    monkeypatch.setenv("BUILD_SHA", "abc123")
    with TestClient(app) as test_client:
        body = test_client.get("/health").json()
    assert body["build"] == {"version": "1.2.3", "sha": "abc123"}


def test_years(client):
    assert client.get("/tax/years").json() == {
        "years": ["2023", "2024", "2025", "2026"],
        "default_year": "2024",
    }


def test_jurisdictions_for_year(client):
    rows = client.get("/tax/2024/jurisdictions").json()
    assert len(rows) == 13
    ontario = next(row for row in rows if row["slug"] == "ontario")
    assert ontario == {"slug": "ontario", "code": "ON", "name": "Ontario", "has_spending_data": True}
    yukon = next(row for row in rows if row["code"] == "YT")
    assert yukon["has_spending_data"] is False


def test_jurisdictions_unknown_year_is_404(client):
    resp = client.get("/tax/1999/jurisdictions")
    assert resp.status_code == 404
    assert resp.json() == {"detail": "Tax data not available for any jurisdiction in 1999"}


def test_calculate_ontario_2024(client):
    resp = client.get("/tax/calculate", params={"income": 100000, "jurisdiction": "ontario", "year": "2024"})
    assert resp.status_code == 200
    body = resp.json()
    assert _dec(body["total_tax"]) == D("27449.6624")
    assert _dec(body["federal_tax"]) == D("20176.185")
    assert _dec(body["provincial_tax"]) == D("7273.4774")
    assert body["jurisdiction"] == "ontario"
    assert body["year"] == "2024"
    assert [item["id"] for item in body["line_items"]][-1] == "health-premium"


def test_calculate_uses_configured_defaults(monkeypatch):
    monkeypatch.setenv("CANADA_SPENDS_DEFAULT_YEAR", "2023")
    monkeypatch.setenv("CANADA_SPENDS_DEFAULT_JURISDICTION", "AB")
    with TestClient(app) as test_client:
        body = test_client.get("/tax/calculate", params={"income": 50000}).json()
    assert body["year"] == "2023"
    assert body["jurisdiction"] == "alberta"
    assert _dec(body["total_tax"]) == D("11731.45")


def test_calculate_accepts_codes(client):
    body = client.get("/tax/calculate", params={"income": 80000, "jurisdiction": "QC", "year": 2024}).json()
    assert body["line_items"][-1]["name"] == "Quebec Abatement"
    assert _dec(body["federal_abatement"]) == D("1810.308225")


@pytest.mark.parametrize(
    "params,detail",
    [
        ({"income": 1, "year": "1999"}, "Tax data not available for ontario in 1999"),
        ({"income": 1, "jurisdiction": "atlantis", "year": "2024"}, "Tax data not available for atlantis in 2024"),
    ],
)
def test_missing_configuration_is_404(client, params, detail):
    resp = client.get("/tax/calculate", params=params)
    assert resp.status_code == 404
    assert resp.json() == {"detail": detail}


@pytest.mark.parametrize("income", ["-5", "abc", "inf"])
def test_invalid_income_is_422(client, income):
    resp = client.get("/tax/calculate", params={"income": income})
    assert resp.status_code == 422


def test_breakdown_with_spending(client):
    body = client.get("/tax/breakdown", params={"income": 100000, "jurisdiction": "ontario", "year": "2024"}).json()
    assert body["spending_available"] is True
    breakdown = body["breakdown"]
    assert breakdown["federal_spending"][-1]["name"] == "Other"
    assert breakdown["combined_chart_data"][-1]["name"] == "Other"
    assert _dec(breakdown["tax_calculation"]["total_tax"]) == D("27449.6624")
    assert "line_items" not in breakdown["tax_calculation"]


def test_breakdown_without_spending(client):
    body = client.get("/tax/breakdown", params={"income": 100000, "jurisdiction": "BC"}).json()
    assert body["spending_available"] is False
    assert body["breakdown"] is None
    assert _dec(body["calculation"]["total_tax"]) > 0


def test_brackets(client):
    body = client.get("/tax/brackets", params={"income": 100000, "year": "2024"}).json()
    assert len(body["federal"]) == 5
    assert _dec(body["federal"][0]["tax_amount"]) == D("8380.05")
    assert _dec(body["federal"][0]["bracket"]["upper"]) == D("55867")
    assert body["federal"][-1]["bracket"]["upper"] is None


def test_compare(client):
    rows = client.get("/tax/compare", params={"income": 100000, "year": "2024"}).json()
    assert len(rows) == 13
    totals = [_dec(row["total_tax"]) for row in rows]
    assert totals == sorted(totals)
    assert {row["abbreviation"] for row in rows} >= {"ON", "QC", "NU"}


def test_compare_unknown_year_is_404(client):
    resp = client.get("/tax/compare", params={"income": 100000, "year": "1999"})
    assert resp.status_code == 404


def test_lifespan_writes_api_log(tmp_path):
    with TestClient(app) as test_client:
        test_client.get("/tax/calculate", params={"income": 1, "year": "1999"})
    log_text = (tmp_path / "logs" / "api.log").read_text(encoding="utf-8")
    assert "Startup complete" in log_text
    assert "Missing tax configuration" in log_text
