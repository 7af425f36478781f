from decimal import Decimal as D

import pytest

from canada_spends.tax.calculators import compute_health_premium
from canada_spends.tax.configs.on import ON_2024, ON_2025, ON_2026

OHP_2025 = ON_2025.health_premium
OHP_2026 = ON_2026.health_premium


@pytest.mark.parametrize(
    "income,expected",
    [
        (D("0"), D("0")),
        (D("19999"), D("0")),
        (D("20000"), D("0")),
        (D("22000"), D("120")),
        (D("25000"), D("300")),
        (D("36500"), D("330")),
        (D("40000"), D("450")),
        (D("60000"), D("600")),
        (D("100000"), D("750")),
        (D("250000"), D("900")),
    ],
)
def test_ontario_health_premium_2025(income, expected):
    assert compute_health_premium(income, OHP_2025) == expected


def test_2024_uses_the_stepped_table():
    assert compute_health_premium(D("100000"), ON_2024.health_premium) == D("750")


@pytest.mark.parametrize(
    "income,expected",
    [
        (D("20000"), D("0")),
        (D("25000"), D("300")),
        (D("30000"), D("300")),
        (D("37000"), D("360")),
        (D("45000"), D("450")),
        (D("60000"), D("600")),
        (D("100000"), D("600")),
        (D("200300"), D("675")),
        (D("300000"), D("750")),
    ],
)
def test_ontario_health_premium_2026_plateaus(income, expected):
    assert compute_health_premium(income, OHP_2026) == expected


def test_premium_never_exceeds_tier_cap():
    for tier in OHP_2026.tiers:
        probe = tier.max_income if tier.max_income is not None else tier.min_income + D("1000000")
        assert compute_health_premium(probe, OHP_2026) <= tier.max_amount
