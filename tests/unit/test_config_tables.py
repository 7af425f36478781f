from decimal import Decimal as D

import pytest

from canada_spends.tax.configs import ALL_CONFIGS
from canada_spends.tax.jurisdictions import Jurisdiction

CONFIG_IDS = [f"{c.year}-{c.jurisdiction.code}" for c in ALL_CONFIGS]


def _assert_well_formed(table):
    brackets = table.brackets
    assert brackets, table.name
    assert brackets[0].lower == 0
    assert brackets[-1].upper is None
    for current, following in zip(brackets, brackets[1:]):
        assert current.upper == following.lower, table.name
        assert current.upper > current.lower
        assert following.rate >= current.rate
    assert table.basic_personal_amount > 0


@pytest.mark.parametrize("config", ALL_CONFIGS, ids=CONFIG_IDS)
def test_bracket_tables_well_formed(config):
    _assert_well_formed(config.federal.income_tax)
    _assert_well_formed(config.provincial.income_tax)


@pytest.mark.parametrize("config", ALL_CONFIGS, ids=CONFIG_IDS)
def test_contribution_caps_consistent(config):
    for contribution in (config.federal.ei, config.federal.cpp):
        expected = (contribution.max_earnings - contribution.exemption) * contribution.rate
        assert abs(expected - contribution.max_contribution) < D("0.01")
    cpp2 = config.federal.cpp2
    assert cpp2.yampe >= cpp2.ympe
    assert cpp2.ympe == config.federal.cpp.max_earnings


@pytest.mark.parametrize("config", [c for c in ALL_CONFIGS if c.spending is not None], ids=lambda c: f"{c.year}-{c.jurisdiction.code}")
def test_spending_percentages_sum_to_100(config):
    spending = config.spending
    for side in (spending.federal, spending.provincial):
        total = sum(category.percentage for category in side)
        assert abs(total - D("100")) <= D("0.5")
    assert spending.federal_transfer_name in {c.name for c in spending.federal}


def test_quebec_abatement_years():
    with_abatement = {c.year for c in ALL_CONFIGS if c.provincial.federal_abatement is not None}
    assert with_abatement == {"2024", "2025"}
    for config in ALL_CONFIGS:
        if config.provincial.federal_abatement is not None:
            assert config.jurisdiction is Jurisdiction.QUEBEC
            assert config.provincial.federal_abatement.rate == D("0.165")


def test_surtax_and_premium_placement():
    for config in ALL_CONFIGS:
        if config.provincial.health_premium is not None:
            assert config.jurisdiction is Jurisdiction.ONTARIO
        if config.provincial.surtax is not None:
            assert config.jurisdiction is Jurisdiction.ONTARIO or (
                config.jurisdiction is Jurisdiction.PRINCE_EDWARD_ISLAND and config.year == "2023"
            )


def test_health_premium_tiers_contiguous():
    for config in ALL_CONFIGS:
        premium = config.provincial.health_premium
        if premium is None:
            continue
        tiers = premium.tiers
        assert tiers[-1].max_income is None
        for current, following in zip(tiers, tiers[1:]):
            assert current.max_income == following.min_income
            assert current.max_amount <= following.max_amount
