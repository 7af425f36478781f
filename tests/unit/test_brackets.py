from decimal import Decimal as D

import pytest

from canada_spends.tax.calculators import (
    bpa_credit,
    bracket_tax_breakdown,
    compute_bracket_tax,
    tax_from_brackets,
)
from canada_spends.tax.configs.federal import FEDERAL_2024, FEDERAL_2025
from canada_spends.tax.configs.on import ON_2024

FED_2024 = FEDERAL_2024.income_tax


def test_federal_brackets_2024_before_credit():
    assert tax_from_brackets(D("100000"), FED_2024.brackets) == D("17427.315")


def test_bpa_is_credit_at_lowest_rate():
    assert bpa_credit(FED_2024) == D("2355.75")
    assert bpa_credit(FEDERAL_2025.income_tax) == D("16129") * D("0.145")


def test_federal_bracket_tax_2024_after_credit():
    assert compute_bracket_tax(D("100000"), FED_2024) == D("15071.565")


def test_ontario_bracket_tax_2024():
    assert compute_bracket_tax(D("100000"), ON_2024.income_tax) == D("6414.5645")


def test_boundary_income_taxed_in_lower_bracket():
    assert tax_from_brackets(D("55867"), FED_2024.brackets) == D("55867") * D("0.15")
    assert tax_from_brackets(D("55868"), FED_2024.brackets) > tax_from_brackets(D("55867"), FED_2024.brackets)


@pytest.mark.parametrize("income", [D("0"), D("-500"), D("10000"), D("15705")])
def test_credit_floors_tax_at_zero(income):
    assert compute_bracket_tax(income, FED_2024) == D("0")


def test_bracket_breakdown_rows_cover_every_bracket():
    rows = bracket_tax_breakdown(D("100000"), FED_2024.brackets)
    assert len(rows) == len(FED_2024.brackets)
    assert rows[0].taxable_amount == D("55867")
    assert rows[0].tax_amount == D("8380.05")
    assert rows[1].taxable_amount == D("44133")
    assert rows[1].tax_amount == D("9047.265")
    for row in rows[2:]:
        assert row.taxable_amount == 0
        assert row.tax_amount == 0
    assert sum(r.tax_amount for r in rows) == tax_from_brackets(D("100000"), FED_2024.brackets)


def test_top_bracket_is_open_ended():
    income = D("1000000")
    rows = bracket_tax_breakdown(income, FED_2024.brackets)
    top = rows[-1]
    assert top.bracket.upper is None
    assert top.taxable_amount == income - top.bracket.lower
