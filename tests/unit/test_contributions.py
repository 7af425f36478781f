from decimal import Decimal as D

import pytest

from canada_spends.tax.calculators import (
    compute_capped_contribution,
    compute_cpp2_contribution,
    compute_federal_abatement,
)
from canada_spends.tax.configs.federal import FEDERAL_2023, FEDERAL_2024
from canada_spends.tax.configs.qc import QC_2024


def test_ei_capped_2024():
    assert compute_capped_contribution(D("100000"), FEDERAL_2024.ei) == D("1049.12")
    assert compute_capped_contribution(D("50000"), FEDERAL_2024.ei) == D("830")


def test_cpp_exemption_and_cap_2024():
    cpp = FEDERAL_2024.cpp
    assert compute_capped_contribution(D("3500"), cpp) == D("0")
    assert compute_capped_contribution(D("3600"), cpp) == D("5.95")
    assert compute_capped_contribution(D("100000"), cpp) == D("3867.50")


@pytest.mark.parametrize("income", [D("0"), D("-1")])
def test_contributions_zero_without_income(income):
    assert compute_capped_contribution(income, FEDERAL_2024.ei) == 0
    assert compute_capped_contribution(income, FEDERAL_2024.cpp) == 0
    assert compute_cpp2_contribution(income, FEDERAL_2024.cpp2) == 0


def test_cpp2_band_2024():
    cpp2 = FEDERAL_2024.cpp2
    assert compute_cpp2_contribution(D("68500"), cpp2) == D("0")
    assert compute_cpp2_contribution(D("70000"), cpp2) == D("60")
    assert compute_cpp2_contribution(D("100000"), cpp2) == D("188")


@pytest.mark.parametrize("income", [D("50000"), D("66601"), D("90000"), D("500000")])
def test_cpp2_did_not_exist_in_2023(income):
    assert compute_cpp2_contribution(income, FEDERAL_2023.cpp2) == D("0")


def test_quebec_abatement_rate():
    config = QC_2024.federal_abatement
    assert config is not None
    assert config.name == "Quebec Abatement"
    assert compute_federal_abatement(D("10000"), config) == D("1650")


@pytest.mark.parametrize("federal_tax", [D("0"), D("-10")])
def test_abatement_zero_without_federal_tax(federal_tax):
    assert compute_federal_abatement(federal_tax, QC_2024.federal_abatement) == D("0")
