"""Aggregate the individual engines into one detailed tax calculation.

Components are always computed in this order:

1. federal income tax (brackets minus the federal BPA credit)
2. Employment Insurance
3. Canada Pension Plan
4. CPP2 (second additional contribution)
5. provincial income tax (brackets minus the provincial BPA credit)
6. provincial surtax, charged on the provincial income tax from step 5
7. provincial health premium, charged on gross income
8. federal abatement, charged on the federal income tax from step 1

The surtax depends on step 5 and the abatement on step 1; nothing else
depends on an earlier result.
"""

from __future__ import annotations

import logging
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation

from canada_spends.tax.calculators import (
    bracket_tax_breakdown,
    compute_bracket_tax,
    compute_capped_contribution,
    compute_cpp2_contribution,
    compute_federal_abatement,
    compute_health_premium,
    compute_surtax,
)
from canada_spends.tax.jurisdictions import Jurisdiction
from canada_spends.tax.models import (
    BracketTaxBreakdown,
    DetailedTaxCalculation,
    JurisdictionComparison,
    Level,
    LineItemCategory,
    TaxCalculation,
    TaxLineItem,
    TaxYearProvinceConfig,
)
from canada_spends.tax.registry import TaxConfigRegistry, default_registry

D = Decimal
ZERO = D("0")
HUNDRED = D("100")

logger = logging.getLogger("canada_spends.tax")

Number = int | float | str | Decimal


def to_decimal(value: Number) -> D:
    """Convert user input to ``Decimal`` through ``str`` so 0.1 stays 0.1."""
    if isinstance(value, Decimal):
        result = value
    else:
        try:
            result = D(str(value).strip().replace(",", "").lstrip("$"))
        except InvalidOperation as exc:
            raise ValueError(f"Invalid income amount: {value!r}") from exc
    if not result.is_finite():
        raise ValueError(f"Income must be a finite number, got {value!r}")
    return result


def _rate_of(amount: D, income: D) -> D:
    return amount / income * HUNDRED if income > 0 else ZERO


def _resolve(registry: TaxConfigRegistry | None) -> TaxConfigRegistry:
    return registry if registry is not None else default_registry()


def calculate_with_config(income: Number, config: TaxYearProvinceConfig) -> DetailedTaxCalculation:
    gross = to_decimal(income)
    federal = config.federal
    provincial = config.provincial
    province_name = config.jurisdiction.display_name
    line_items: list[TaxLineItem] = []

    def add(item_id: str, name: str, level: Level, amount: D, category: LineItemCategory) -> None:
        line_items.append(
            TaxLineItem(
                id=item_id,
                name=name,
                level=level,
                amount=amount,
                effective_rate=_rate_of(amount, gross),
                category=category,
            )
        )

    federal_income_tax = compute_bracket_tax(gross, federal.income_tax)
    add("federal-income-tax", federal.income_tax.name, "federal", federal_income_tax, "income_tax")

    ei = compute_capped_contribution(gross, federal.ei)
    add("ei-contribution", federal.ei.name, "federal", ei, "ei")

    cpp = compute_capped_contribution(gross, federal.cpp)
    add("cpp-contribution", federal.cpp.name, "federal", cpp, "cpp")

    cpp2 = compute_cpp2_contribution(gross, federal.cpp2)
    if cpp2 > 0:
        add("cpp2-contribution", federal.cpp2.name, "federal", cpp2, "cpp2")

    provincial_income_tax = compute_bracket_tax(gross, provincial.income_tax)
    add(
        "provincial-income-tax",
        f"{province_name} Income Tax",
        "provincial",
        provincial_income_tax,
        "income_tax_provincial",
    )

    surtax = ZERO
    if provincial.surtax is not None:
        surtax = compute_surtax(provincial_income_tax, provincial.surtax)
        if surtax > 0:
            add("provincial-surtax", f"{province_name} Surtax", "provincial", surtax, "surtax")

    health_premium = ZERO
    if provincial.health_premium is not None:
        health_premium = compute_health_premium(gross, provincial.health_premium)
        if health_premium > 0:
            add(
                "health-premium",
                f"{province_name} Health Premium",
                "provincial",
                health_premium,
                "health_premium",
            )

    abatement = ZERO
    if provincial.federal_abatement is not None:
        abatement = compute_federal_abatement(federal_income_tax, provincial.federal_abatement)
        if abatement > 0:
            # Recorded negative: it reduces the federal bill.
            add("federal-abatement", provincial.federal_abatement.name, "federal", -abatement, "federal_abatement")

    federal_tax = federal_income_tax + ei + cpp + cpp2 - abatement
    provincial_tax = provincial_income_tax + surtax + health_premium
    total_tax = federal_tax + provincial_tax

    return DetailedTaxCalculation(
        gross_income=gross,
        federal_tax=federal_tax,
        provincial_tax=provincial_tax,
        total_tax=total_tax,
        net_income=gross - total_tax,
        effective_tax_rate=_rate_of(total_tax, gross),
        line_items=line_items,
        federal_income_tax=federal_income_tax,
        provincial_income_tax=provincial_income_tax,
        ei_contribution=ei,
        cpp_contribution=cpp,
        cpp2_contribution=cpp2,
        surtax=surtax,
        health_premium=health_premium,
        federal_abatement=abatement,
        year=config.year,
        jurisdiction=config.jurisdiction,
    )


def calculate_detailed_tax(
    income: Number,
    jurisdiction: Jurisdiction | str,
    year: int | str,
    registry: TaxConfigRegistry | None = None,
) -> DetailedTaxCalculation:
    """Full calculation for one taxpayer.

    Raises ``ConfigurationNotFoundError`` when no table exists for the
    ``(year, jurisdiction)`` pair; there is no fallback to another year.
    """
    config = _resolve(registry).get_config(year, jurisdiction)
    result = calculate_with_config(income, config)
    logger.debug(
        "Calculated %s %s income=%s total_tax=%s",
        config.year,
        config.jurisdiction.value,
        result.gross_income,
        result.total_tax,
    )
    return result


def calculate_total_tax(
    income: Number,
    jurisdiction: Jurisdiction | str,
    year: int | str,
    registry: TaxConfigRegistry | None = None,
) -> TaxCalculation:
    return calculate_detailed_tax(income, jurisdiction, year, registry).summary()


def calculate_bracket_breakdown(
    income: Number,
    jurisdiction: Jurisdiction | str,
    year: int | str,
    registry: TaxConfigRegistry | None = None,
) -> dict[Level, list[BracketTaxBreakdown]]:
    """Per-bracket taxable amount and tax, before the BPA credit."""
    config = _resolve(registry).get_config(year, jurisdiction)
    gross = to_decimal(income)
    return {
        "federal": bracket_tax_breakdown(gross, config.federal.income_tax.brackets),
        "provincial": bracket_tax_breakdown(gross, config.provincial.income_tax.brackets),
    }


def compare_jurisdictions(
    income: Number,
    year: int | str,
    registry: TaxConfigRegistry | None = None,
) -> list[JurisdictionComparison]:
    """Tax owed on the same income in every jurisdiction, cheapest first."""
    reg = _resolve(registry)
    rows: list[JurisdictionComparison] = []
    for jurisdiction in reg.supported_jurisdictions(year):
        result = calculate_with_config(income, reg.get_config(year, jurisdiction))
        rows.append(
            JurisdictionComparison(
                jurisdiction=jurisdiction,
                name=jurisdiction.display_name,
                abbreviation=jurisdiction.code,
                federal_tax=result.federal_tax,
                provincial_tax=result.provincial_tax,
                total_tax=result.total_tax,
                effective_rate=result.effective_tax_rate,
            )
        )
    rows.sort(key=lambda row: row.total_tax)
    return rows


def format_currency(amount: Number, decimals: int = 2) -> str:
    value = to_decimal(amount).quantize(D(1).scaleb(-decimals), rounding=ROUND_HALF_UP)
    sign = "-" if value < 0 else ""
    return f"{sign}${abs(value):,.{decimals}f}"


def format_percentage(rate: Number) -> str:
    value = to_decimal(rate).quantize(D("0.1"), rounding=ROUND_HALF_UP)
    return f"{value:.1f}%"


__all__ = [
    "calculate_bracket_breakdown",
    "calculate_detailed_tax",
    "calculate_total_tax",
    "calculate_with_config",
    "compare_jurisdictions",
    "format_currency",
    "format_percentage",
    "to_decimal",
]
