"""Map a taxpayer's federal and provincial tax onto budget categories.

The provincial side is funded by provincial tax plus the province's share
of federal transfers, so the transfer line is removed from the federal side
of the combined view to avoid counting it twice.
"""

from __future__ import annotations

from decimal import Decimal
from typing import Iterable

from canada_spends.tax.calculator import format_currency, format_percentage
from canada_spends.tax.configs.spending import OTHER_PROVINCES_TRANSFER_NAME, PROVINCIAL_TRANSFER_NAMES
from canada_spends.tax.jurisdictions import Jurisdiction
from canada_spends.tax.models import (
    CombinedSpendingItem,
    Level,
    PersonalTaxBreakdown,
    SpendingCategory,
    SpendingCategoryConfig,
    TaxCalculation,
)
from canada_spends.tax.registry import TaxConfigRegistry, default_registry

D = Decimal
ZERO = D("0")
HUNDRED = D("100")

OTHER = "Other"
# Categories worth less than this many dollars are folded into "Other".
OTHER_THRESHOLD = D("20")


def _category(name: str, amount: D, percentage: D, level: Level) -> SpendingCategory:
    return SpendingCategory(
        name=name,
        amount=amount,
        percentage=percentage,
        formatted_amount=format_currency(amount, decimals=0),
        formatted_percentage=format_percentage(percentage),
        level=level,
    )


def allocate_spending(
    tax_amount: D, categories: Iterable[SpendingCategoryConfig], level: Level
) -> list[SpendingCategory]:
    return [
        _category(category.name, tax_amount * category.percentage / HUNDRED, category.percentage, level)
        for category in categories
    ]


def group_small_amounts(
    categories: list[SpendingCategory], threshold: D = OTHER_THRESHOLD
) -> list[SpendingCategory]:
    """Sort by amount descending and fold small entries into a trailing "Other"."""
    large = [c for c in categories if c.amount >= threshold and c.name != OTHER]
    small = [c for c in categories if c.amount < threshold and c.name != OTHER]
    existing_other = next((c for c in categories if c.name == OTHER), None)

    grouped = sorted(large, key=lambda c: c.amount, reverse=True)
    if not small and existing_other is None:
        return grouped

    amount = sum((c.amount for c in small), ZERO)
    percentage = sum((c.percentage for c in small), ZERO)
    if existing_other is not None:
        amount += existing_other.amount
        percentage += existing_other.percentage
        level = existing_other.level
    else:
        level = small[0].level
    grouped.append(_category(OTHER, amount, percentage, level))
    return grouped


def _is_other_transfer(name: str) -> bool:
    return name in PROVINCIAL_TRANSFER_NAMES or name == OTHER_PROVINCES_TRANSFER_NAME


def combine_spending(
    federal: list[SpendingCategory],
    provincial: list[SpendingCategory],
    federal_transfer_name: str,
) -> list[SpendingCategory]:
    """Merge both sides by category name; percentages are of the combined total."""
    amounts: dict[str, D] = {}
    levels: dict[str, Level] = {}
    transfer_amount = ZERO

    for category in federal:
        if category.name == federal_transfer_name:
            continue
        if _is_other_transfer(category.name):
            transfer_amount += category.amount
            continue
        amounts[category.name] = category.amount
        levels[category.name] = "federal"

    if transfer_amount > 0:
        amounts[OTHER_PROVINCES_TRANSFER_NAME] = transfer_amount
        levels[OTHER_PROVINCES_TRANSFER_NAME] = "federal"

    for category in provincial:
        if category.name in amounts:
            # shared names are reported under the federal level
            amounts[category.name] += category.amount
            levels[category.name] = "federal"
        else:
            amounts[category.name] = category.amount
            levels[category.name] = "provincial"

    total = sum(amounts.values(), ZERO)
    combined = [
        _category(name, amount, amount / total * HUNDRED if total > 0 else ZERO, levels[name])
        for name, amount in amounts.items()
    ]
    return sorted(combined, key=lambda c: c.amount, reverse=True)


def build_chart_data(
    federal: list[SpendingCategory],
    provincial: list[SpendingCategory],
    federal_transfer_name: str,
) -> list[CombinedSpendingItem]:
    """Stacked-bar rows, largest total first and "Other" always last."""
    rows: dict[str, list[D]] = {}
    transfer_amount = ZERO

    for category in federal:
        if category.name == federal_transfer_name:
            continue
        if _is_other_transfer(category.name):
            transfer_amount += category.amount
            continue
        rows.setdefault(category.name, [ZERO, ZERO])[0] = category.amount

    if transfer_amount > 0:
        rows[OTHER_PROVINCES_TRANSFER_NAME] = [transfer_amount, ZERO]

    for category in provincial:
        rows.setdefault(category.name, [ZERO, ZERO])[1] = category.amount

    items = [
        CombinedSpendingItem(
            name=name,
            federal_amount=fed,
            provincial_amount=prov,
            total_amount=fed + prov,
            formatted_total=format_currency(fed + prov, decimals=0),
        )
        for name, (fed, prov) in rows.items()
    ]
    return sorted(items, key=lambda item: (item.name == OTHER, -item.total_amount))


def calculate_personal_tax_breakdown(
    tax_calculation: TaxCalculation,
    jurisdiction: Jurisdiction | str,
    year: int | str,
    registry: TaxConfigRegistry | None = None,
) -> PersonalTaxBreakdown | None:
    """Spending breakdown for an already computed tax bill.

    Raises ``ConfigurationNotFoundError`` for an unknown ``(year,
    jurisdiction)``; returns ``None`` when the jurisdiction has tax tables
    but no published spending data.
    """
    reg = registry if registry is not None else default_registry()
    spending = reg.get_config(year, jurisdiction).spending
    if spending is None:
        return None

    federal = allocate_spending(tax_calculation.federal_tax, spending.federal, "federal")
    transfer = next((c.amount for c in federal if c.name == spending.federal_transfer_name), ZERO)
    provincial = allocate_spending(tax_calculation.provincial_tax + transfer, spending.provincial, "provincial")

    federal_grouped = group_small_amounts(federal)
    provincial_grouped = group_small_amounts(provincial)

    # Combined view starts from the ungrouped lists; the chart from the grouped ones.
    combined = group_small_amounts(combine_spending(federal, provincial, spending.federal_transfer_name))
    chart = build_chart_data(federal_grouped, provincial_grouped, spending.federal_transfer_name)

    return PersonalTaxBreakdown(
        tax_calculation=tax_calculation,
        federal_spending=federal_grouped,
        provincial_spending=provincial_grouped,
        combined_spending=combined,
        combined_chart_data=chart,
    )


__all__ = [
    "OTHER_THRESHOLD",
    "allocate_spending",
    "build_chart_data",
    "calculate_personal_tax_breakdown",
    "combine_spending",
    "group_small_amounts",
]
