from __future__ import annotations

from decimal import Decimal
from typing import Iterable

from canada_spends.tax.models import BracketTaxBreakdown, BracketTaxConfig, TaxBracket

D = Decimal


def _taxable_in_bracket(income: D, bracket: TaxBracket) -> D:
    span = income - bracket.lower
    if bracket.upper is not None:
        span = min(span, bracket.upper - bracket.lower)
    return span


def tax_from_brackets(income: D, brackets: Iterable[TaxBracket]) -> D:
    """Progressive tax on ``income`` before any credit.

    Brackets are half-open ``[lower, upper)`` and must be sorted ascending;
    income sitting exactly on a boundary is taxed entirely in the lower one.
    """
    tax = D("0")
    for bracket in brackets:
        if income <= bracket.lower:
            break
        tax += _taxable_in_bracket(income, bracket) * bracket.rate
    return tax


def bracket_tax_breakdown(income: D, brackets: Iterable[TaxBracket]) -> list[BracketTaxBreakdown]:
    rows: list[BracketTaxBreakdown] = []
    for bracket in brackets:
        if income <= bracket.lower:
            rows.append(BracketTaxBreakdown(bracket=bracket, taxable_amount=D("0"), tax_amount=D("0")))
            continue
        taxable = _taxable_in_bracket(income, bracket)
        rows.append(
            BracketTaxBreakdown(
                bracket=bracket,
                taxable_amount=taxable,
                tax_amount=taxable * bracket.rate,
            )
        )
    return rows


def bpa_credit(config: BracketTaxConfig) -> D:
    # BPA is a credit at the lowest rate, not a deduction from income
    return config.basic_personal_amount * config.lowest_rate


def compute_bracket_tax(income: D, config: BracketTaxConfig) -> D:
    before_credit = tax_from_brackets(income, config.brackets)
    return max(D("0"), before_credit - bpa_credit(config))


__all__ = [
    "bpa_credit",
    "bracket_tax_breakdown",
    "compute_bracket_tax",
    "tax_from_brackets",
]
