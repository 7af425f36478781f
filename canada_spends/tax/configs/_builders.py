from __future__ import annotations

from decimal import Decimal
from typing import Union

from canada_spends.tax.models import (
    BracketTaxConfig,
    HealthPremiumConfig,
    HealthPremiumTier,
    SpendingCategoryConfig,
    SurtaxConfig,
    SurtaxTier,
    TaxBracket,
)

D = Decimal
Number = Union[int, str, Decimal]


def d(value: Number) -> D:
    return value if isinstance(value, Decimal) else D(str(value))


def income_tax(
    name: str,
    rows: tuple[tuple[Number, Number | None, Number], ...],
    basic_personal_amount: Number,
) -> BracketTaxConfig:
    return BracketTaxConfig(
        name=name,
        brackets=tuple(
            TaxBracket(lower=d(lower), upper=None if upper is None else d(upper), rate=d(rate))
            for lower, upper, rate in rows
        ),
        basic_personal_amount=d(basic_personal_amount),
    )


def surtax(name: str, *rows: tuple[Number, Number]) -> SurtaxConfig:
    return SurtaxConfig(
        name=name,
        tiers=tuple(SurtaxTier(threshold=d(threshold), rate=d(rate)) for threshold, rate in rows),
    )


def health_premium(
    name: str, *rows: tuple[Number, Number | None, Number, Number, Number]
) -> HealthPremiumConfig:
    return HealthPremiumConfig(
        name=name,
        tiers=tuple(
            HealthPremiumTier(
                min_income=d(lo),
                max_income=None if hi is None else d(hi),
                base_amount=d(base),
                rate=d(rate),
                max_amount=d(cap),
            )
            for lo, hi, base, rate, cap in rows
        ),
    )


def spending(*rows: tuple[str, Number]) -> tuple[SpendingCategoryConfig, ...]:
    return tuple(SpendingCategoryConfig(name=name, percentage=d(pct)) for name, pct in rows)
