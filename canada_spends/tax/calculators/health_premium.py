from __future__ import annotations

from decimal import Decimal

from canada_spends.tax.models import HealthPremiumConfig, HealthPremiumTier

D = Decimal


def _find_tier(income: D, config: HealthPremiumConfig) -> HealthPremiumTier | None:
    for tier in config.tiers:
        if income > tier.min_income and (tier.max_income is None or income <= tier.max_income):
            return tier
    return None


def compute_health_premium(income: D, config: HealthPremiumConfig) -> D:
    tier = _find_tier(income, config)
    if tier is None:
        return D("0")
    premium = tier.base_amount + (income - tier.min_income) * tier.rate
    return min(premium, tier.max_amount)


__all__ = ["compute_health_premium"]
