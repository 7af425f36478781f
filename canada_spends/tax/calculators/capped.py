from __future__ import annotations

from decimal import Decimal

from canada_spends.tax.models import CappedContributionConfig

D = Decimal


def compute_capped_contribution(income: D, config: CappedContributionConfig) -> D:
    """EI/CPP style contribution: exemption floor, earnings ceiling, absolute cap."""
    if income <= config.exemption:
        return D("0")
    earnings = min(income - config.exemption, config.max_earnings - config.exemption)
    return min(earnings * config.rate, config.max_contribution)


__all__ = ["compute_capped_contribution"]
