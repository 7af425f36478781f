from __future__ import annotations

from decimal import Decimal

from canada_spends.tax.models import Cpp2Config

D = Decimal


def compute_cpp2_contribution(income: D, config: Cpp2Config) -> D:
    """Second additional CPP on earnings between the YMPE and the YAMPE."""
    if income <= config.ympe:
        return D("0")
    earnings = min(income, config.yampe) - config.ympe
    return min(earnings * config.rate, config.max_contribution)


__all__ = ["compute_cpp2_contribution"]
