from __future__ import annotations

from decimal import Decimal

from canada_spends.tax.models import FederalAbatementConfig

D = Decimal


def compute_federal_abatement(federal_income_tax: D, config: FederalAbatementConfig) -> D:
    """Positive amount by which federal income tax is reduced (Quebec abatement)."""
    if federal_income_tax <= 0:
        return D("0")
    return federal_income_tax * config.rate


__all__ = ["compute_federal_abatement"]
