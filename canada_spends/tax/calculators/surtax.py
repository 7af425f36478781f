from __future__ import annotations

from decimal import Decimal

from canada_spends.tax.models import SurtaxConfig

D = Decimal


def compute_surtax(base_tax: D, config: SurtaxConfig) -> D:
    """Tax-on-tax applied to provincial tax above each tier threshold.

    Each tier's own rate applies to the slice of ``base_tax`` between its
    threshold and the next tier's threshold (the top tier is open ended).
    Ontario's second tier therefore carries the full 36%, not a 16% delta.
    """
    tiers = sorted(config.tiers, key=lambda tier: tier.threshold)
    surtax = D("0")
    for index, tier in enumerate(tiers):
        if base_tax <= tier.threshold:
            break
        upper = tiers[index + 1].threshold if index + 1 < len(tiers) else base_tax
        surtax += (min(base_tax, upper) - tier.threshold) * tier.rate
    return surtax


__all__ = ["compute_surtax"]
