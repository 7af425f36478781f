from __future__ import annotations

from canada_spends.tax.configs._builders import income_tax
from canada_spends.tax.models import ProvincialTaxConfig

_NAME = "Nova Scotia Income Tax"

# Thresholds were frozen from 2023 through 2024 and again for 2026.
_FROZEN_BRACKETS = (
    (0, 29590, "0.0879"),
    (29590, 59180, "0.1495"),
    (59180, 93000, "0.1667"),
    (93000, 150000, "0.175"),
    (150000, None, "0.21"),
)

NS_2023 = ProvincialTaxConfig(income_tax=income_tax(_NAME, _FROZEN_BRACKETS, 8481))

NS_2024 = ProvincialTaxConfig(income_tax=income_tax(_NAME, _FROZEN_BRACKETS, 8481))

NS_2025 = ProvincialTaxConfig(
    income_tax=income_tax(
        _NAME,
        (
            (0, 30507, "0.0879"),
            (30507, 61015, "0.1495"),
            (61015, 95883, "0.1667"),
            (95883, 154650, "0.175"),
            (154650, None, "0.21"),
        ),
        8744,
    ),
)

NS_2026 = ProvincialTaxConfig(income_tax=income_tax(_NAME, _FROZEN_BRACKETS, 11932))
