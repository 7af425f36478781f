from __future__ import annotations

from canada_spends.tax.configs._builders import income_tax
from canada_spends.tax.models import ProvincialTaxConfig

_NAME = "New Brunswick Income Tax"

NB_2023 = ProvincialTaxConfig(
    income_tax=income_tax(
        _NAME,
        (
            (0, 47715, "0.094"),
            (47715, 95431, "0.14"),
            (95431, 176756, "0.16"),
            (176756, None, "0.195"),
        ),
        12458,
    ),
)

NB_2024 = ProvincialTaxConfig(
    income_tax=income_tax(
        _NAME,
        (
            (0, 49958, "0.094"),
            (49958, 99916, "0.14"),
            (99916, 185064, "0.16"),
            (185064, None, "0.195"),
        ),
        13044,
    ),
)

_BRACKETS_2025 = (
    (0, 51306, "0.094"),
    (51306, 102614, "0.14"),
    (102614, 190060, "0.16"),
    (190060, None, "0.195"),
)

NB_2025 = ProvincialTaxConfig(income_tax=income_tax(_NAME, _BRACKETS_2025, 13396))
NB_2026 = ProvincialTaxConfig(income_tax=income_tax(_NAME, _BRACKETS_2025, 13664))
