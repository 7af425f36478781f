from __future__ import annotations

from canada_spends.tax.configs._builders import income_tax
from canada_spends.tax.models import ProvincialTaxConfig

_NAME = "Northwest Territories Income Tax"

NT_2023 = ProvincialTaxConfig(
    income_tax=income_tax(
        _NAME,
        (
            (0, 48326, "0.059"),
            (48326, 96655, "0.086"),
            (96655, 157139, "0.122"),
            (157139, None, "0.1405"),
        ),
        16593,
    ),
)

NT_2024 = ProvincialTaxConfig(
    income_tax=income_tax(
        _NAME,
        (
            (0, 50597, "0.059"),
            (50597, 101198, "0.086"),
            (101198, 164525, "0.122"),
            (164525, None, "0.1405"),
        ),
        17373,
    ),
)

NT_2025 = ProvincialTaxConfig(
    income_tax=income_tax(
        _NAME,
        (
            (0, 51964, "0.059"),
            (51964, 103930, "0.086"),
            (103930, 168967, "0.122"),
            (168967, None, "0.1405"),
        ),
        17842,
    ),
)

NT_2026 = ProvincialTaxConfig(
    income_tax=income_tax(
        _NAME,
        (
            (0, 52996, "0.059"),
            (52996, 105992, "0.086"),
            (105992, 172305, "0.122"),
            (172305, None, "0.1405"),
        ),
        18198,
    ),
)
