from __future__ import annotations

from canada_spends.tax.configs._builders import income_tax
from canada_spends.tax.models import ProvincialTaxConfig

_NAME = "Alberta Income Tax"

# ------------------------------ 2023 ---------------------------------
AB_2023 = ProvincialTaxConfig(
    income_tax=income_tax(
        _NAME,
        (
            (0, 142292, "0.10"),
            (142292, 170751, "0.12"),
            (170751, 227668, "0.13"),
            (227668, 341502, "0.14"),
            (341502, None, "0.15"),
        ),
        21003,
    ),
)

# ------------------------------ 2024 ---------------------------------
AB_2024 = ProvincialTaxConfig(
    income_tax=income_tax(
        _NAME,
        (
            (0, 148269, "0.10"),
            (148269, 177922, "0.12"),
            (177922, 237230, "0.13"),
            (237230, 355845, "0.14"),
            (355845, None, "0.15"),
        ),
        21885,
    ),
)

# ------------------------------ 2025 ---------------------------------
# New 8% bracket on the first $60,000.
AB_2025 = ProvincialTaxConfig(
    income_tax=income_tax(
        _NAME,
        (
            (0, 60000, "0.08"),
            (60000, 151234, "0.10"),
            (151234, 181481, "0.12"),
            (181481, 241974, "0.13"),
            (241974, 362961, "0.14"),
            (362961, None, "0.15"),
        ),
        22323,
    ),
)

# ------------------------------ 2026 ---------------------------------
AB_2026 = ProvincialTaxConfig(
    income_tax=income_tax(
        _NAME,
        (
            (0, 154215, "0.10"),
            (154215, 185078, "0.12"),
            (185078, 246772, "0.13"),
            (246772, 370159, "0.14"),
            (370159, 493545, "0.15"),
            (493545, None, "0.15"),
        ),
        22769,
    ),
)
