from __future__ import annotations

from canada_spends.tax.configs._builders import income_tax, surtax
from canada_spends.tax.models import ProvincialTaxConfig

_NAME = "Prince Edward Island Income Tax"

# ------------------------------ 2023 ---------------------------------
# Last year of the three-bracket schedule and the 10% surtax.
PE_2023 = ProvincialTaxConfig(
    income_tax=income_tax(
        _NAME,
        ((0, 31984, "0.098"), (31984, 63969, "0.138"), (63969, None, "0.167")),
        12750,
    ),
    surtax=surtax("Prince Edward Island Surtax", (12500, "0.10")),
)

# ------------------------------ 2024 ---------------------------------
PE_2024 = ProvincialTaxConfig(
    income_tax=income_tax(
        _NAME,
        (
            (0, 32656, "0.0965"),
            (32656, 64313, "0.1363"),
            (64313, 105000, "0.1665"),
            (105000, 140000, "0.18"),
            (140000, None, "0.1875"),
        ),
        13500,
    ),
)

# ------------------------------ 2025 ---------------------------------
PE_2025 = ProvincialTaxConfig(
    income_tax=income_tax(
        _NAME,
        (
            (0, 33328, "0.095"),
            (33328, 64656, "0.1347"),
            (64656, 105000, "0.166"),
            (105000, 140000, "0.1762"),
            (140000, None, "0.19"),
        ),
        13876,
    ),
)

# ------------------------------ 2026 ---------------------------------
PE_2026 = ProvincialTaxConfig(
    income_tax=income_tax(
        _NAME,
        (
            (0, 33328, "0.095"),
            (33328, 64656, "0.1325"),
            (64656, 105000, "0.1637"),
            (105000, 140000, "0.1765"),
            (140000, None, "0.19"),
        ),
        15000,
    ),
)
