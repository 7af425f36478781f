from __future__ import annotations

from canada_spends.tax.configs._builders import income_tax
from canada_spends.tax.models import ProvincialTaxConfig

_NAME = "Manitoba Income Tax"

MB_2023 = ProvincialTaxConfig(
    income_tax=income_tax(
        _NAME,
        ((0, 36842, "0.108"), (36842, 79625, "0.1275"), (79625, None, "0.174")),
        15000,
    ),
)

MB_2024 = ProvincialTaxConfig(
    income_tax=income_tax(
        _NAME,
        ((0, 47000, "0.108"), (47000, 100000, "0.1275"), (100000, None, "0.174")),
        15780,
    ),
)

MB_2025 = ProvincialTaxConfig(
    income_tax=income_tax(
        _NAME,
        ((0, 47564, "0.108"), (47564, 101200, "0.1275"), (101200, None, "0.174")),
        15780,
    ),
)

MB_2026 = ProvincialTaxConfig(
    income_tax=income_tax(
        _NAME,
        ((0, 47000, "0.108"), (47000, 100000, "0.1275"), (100000, None, "0.174")),
        15780,
    ),
)
