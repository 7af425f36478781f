from __future__ import annotations

from canada_spends.tax.configs._builders import income_tax
from canada_spends.tax.models import ProvincialTaxConfig

_NAME = "British Columbia Income Tax"

BC_2023 = ProvincialTaxConfig(
    income_tax=income_tax(
        _NAME,
        (
            (0, 45654, "0.0506"),
            (45654, 91310, "0.077"),
            (91310, 104835, "0.105"),
            (104835, 127299, "0.1229"),
            (127299, 172602, "0.147"),
            (172602, 240716, "0.168"),
            (240716, None, "0.205"),
        ),
        11981,
    ),
)

BC_2024 = ProvincialTaxConfig(
    income_tax=income_tax(
        _NAME,
        (
            (0, 47937, "0.0506"),
            (47937, 95875, "0.077"),
            (95875, 110076, "0.105"),
            (110076, 133664, "0.1229"),
            (133664, 181232, "0.147"),
            (181232, 252752, "0.168"),
            (252752, None, "0.205"),
        ),
        12580,
    ),
)

_BRACKETS_2025 = (
    (0, 49279, "0.0506"),
    (49279, 98560, "0.077"),
    (98560, 113158, "0.105"),
    (113158, 137407, "0.1229"),
    (137407, 186306, "0.147"),
    (186306, 259829, "0.168"),
    (259829, None, "0.205"),
)

BC_2025 = ProvincialTaxConfig(income_tax=income_tax(_NAME, _BRACKETS_2025, 12932))

# 2026 keeps the 2025 thresholds; only the BPA moves.
BC_2026 = ProvincialTaxConfig(income_tax=income_tax(_NAME, _BRACKETS_2025, 13216))
