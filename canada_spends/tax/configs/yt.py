from __future__ import annotations

from canada_spends.tax.configs._builders import income_tax
from canada_spends.tax.models import ProvincialTaxConfig

_NAME = "Yukon Income Tax"


# Yukon's lower thresholds and BPA track the federal ones each year.
def _yukon(t1: int, t2: int, t3: int, bpa: int) -> ProvincialTaxConfig:
    return ProvincialTaxConfig(
        income_tax=income_tax(
            _NAME,
            (
                (0, t1, "0.064"),
                (t1, t2, "0.09"),
                (t2, t3, "0.109"),
                (t3, 500000, "0.128"),
                (500000, None, "0.15"),
            ),
            bpa,
        ),
    )


YT_2023 = _yukon(53359, 106717, 165430, 15000)
YT_2024 = _yukon(55867, 111733, 173205, 15705)
YT_2025 = _yukon(57375, 114750, 177882, 16129)
YT_2026 = _yukon(58523, 117045, 181440, 16452)
