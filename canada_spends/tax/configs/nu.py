from __future__ import annotations

from canada_spends.tax.configs._builders import income_tax
from canada_spends.tax.models import ProvincialTaxConfig

_NAME = "Nunavut Income Tax"


def _nunavut(t1: int, t2: int, t3: int, bpa: int) -> ProvincialTaxConfig:
    return ProvincialTaxConfig(
        income_tax=income_tax(
            _NAME,
            ((0, t1, "0.04"), (t1, t2, "0.07"), (t2, t3, "0.09"), (t3, None, "0.115")),
            bpa,
        ),
    )


NU_2023 = _nunavut(50877, 101754, 165429, 17925)
NU_2024 = _nunavut(53268, 106537, 173205, 18767)
NU_2025 = _nunavut(54707, 109413, 177881, 19274)
NU_2026 = _nunavut(55782, 111563, 181389, 19659)
