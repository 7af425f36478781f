from __future__ import annotations

from canada_spends.tax.configs._builders import income_tax
from canada_spends.tax.models import ProvincialTaxConfig

_NAME = "Saskatchewan Income Tax"


def _saskatchewan(t1: int, t2: int, bpa: int) -> ProvincialTaxConfig:
    return ProvincialTaxConfig(
        income_tax=income_tax(
            _NAME, ((0, t1, "0.105"), (t1, t2, "0.125"), (t2, None, "0.145")), bpa
        ),
    )


SK_2023 = _saskatchewan(49720, 142058, 17661)
SK_2024 = _saskatchewan(52057, 148734, 18491)
SK_2025 = _saskatchewan(53463, 152750, 18991)
SK_2026 = _saskatchewan(53463, 152750, 20381)
