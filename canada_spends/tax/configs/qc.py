from __future__ import annotations

from canada_spends.tax.configs._builders import d, income_tax
from canada_spends.tax.models import FederalAbatementConfig, ProvincialTaxConfig

_NAME = "Quebec Income Tax"

# Refundable Quebec abatement: 16.5% off basic federal tax.
_ABATEMENT = FederalAbatementConfig(name="Quebec Abatement", rate=d("0.165"))


def _quebec(
    t1: int, t2: int, t3: int, bpa: int, abatement: FederalAbatementConfig | None = None
) -> ProvincialTaxConfig:
    return ProvincialTaxConfig(
        income_tax=income_tax(
            _NAME,
            ((0, t1, "0.14"), (t1, t2, "0.19"), (t2, t3, "0.24"), (t3, None, "0.2575")),
            bpa,
        ),
        federal_abatement=abatement,
    )


QC_2023 = _quebec(49275, 98540, 119910, 17183)
QC_2024 = _quebec(51780, 103545, 126000, 18056, _ABATEMENT)
QC_2025 = _quebec(53255, 106495, 129590, 18571, _ABATEMENT)
# TODO: add the abatement once the 2026 Quebec schedule is confirmed.
QC_2026 = _quebec(54345, 108680, 132245, 18952)
