"""Per-year tax tables for every province and territory.

``ALL_CONFIGS`` is the flat list the registry indexes. Each module under
this package holds one jurisdiction's schedules, split into year sections.
"""

from __future__ import annotations

from canada_spends.tax.configs import ab, bc, mb, nb, nl, ns, nt, nu, on, pe, qc, sk, yt
from canada_spends.tax.configs.federal import FEDERAL_BY_YEAR
from canada_spends.tax.configs.spending import (
    ALBERTA_FEDERAL_TRANSFER_NAME,
    ALBERTA_SPENDING,
    FEDERAL_SPENDING,
    ONTARIO_FEDERAL_TRANSFER_NAME,
    ONTARIO_SPENDING,
    PROVINCIAL_TRANSFER_NAMES,
    SPENDING_YEARS,
)
from canada_spends.tax.jurisdictions import Jurisdiction
from canada_spends.tax.models import SpendingConfig, TaxYearProvinceConfig

SUPPORTED_YEARS = ("2023", "2024", "2025", "2026")

_MODULES = {
    Jurisdiction.ALBERTA: (ab, "AB"),
    Jurisdiction.BRITISH_COLUMBIA: (bc, "BC"),
    Jurisdiction.MANITOBA: (mb, "MB"),
    Jurisdiction.NEW_BRUNSWICK: (nb, "NB"),
    Jurisdiction.NEWFOUNDLAND_AND_LABRADOR: (nl, "NL"),
    Jurisdiction.NORTHWEST_TERRITORIES: (nt, "NT"),
    Jurisdiction.NOVA_SCOTIA: (ns, "NS"),
    Jurisdiction.NUNAVUT: (nu, "NU"),
    Jurisdiction.ONTARIO: (on, "ON"),
    Jurisdiction.PRINCE_EDWARD_ISLAND: (pe, "PE"),
    Jurisdiction.QUEBEC: (qc, "QC"),
    Jurisdiction.SASKATCHEWAN: (sk, "SK"),
    Jurisdiction.YUKON: (yt, "YT"),
}

_PROVINCIAL_SPENDING = {
    Jurisdiction.ONTARIO: (ONTARIO_SPENDING, ONTARIO_FEDERAL_TRANSFER_NAME),
    Jurisdiction.ALBERTA: (ALBERTA_SPENDING, ALBERTA_FEDERAL_TRANSFER_NAME),
}


def _spending_for(year: str, jurisdiction: Jurisdiction) -> SpendingConfig | None:
    entry = _PROVINCIAL_SPENDING.get(jurisdiction)
    if entry is None or year not in SPENDING_YEARS:
        return None
    provincial, transfer_name = entry
    return SpendingConfig(
        federal=FEDERAL_SPENDING,
        provincial=provincial,
        federal_transfer_name=transfer_name,
    )


def _build_all() -> list[TaxYearProvinceConfig]:
    configs: list[TaxYearProvinceConfig] = []
    for year in SUPPORTED_YEARS:
        federal = FEDERAL_BY_YEAR[year]
        for jurisdiction, (module, prefix) in _MODULES.items():
            configs.append(
                TaxYearProvinceConfig(
                    year=year,
                    jurisdiction=jurisdiction,
                    federal=federal,
                    provincial=getattr(module, f"{prefix}_{year}"),
                    spending=_spending_for(year, jurisdiction),
                )
            )
    return configs


ALL_CONFIGS: tuple[TaxYearProvinceConfig, ...] = tuple(_build_all())

__all__ = ["ALL_CONFIGS", "PROVINCIAL_TRANSFER_NAMES", "SUPPORTED_YEARS"]
