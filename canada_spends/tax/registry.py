from __future__ import annotations

from functools import lru_cache
from types import MappingProxyType
from typing import Iterable, Mapping

from canada_spends.tax.errors import ConfigurationNotFoundError, UnknownJurisdictionError
from canada_spends.tax.jurisdictions import Jurisdiction, normalize_year
from canada_spends.tax.models import SpendingConfig, TaxYearProvinceConfig

DEFAULT_TAX_YEAR = "2024"

RegistryKey = tuple[str, Jurisdiction]


class TaxConfigRegistry:
    """Read-only index of tax configurations keyed by ``(year, jurisdiction)``.

    Built once from an iterable of configs; later registrations are not
    possible. Years are normalised to strings and jurisdictions parsed from
    slugs or codes, so ``get_config(2024, "ON")`` and
    ``get_config("2024", Jurisdiction.ONTARIO)`` hit the same entry.
    """

    def __init__(self, configs: Iterable[TaxYearProvinceConfig], default_year: str = DEFAULT_TAX_YEAR) -> None:
        entries: dict[RegistryKey, TaxYearProvinceConfig] = {}
        for config in configs:
            key = (normalize_year(config.year), config.jurisdiction)
            if key in entries:
                raise ValueError(f"Duplicate tax configuration for {key[1].value} in {key[0]}")
            entries[key] = config
        self._entries: Mapping[RegistryKey, TaxYearProvinceConfig] = MappingProxyType(entries)
        self._default_year = normalize_year(default_year)

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, key: object) -> bool:
        if not isinstance(key, tuple) or len(key) != 2:
            return False
        return self.find_config(*key) is not None

    @property
    def default_year(self) -> str:
        return self._default_year

    def find_config(self, year: int | str, jurisdiction: Jurisdiction | str) -> TaxYearProvinceConfig | None:
        try:
            member = Jurisdiction.parse(jurisdiction)
        except UnknownJurisdictionError:
            return None
        return self._entries.get((normalize_year(year), member))

    def get_config(self, year: int | str, jurisdiction: Jurisdiction | str) -> TaxYearProvinceConfig:
        year_key = normalize_year(year)
        try:
            member = Jurisdiction.parse(jurisdiction)
        except UnknownJurisdictionError as exc:
            raise ConfigurationNotFoundError(year_key, str(jurisdiction)) from exc
        try:
            return self._entries[(year_key, member)]
        except KeyError as exc:
            raise ConfigurationNotFoundError(year_key, member.value) from exc

    def supported_years(self) -> list[str]:
        return sorted({year for year, _ in self._entries})

    def supported_jurisdictions(self, year: int | str) -> list[Jurisdiction]:
        year_key = normalize_year(year)
        found = {member for entry_year, member in self._entries if entry_year == year_key}
        return [member for member in Jurisdiction if member in found]

    def is_year_supported(self, year: int | str) -> bool:
        year_key = normalize_year(year)
        return any(entry_year == year_key for entry_year, _ in self._entries)

    def is_jurisdiction_supported(self, year: int | str, jurisdiction: Jurisdiction | str) -> bool:
        return self.find_config(year, jurisdiction) is not None

    def get_spending_config(self, year: int | str, jurisdiction: Jurisdiction | str) -> SpendingConfig | None:
        config = self.find_config(year, jurisdiction)
        return config.spending if config is not None else None


@lru_cache(maxsize=1)
def default_registry() -> TaxConfigRegistry:
    from canada_spends.tax.configs import ALL_CONFIGS

    return TaxConfigRegistry(ALL_CONFIGS)


def get_tax_config(year: int | str, jurisdiction: Jurisdiction | str) -> TaxYearProvinceConfig:
    return default_registry().get_config(year, jurisdiction)


__all__ = [
    "DEFAULT_TAX_YEAR",
    "TaxConfigRegistry",
    "default_registry",
    "get_tax_config",
]
