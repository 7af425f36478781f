from __future__ import annotations

from enum import Enum

from canada_spends.tax.errors import UnknownJurisdictionError


class Jurisdiction(str, Enum):
    ALBERTA = "alberta"
    BRITISH_COLUMBIA = "british-columbia"
    MANITOBA = "manitoba"
    NEW_BRUNSWICK = "new-brunswick"
    NEWFOUNDLAND_AND_LABRADOR = "newfoundland-and-labrador"
    NORTHWEST_TERRITORIES = "northwest-territories"
    NOVA_SCOTIA = "nova-scotia"
    NUNAVUT = "nunavut"
    ONTARIO = "ontario"
    PRINCE_EDWARD_ISLAND = "prince-edward-island"
    QUEBEC = "quebec"
    SASKATCHEWAN = "saskatchewan"
    YUKON = "yukon"

    @property
    def code(self) -> str:
        return _CODES[self]

    @property
    def display_name(self) -> str:
        return _NAMES[self]

    @classmethod
    def parse(cls, value: "Jurisdiction | str") -> "Jurisdiction":
        """Resolve an enum member, a slug ("british-columbia") or a code ("BC")."""
        if isinstance(value, cls):
            return value
        if not isinstance(value, str):
            raise UnknownJurisdictionError(repr(value))
        key = value.strip()
        try:
            return cls(key.lower())
        except ValueError:
            pass
        member = _BY_CODE.get(key.upper())
        if member is None:
            raise UnknownJurisdictionError(value)
        return member


_CODES: dict[Jurisdiction, str] = {
    Jurisdiction.ALBERTA: "AB",
    Jurisdiction.BRITISH_COLUMBIA: "BC",
    Jurisdiction.MANITOBA: "MB",
    Jurisdiction.NEW_BRUNSWICK: "NB",
    Jurisdiction.NEWFOUNDLAND_AND_LABRADOR: "NL",
    Jurisdiction.NORTHWEST_TERRITORIES: "NT",
    Jurisdiction.NOVA_SCOTIA: "NS",
    Jurisdiction.NUNAVUT: "NU",
    Jurisdiction.ONTARIO: "ON",
    Jurisdiction.PRINCE_EDWARD_ISLAND: "PE",
    Jurisdiction.QUEBEC: "QC",
    Jurisdiction.SASKATCHEWAN: "SK",
    Jurisdiction.YUKON: "YT",
}

_NAMES: dict[Jurisdiction, str] = {
    Jurisdiction.ALBERTA: "Alberta",
    Jurisdiction.BRITISH_COLUMBIA: "British Columbia",
    Jurisdiction.MANITOBA: "Manitoba",
    Jurisdiction.NEW_BRUNSWICK: "New Brunswick",
    Jurisdiction.NEWFOUNDLAND_AND_LABRADOR: "Newfoundland and Labrador",
    Jurisdiction.NORTHWEST_TERRITORIES: "Northwest Territories",
    Jurisdiction.NOVA_SCOTIA: "Nova Scotia",
    Jurisdiction.NUNAVUT: "Nunavut",
    Jurisdiction.ONTARIO: "Ontario",
    Jurisdiction.PRINCE_EDWARD_ISLAND: "Prince Edward Island",
    Jurisdiction.QUEBEC: "Quebec",
    Jurisdiction.SASKATCHEWAN: "Saskatchewan",
    Jurisdiction.YUKON: "Yukon",
}

_BY_CODE: dict[str, Jurisdiction] = {code: member for member, code in _CODES.items()}


def normalize_year(year: int | str) -> str:
    return str(year).strip()


__all__ = ["Jurisdiction", "normalize_year"]
