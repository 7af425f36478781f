from __future__ import annotations


class ConfigurationNotFoundError(KeyError):
    """No tax configuration is registered for a (year, jurisdiction) pair."""

    def __init__(self, year: str | None, jurisdiction: str | None, message: str | None = None) -> None:
        self.year = year
        self.jurisdiction = jurisdiction
        self.message = message or (
            f'Tax configuration not found for year "{year}" and jurisdiction "{jurisdiction}"'
        )
        super().__init__(self.message)

    def __str__(self) -> str:
        return self.message


class UnknownJurisdictionError(ConfigurationNotFoundError):
    def __init__(self, value: str) -> None:
        super().__init__(None, value, f"Unknown jurisdiction '{value}'")


__all__ = ["ConfigurationNotFoundError", "UnknownJurisdictionError"]
