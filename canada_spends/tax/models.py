from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

from canada_spends.tax.jurisdictions import Jurisdiction

D = Decimal

Level = Literal["federal", "provincial"]
LineItemCategory = Literal[
    "income_tax",
    "ei",
    "cpp",
    "cpp2",
    "income_tax_provincial",
    "surtax",
    "health_premium",
    "federal_abatement",
]


# ----------------------------- configuration ------------------------------


@dataclass(frozen=True)
class TaxBracket:
    lower: D
    upper: D | None
    rate: D


@dataclass(frozen=True)
class BracketTaxConfig:
    name: str
    brackets: tuple[TaxBracket, ...]
    basic_personal_amount: D

    @property
    def lowest_rate(self) -> D:
        return self.brackets[0].rate if self.brackets else D("0")


@dataclass(frozen=True)
class CappedContributionConfig:
    name: str
    short_name: str
    rate: D
    exemption: D
    max_earnings: D
    max_contribution: D


@dataclass(frozen=True)
class Cpp2Config:
    name: str
    short_name: str
    rate: D
    ympe: D
    yampe: D
    max_contribution: D


@dataclass(frozen=True)
class SurtaxTier:
    threshold: D
    rate: D


@dataclass(frozen=True)
class SurtaxConfig:
    name: str
    tiers: tuple[SurtaxTier, ...]


@dataclass(frozen=True)
class HealthPremiumTier:
    min_income: D
    max_income: D | None
    base_amount: D
    rate: D
    max_amount: D


@dataclass(frozen=True)
class HealthPremiumConfig:
    name: str
    tiers: tuple[HealthPremiumTier, ...]


@dataclass(frozen=True)
class FederalAbatementConfig:
    name: str
    rate: D


@dataclass(frozen=True)
class FederalTaxConfig:
    income_tax: BracketTaxConfig
    ei: CappedContributionConfig
    cpp: CappedContributionConfig
    cpp2: Cpp2Config


@dataclass(frozen=True)
class ProvincialTaxConfig:
    income_tax: BracketTaxConfig
    surtax: SurtaxConfig | None = None
    health_premium: HealthPremiumConfig | None = None
    federal_abatement: FederalAbatementConfig | None = None


@dataclass(frozen=True)
class SpendingCategoryConfig:
    name: str
    percentage: D


@dataclass(frozen=True)
class SpendingConfig:
    federal: tuple[SpendingCategoryConfig, ...]
    provincial: tuple[SpendingCategoryConfig, ...]
    federal_transfer_name: str


@dataclass(frozen=True)
class TaxYearProvinceConfig:
    year: str
    jurisdiction: Jurisdiction
    federal: FederalTaxConfig
    provincial: ProvincialTaxConfig
    spending: SpendingConfig | None = None


# -------------------------------- results ---------------------------------


class BracketTaxBreakdown(BaseModel):
    bracket: TaxBracket
    taxable_amount: D
    tax_amount: D

    model_config = ConfigDict(frozen=True)


class TaxLineItem(BaseModel):
    id: str
    name: str
    level: Level
    amount: D
    effective_rate: D
    category: LineItemCategory

    model_config = ConfigDict(frozen=True)


class TaxCalculation(BaseModel):
    gross_income: D
    federal_tax: D
    provincial_tax: D
    total_tax: D
    net_income: D
    effective_tax_rate: D

    model_config = ConfigDict(frozen=True)


class DetailedTaxCalculation(TaxCalculation):
    line_items: list[TaxLineItem] = Field(default_factory=list)

    federal_income_tax: D
    provincial_income_tax: D
    ei_contribution: D
    cpp_contribution: D
    cpp2_contribution: D
    surtax: D
    health_premium: D
    federal_abatement: D

    year: str
    jurisdiction: Jurisdiction

    def summary(self) -> TaxCalculation:
        return TaxCalculation(
            gross_income=self.gross_income,
            federal_tax=self.federal_tax,
            provincial_tax=self.provincial_tax,
            total_tax=self.total_tax,
            net_income=self.net_income,
            effective_tax_rate=self.effective_tax_rate,
        )


class JurisdictionComparison(BaseModel):
    jurisdiction: Jurisdiction
    name: str
    abbreviation: str
    federal_tax: D
    provincial_tax: D
    total_tax: D
    effective_rate: D

    model_config = ConfigDict(frozen=True)


class SpendingCategory(BaseModel):
    name: str
    amount: D
    percentage: D
    formatted_amount: str
    formatted_percentage: str
    level: Level

    model_config = ConfigDict(frozen=True)


class CombinedSpendingItem(BaseModel):
    name: str
    federal_amount: D
    provincial_amount: D
    total_amount: D
    formatted_total: str

    model_config = ConfigDict(frozen=True)


class PersonalTaxBreakdown(BaseModel):
    tax_calculation: TaxCalculation
    federal_spending: list[SpendingCategory]
    provincial_spending: list[SpendingCategory]
    combined_spending: list[SpendingCategory]
    combined_chart_data: list[CombinedSpendingItem]

    model_config = ConfigDict(frozen=True)


__all__ = [
    "BracketTaxBreakdown",
    "BracketTaxConfig",
    "CappedContributionConfig",
    "CombinedSpendingItem",
    "Cpp2Config",
    "DetailedTaxCalculation",
    "FederalAbatementConfig",
    "FederalTaxConfig",
    "HealthPremiumConfig",
    "HealthPremiumTier",
    "JurisdictionComparison",
    "Level",
    "LineItemCategory",
    "PersonalTaxBreakdown",
    "ProvincialTaxConfig",
    "SpendingCategory",
    "SpendingCategoryConfig",
    "SpendingConfig",
    "SurtaxConfig",
    "SurtaxTier",
    "TaxBracket",
    "TaxCalculation",
    "TaxLineItem",
    "TaxYearProvinceConfig",
]
