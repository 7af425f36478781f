from canada_spends.tax.breakdown import calculate_personal_tax_breakdown
from canada_spends.tax.calculator import (
    calculate_bracket_breakdown,
    calculate_detailed_tax,
    calculate_total_tax,
    calculate_with_config,
    compare_jurisdictions,
    format_currency,
    format_percentage,
)
from canada_spends.tax.errors import ConfigurationNotFoundError, UnknownJurisdictionError
from canada_spends.tax.jurisdictions import Jurisdiction
from canada_spends.tax.registry import DEFAULT_TAX_YEAR, TaxConfigRegistry, default_registry, get_tax_config

__all__ = [
    "ConfigurationNotFoundError",
    "DEFAULT_TAX_YEAR",
    "Jurisdiction",
    "TaxConfigRegistry",
    "UnknownJurisdictionError",
    "calculate_bracket_breakdown",
    "calculate_detailed_tax",
    "calculate_personal_tax_breakdown",
    "calculate_total_tax",
    "calculate_with_config",
    "compare_jurisdictions",
    "default_registry",
    "format_currency",
    "format_percentage",
    "get_tax_config",
]
