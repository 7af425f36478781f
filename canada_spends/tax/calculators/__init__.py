from canada_spends.tax.calculators.abatement import compute_federal_abatement
from canada_spends.tax.calculators.brackets import (
    bpa_credit,
    bracket_tax_breakdown,
    compute_bracket_tax,
    tax_from_brackets,
)
from canada_spends.tax.calculators.capped import compute_capped_contribution
from canada_spends.tax.calculators.cpp2 import compute_cpp2_contribution
from canada_spends.tax.calculators.health_premium import compute_health_premium
from canada_spends.tax.calculators.surtax import compute_surtax

__all__ = [
    "bpa_credit",
    "bracket_tax_breakdown",
    "compute_bracket_tax",
    "compute_capped_contribution",
    "compute_cpp2_contribution",
    "compute_federal_abatement",
    "compute_health_premium",
    "compute_surtax",
    "tax_from_brackets",
]
