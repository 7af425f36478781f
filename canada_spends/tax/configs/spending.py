"""Budget allocation tables used to split a taxpayer's bill into programs.

Percentages are shares of each government's program spending and sum to
100 (within rounding) per table. Only Ontario and Alberta publish a
provincial table; the federal table is shared by every jurisdiction.
"""

from __future__ import annotations

from canada_spends.tax.configs._builders import spending

ONTARIO_FEDERAL_TRANSFER_NAME = "Transfer to Ontario"
ALBERTA_FEDERAL_TRANSFER_NAME = "Transfer to Alberta"
OTHER_PROVINCES_TRANSFER_NAME = "Transfers to Other Provinces"

# Per-province federal transfer lines that get folded into one entry when
# federal and provincial spending are combined.
PROVINCIAL_TRANSFER_NAMES = frozenset(
    {ONTARIO_FEDERAL_TRANSFER_NAME, ALBERTA_FEDERAL_TRANSFER_NAME}
)


def _federal(standard_of_living: str):
    return spending(
        ("Retirement Benefits", "14.8"),
        ("Children, Community and Social Services", "5.1"),
        ("Employment Insurance", "4.5"),
        (ONTARIO_FEDERAL_TRANSFER_NAME, "6.02"),
        (ALBERTA_FEDERAL_TRANSFER_NAME, "2.3"),
        (OTHER_PROVINCES_TRANSFER_NAME, "11.18"),
        ("Interest on Debt", "9.2"),
        ("Indigenous Priorities", "8.3"),
        ("Defence", "6.7"),
        ("Public Safety", "4.4"),
        ("International Affairs", "3.7"),
        (standard_of_living, "12.0"),
        ("Health", "2.7"),
        ("Innovation and Research", "1.8"),
        ("Infrastructure", "1.8"),
        ("Transportation", "1.0"),
        ("Natural Resources", "1.0"),
        ("Fisheries and Agriculture", "1.7"),
        ("Environment", "0.8"),
        ("Other", "1.0"),
    )


FEDERAL_SPENDING = _federal(
    "Standard of Living, including training, carbon tax rebate, and other supports"
)

# Years with a published budget allocation.
SPENDING_YEARS = frozenset({"2024", "2025"})

ONTARIO_SPENDING = spending(
    ("Health", "40.1"),
    ("K-12 Education", "18.8"),
    ("Children, Community and Social Services", "9.4"),
    ("Interest on Debt", "5.5"),
    ("Colleges and Universities", "6.4"),
    ("Transportation", "3.6"),
    ("Energy", "3.1"),
    ("Attorney and Solicitor General", "2.9"),
    ("Infrastructure", "1.3"),
    ("Long-Term Care", "1.2"),
    ("Finance", "0.9"),
    ("Tourism, Culture, and Sport", "0.9"),
    ("Municipal Affairs and Housing", "0.9"),
    ("Labour and Skills Development", "0.8"),
    ("Treasury Board Secretariat", "0.7"),
    ("Economic Development and Trade", "0.6"),
    ("Natural Resources", "0.5"),
    ("Fisheries and Agriculture", "0.5"),
    ("Other", "1.9"),
)

ALBERTA_SPENDING = spending(
    ("Health", "35.7"),
    ("K-12 Education", "12.6"),
    ("Colleges and Universities", "8.8"),
    ("Children, Community and Social Services", "7.6"),
    ("Interest on Debt", "7.5"),
    ("Fisheries and Agriculture", "3.7"),
    ("Transportation", "2.1"),
    ("Public Safety", "2.1"),
    ("Economic Development and Trade", "2.2"),
    ("Energy", "1.4"),
    ("Municipal Affairs and Housing", "1.4"),
    ("Innovation and Research", "1.0"),
    ("Attorney and Solicitor General", "0.9"),
    ("Infrastructure", "0.7"),
    ("Forestry and Parks", "1.6"),
    ("Environment", "0.5"),
    ("Indigenous Priorities", "0.3"),
    ("Tourism, Culture, and Sport", "0.6"),
    ("Other", "9.3"),
)
