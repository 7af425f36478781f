from __future__ import annotations

from canada_spends.tax.configs._builders import d, income_tax
from canada_spends.tax.models import CappedContributionConfig, Cpp2Config, FederalTaxConfig


def _ei(rate: str, max_earnings: int, max_contribution: str) -> CappedContributionConfig:
    return CappedContributionConfig(
        name="Employment Insurance",
        short_name="EI",
        rate=d(rate),
        exemption=d(0),
        max_earnings=d(max_earnings),
        max_contribution=d(max_contribution),
    )


def _cpp(max_earnings: int, max_contribution: str) -> CappedContributionConfig:
    return CappedContributionConfig(
        name="Canada Pension Plan",
        short_name="CPP",
        rate=d("0.0595"),
        exemption=d(3500),
        max_earnings=d(max_earnings),
        max_contribution=d(max_contribution),
    )


def _cpp2(rate: str, ympe: int, yampe: int, max_contribution: str) -> Cpp2Config:
    return Cpp2Config(
        name="CPP Second Additional",
        short_name="CPP2",
        rate=d(rate),
        ympe=d(ympe),
        yampe=d(yampe),
        max_contribution=d(max_contribution),
    )


# ------------------------------ 2023 ---------------------------------
# CPP2 did not exist yet; a zero-width, zero-rate band keeps the shape uniform.
FEDERAL_2023 = FederalTaxConfig(
    income_tax=income_tax(
        "Federal Income Tax",
        (
            (0, 53359, "0.15"),
            (53359, 106717, "0.205"),
            (106717, 165430, "0.26"),
            (165430, 235675, "0.29"),
            (235675, None, "0.33"),
        ),
        15000,
    ),
    ei=_ei("0.0163", 61500, "1002.45"),
    cpp=_cpp(66600, "3754.45"),
    cpp2=_cpp2("0", 66600, 66600, "0"),
)

# ------------------------------ 2024 ---------------------------------
FEDERAL_2024 = FederalTaxConfig(
    income_tax=income_tax(
        "Federal Income Tax",
        (
            (0, 55867, "0.15"),
            (55867, 111733, "0.205"),
            (111733, 173205, "0.26"),
            (173205, 246752, "0.29"),
            (246752, None, "0.33"),
        ),
        15705,
    ),
    ei=_ei("0.0166", 63200, "1049.12"),
    cpp=_cpp(68500, "3867.50"),
    cpp2=_cpp2("0.04", 68500, 73200, "188"),
)

# ------------------------------ 2025 ---------------------------------
FEDERAL_2025 = FederalTaxConfig(
    income_tax=income_tax(
        "Federal Income Tax",
        (
            (0, 57375, "0.145"),
            (57375, 114750, "0.205"),
            (114750, 177882, "0.26"),
            (177882, 253414, "0.29"),
            (253414, None, "0.33"),
        ),
        16129,
    ),
    ei=_ei("0.0164", 65700, "1077.48"),
    cpp=_cpp(71300, "4034.10"),
    cpp2=_cpp2("0.04", 71300, 81200, "396"),
)

# ------------------------------ 2026 ---------------------------------
FEDERAL_2026 = FederalTaxConfig(
    income_tax=income_tax(
        "Federal Income Tax",
        (
            (0, 58523, "0.14"),
            (58523, 117045, "0.205"),
            (117045, 181440, "0.26"),
            (181440, 258482, "0.29"),
            (258482, None, "0.33"),
        ),
        16452,
    ),
    ei=_ei("0.0163", 68900, "1123.07"),
    cpp=_cpp(74600, "4230.45"),
    cpp2=_cpp2("0.04", 74600, 85000, "416"),
)

FEDERAL_BY_YEAR: dict[str, FederalTaxConfig] = {
    "2023": FEDERAL_2023,
    "2024": FEDERAL_2024,
    "2025": FEDERAL_2025,
    "2026": FEDERAL_2026,
}
