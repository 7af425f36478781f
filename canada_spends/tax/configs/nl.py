from __future__ import annotations

from canada_spends.tax.configs._builders import income_tax
from canada_spends.tax.models import ProvincialTaxConfig

_NAME = "Newfoundland and Labrador Income Tax"

NL_2023 = ProvincialTaxConfig(
    income_tax=income_tax(
        _NAME,
        (
            (0, 41457, "0.087"),
            (41457, 82913, "0.145"),
            (82913, 148027, "0.158"),
            (148027, 207239, "0.178"),
            (207239, 264750, "0.198"),
            (264750, 529500, "0.208"),
            (529500, 1059000, "0.213"),
            (1059000, None, "0.218"),
        ),
        10382,
    ),
)

NL_2024 = ProvincialTaxConfig(
    income_tax=income_tax(
        _NAME,
        (
            (0, 43198, "0.087"),
            (43198, 86395, "0.145"),
            (86395, 154244, "0.158"),
            (154244, 215943, "0.178"),
            (215943, 275870, "0.198"),
            (275870, 551739, "0.208"),
            (551739, 1103478, "0.213"),
            (1103478, None, "0.218"),
        ),
        10818,
    ),
)

NL_2025 = ProvincialTaxConfig(
    income_tax=income_tax(
        _NAME,
        (
            (0, 44192, "0.087"),
            (44192, 88382, "0.145"),
            (88382, 157792, "0.158"),
            (157792, 220910, "0.178"),
            (220910, 282214, "0.198"),
            (282214, 564429, "0.208"),
            (564429, 1128858, "0.213"),
            (1128858, None, "0.218"),
        ),
        11067,
    ),
)

NL_2026 = ProvincialTaxConfig(
    income_tax=income_tax(
        _NAME,
        (
            (0, 44192, "0.087"),
            (44192, 88382, "0.145"),
            (88382, 157792, "0.158"),
            (157792, 220908, "0.178"),
            (220908, 282241, "0.198"),
            (282241, 564481, "0.208"),
            (564481, 1128963, "0.213"),
            (1128963, None, "0.218"),
        ),
        11188,
    ),
)
