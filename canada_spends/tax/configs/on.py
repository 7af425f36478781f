from __future__ import annotations

from canada_spends.tax.configs._builders import health_premium, income_tax, surtax
from canada_spends.tax.models import ProvincialTaxConfig

# Ontario Health Premium through 2025: each tier ramps at its rate from the
# previous plateau until it reaches its cap.
_OHP_STEPPED = health_premium(
    "Ontario Health Premium",
    (0, 20000, 0, "0", 0),
    (20000, 36000, 0, "0.06", 300),
    (36000, 48000, 300, "0.06", 450),
    (48000, 72000, 450, "0.25", 600),
    (72000, 200000, 600, "0.25", 750),
    (200000, None, 750, "0.25", 900),
)

# ------------------------------ 2023 ---------------------------------
ON_2023 = ProvincialTaxConfig(
    income_tax=income_tax(
        "Ontario Income Tax",
        (
            (0, 49231, "0.0505"),
            (49231, 98463, "0.0915"),
            (98463, 150000, "0.1116"),
            (150000, 220000, "0.1216"),
            (220000, None, "0.1316"),
        ),
        11865,
    ),
    surtax=surtax("Ontario Surtax", (5315, "0.20"), (6802, "0.36")),
    health_premium=_OHP_STEPPED,
)

# ------------------------------ 2024 ---------------------------------
ON_2024 = ProvincialTaxConfig(
    income_tax=income_tax(
        "Ontario Income Tax",
        (
            (0, 51446, "0.0505"),
            (51446, 102894, "0.0915"),
            (102894, 150000, "0.1116"),
            (150000, 220000, "0.1216"),
            (220000, None, "0.1316"),
        ),
        12399,
    ),
    surtax=surtax("Ontario Surtax", (5870, "0.20"), (7511, "0.36")),
    health_premium=_OHP_STEPPED,
)

# ------------------------------ 2025 ---------------------------------
ON_2025 = ProvincialTaxConfig(
    income_tax=income_tax(
        "Ontario Income Tax",
        (
            (0, 52886, "0.0505"),
            (52886, 105775, "0.0915"),
            (105775, 150000, "0.1116"),
            (150000, 220000, "0.1216"),
            (220000, None, "0.1316"),
        ),
        12747,
    ),
    surtax=surtax("Ontario Surtax", (5870, "0.20"), (7511, "0.36")),
    health_premium=_OHP_STEPPED,
)

# ------------------------------ 2026 ---------------------------------
# The 2026 schedule spells out the flat plateaus as zero-rate tiers.
ON_2026 = ProvincialTaxConfig(
    income_tax=income_tax(
        "Ontario Income Tax",
        (
            (0, 52886, "0.0505"),
            (52886, 105775, "0.0915"),
            (105775, 150000, "0.1116"),
            (150000, 220000, "0.1216"),
            (220000, None, "0.1316"),
        ),
        12989,
    ),
    surtax=surtax("Ontario Surtax", (5554, "0.20"), (7108, "0.36")),
    health_premium=health_premium(
        "Ontario Health Premium",
        (0, 20000, 0, "0", 0),
        (20000, 25000, 0, "0.06", 300),
        (25000, 36000, 300, "0", 300),
        (36000, 38500, 300, "0.06", 450),
        (38500, 48000, 450, "0", 450),
        (48000, 72000, 450, "0.025", 600),
        (72000, 200000, 600, "0", 600),
        (200000, 200600, 600, "0.25", 750),
        (200600, None, 750, "0", 900),
    ),
)
