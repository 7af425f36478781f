from __future__ import annotations

import argparse
import json
import logging
import os
import sys
from decimal import Decimal
from typing import Literal, Sequence

import uvicorn
from pydantic import TypeAdapter
from rich.console import Console
from rich.table import Table

from canada_spends import __version__
from canada_spends.config import get_settings
from canada_spends.tax import (
    ConfigurationNotFoundError,
    calculate_detailed_tax,
    calculate_personal_tax_breakdown,
    compare_jurisdictions,
    default_registry,
    format_currency,
    format_percentage,
)
from canada_spends.tax.models import JurisdictionComparison, SpendingCategory

logger = logging.getLogger("canada_spends.cli")

EXIT_CONFIG_ERROR = 2

ColorPreference = Literal["auto", "always", "never"]


def _get_console(pref: ColorPreference) -> Console:
    if pref == "auto" and os.getenv("NO_COLOR"):
        pref = "never"
    if pref == "never":
        return Console(no_color=True, highlight=False)
    return Console(force_terminal=pref == "always" or None, highlight=False)


def _parse_income(text: str) -> Decimal:
    cleaned = text.replace(",", "").replace("$", "").strip()
    try:
        value = Decimal(cleaned)
    except ArithmeticError:
        raise argparse.ArgumentTypeError(f"invalid income amount: {text!r}") from None
    if not value.is_finite() or value < 0:
        raise argparse.ArgumentTypeError(f"income must be a non-negative number, got {text!r}")
    return value


def _dump_json(payload) -> None:
    print(json.dumps(payload, indent=2))


def _spending_table(title: str, categories: list[SpendingCategory]) -> Table:
    table = Table(title=title, expand=False)
    table.add_column("Category")
    table.add_column("Amount", justify="right")
    table.add_column("Share", justify="right")
    for category in categories:
        table.add_row(category.name, category.formatted_amount, category.formatted_percentage)
    return table


def _cmd_calc(args: argparse.Namespace, console: Console) -> int:
    result = calculate_detailed_tax(args.income, args.jurisdiction, args.year)
    if args.json:
        _dump_json(result.model_dump(mode="json"))
        return 0
    table = Table(
        title=f"{result.jurisdiction.display_name} {result.year}: {format_currency(result.gross_income)}",
        expand=False,
    )
    table.add_column("Item")
    table.add_column("Level")
    table.add_column("Amount", justify="right")
    table.add_column("Rate", justify="right")
    for item in result.line_items:
        table.add_row(item.name, item.level, format_currency(item.amount), format_percentage(item.effective_rate))
    table.add_section()
    table.add_row("Federal total", "", format_currency(result.federal_tax), "")
    table.add_row("Provincial total", "", format_currency(result.provincial_tax), "")
    table.add_row(
        "Total tax", "", format_currency(result.total_tax), format_percentage(result.effective_tax_rate)
    )
    table.add_row("Net income", "", format_currency(result.net_income), "")
    console.print(table)
    return 0


def _cmd_breakdown(args: argparse.Namespace, console: Console) -> int:
    calculation = calculate_detailed_tax(args.income, args.jurisdiction, args.year).summary()
    breakdown = calculate_personal_tax_breakdown(calculation, args.jurisdiction, args.year)
    if args.json:
        _dump_json(breakdown.model_dump(mode="json") if breakdown is not None else None)
        return 0
    if breakdown is None:
        console.print(f"Spending data for {args.jurisdiction} in {args.year} is coming soon.")
        return 0
    console.print(
        f"Total tax {format_currency(calculation.total_tax)} "
        f"(federal {format_currency(calculation.federal_tax)}, "
        f"provincial {format_currency(calculation.provincial_tax)})"
    )
    if args.view in ("combined", "all"):
        console.print(_spending_table("Where your taxes go", breakdown.combined_spending))
    if args.view in ("federal", "all"):
        console.print(_spending_table("Federal spending", breakdown.federal_spending))
    if args.view in ("provincial", "all"):
        console.print(_spending_table("Provincial spending", breakdown.provincial_spending))
    return 0


def _cmd_compare(args: argparse.Namespace, console: Console) -> int:
    registry = default_registry()
    if not registry.is_year_supported(args.year):
        raise ConfigurationNotFoundError(args.year, "any jurisdiction")
    rows = compare_jurisdictions(args.income, args.year)
    if args.json:
        _dump_json(TypeAdapter(list[JurisdictionComparison]).dump_python(rows, mode="json"))
        return 0
    table = Table(title=f"Tax on {format_currency(args.income)} in {args.year}", expand=False)
    table.add_column("#", justify="right")
    table.add_column("Jurisdiction")
    table.add_column("Federal", justify="right")
    table.add_column("Provincial", justify="right")
    table.add_column("Total", justify="right")
    table.add_column("Rate", justify="right")
    for index, row in enumerate(rows, start=1):
        table.add_row(
            str(index),
            row.abbreviation,
            format_currency(row.federal_tax),
            format_currency(row.provincial_tax),
            format_currency(row.total_tax),
            format_percentage(row.effective_rate),
        )
    console.print(table)
    return 0


def _cmd_years(args: argparse.Namespace, console: Console) -> int:
    registry = default_registry()
    years = registry.supported_years()
    if args.json:
        _dump_json(
            {
                "default_year": get_settings().default_year,
                "years": {year: [j.value for j in registry.supported_jurisdictions(year)] for year in years},
            }
        )
        return 0
    for year in years:
        codes = ", ".join(j.code for j in registry.supported_jurisdictions(year))
        console.print(f"{year}: {codes}")
    return 0


def _cmd_serve(args: argparse.Namespace, console: Console) -> int:
    uvicorn.run("canada_spends.main:app", host=args.host, port=args.port, reload=args.reload)
    return 0


_COMMANDS = {
    "calc": _cmd_calc,
    "breakdown": _cmd_breakdown,
    "compare": _cmd_compare,
    "years": _cmd_years,
    "serve": _cmd_serve,
}


def _parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    settings = get_settings()
    parser = argparse.ArgumentParser(
        prog="canada-spends",
        description="Estimate Canadian personal income tax and see where it is spent.",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument(
        "--color",
        choices=["auto", "always", "never"],
        default="auto",
        help="Color output preference (default: auto).",
    )
    parser.add_argument("--no-color", dest="color", action="store_const", const="never", help="Alias for --color never.")

    common = argparse.ArgumentParser(add_help=False)
    common.add_argument("--year", default=settings.default_year, help="Tax year (default: %(default)s).")
    common.add_argument("--json", action="store_true", help="Print JSON instead of a table.")

    located = argparse.ArgumentParser(add_help=False, parents=[common])
    located.add_argument("income", type=_parse_income, help="Gross employment income in CAD.")
    located.add_argument(
        "-j",
        "--jurisdiction",
        default=settings.default_jurisdiction.value,
        help="Province or territory slug or code (default: %(default)s).",
    )

    sub = parser.add_subparsers(dest="command", required=True)
    sub.add_parser("calc", parents=[located], help="Detailed tax calculation with line items.")
    breakdown = sub.add_parser("breakdown", parents=[located], help="Where your tax dollars are spent.")
    breakdown.add_argument(
        "--view",
        choices=["combined", "federal", "provincial", "all"],
        default="combined",
        help="Which spending table to print (default: %(default)s).",
    )
    compare = sub.add_parser("compare", parents=[common], help="Compare the same income across jurisdictions.")
    compare.add_argument("income", type=_parse_income, help="Gross employment income in CAD.")
    sub.add_parser("years", parents=[common], help="List supported years and jurisdictions.")
    serve = sub.add_parser("serve", help="Run the HTTP API with uvicorn.")
    serve.add_argument("--host", default="127.0.0.1")
    serve.add_argument("--port", type=int, default=8000)
    serve.add_argument("--reload", action="store_true")
    return parser.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> int:
    args = _parse_args(argv)
    logging.basicConfig(level=get_settings().log_level, format="%(levelname)s %(name)s - %(message)s")
    console = _get_console(args.color)
    try:
        return _COMMANDS[args.command](args, console)
    except ConfigurationNotFoundError as exc:
        logger.debug("Missing tax configuration: %s", exc.message)
        print(f"Tax data not available for {exc.jurisdiction} in {exc.year}", file=sys.stderr)
        return EXIT_CONFIG_ERROR


if __name__ == "__main__":
    sys.exit(main())
