from __future__ import annotations

import logging
from decimal import Decimal
from typing import Annotated

from fastapi import FastAPI, Query, Request
from fastapi.responses import JSONResponse

from canada_spends import __version__
from canada_spends.config import Settings, get_settings
from canada_spends.lifespan import build_application_lifespan
from canada_spends.tax import (
    ConfigurationNotFoundError,
    TaxConfigRegistry,
    calculate_bracket_breakdown,
    calculate_detailed_tax,
    calculate_personal_tax_breakdown,
    compare_jurisdictions,
    default_registry,
)
from canada_spends.tax.models import DetailedTaxCalculation, JurisdictionComparison

logger = logging.getLogger("canada_spends.api")

Income = Annotated[Decimal, Query(ge=0, description="Gross employment income in CAD.")]


async def _announce_defaults(app: FastAPI) -> None:
    settings = app.state.settings
    logger.info(
        "Canada Spends API ready; default_year=%s default_jurisdiction=%s build=%s@%s",
        settings.default_year,
        settings.default_jurisdiction.value,
        settings.build_version,
        settings.build_sha,
    )


app = FastAPI(
    title="Canada Spends Tax Calculator",
    description="Personal income tax by province and year, and where those tax dollars are spent.",
    version=__version__,
    lifespan=build_application_lifespan("api", startup_hook=_announce_defaults),
)


def _settings(request: Request) -> Settings:
    settings = getattr(request.app.state, "settings", None)
    return settings if settings is not None else get_settings()


def _registry(request: Request) -> TaxConfigRegistry:
    registry = getattr(request.app.state, "registry", None)
    return registry if registry is not None else default_registry()


def _year(request: Request, year: str | None) -> str:
    return year if year else _settings(request).default_year


def _jurisdiction(request: Request, jurisdiction: str | None) -> str:
    return jurisdiction if jurisdiction else _settings(request).default_jurisdiction.value


@app.exception_handler(ConfigurationNotFoundError)
async def _configuration_not_found(request: Request, exc: ConfigurationNotFoundError) -> JSONResponse:
    logger.warning("Missing tax configuration: %s (path=%s)", exc.message, request.url.path)
    return JSONResponse(
        status_code=404,
        content={"detail": f"Tax data not available for {exc.jurisdiction} in {exc.year}"},
    )


@app.get("/health")
def health(request: Request):
    settings = _settings(request)
    registry = _registry(request)
    return {
        "status": "ok",
        "default_year": settings.default_year,
        "default_jurisdiction": settings.default_jurisdiction.value,
        "build": {
            "version": settings.build_version,
            "sha": settings.build_sha,
        },
        "years": registry.supported_years(),
    }


@app.get("/tax/years")
def tax_years(request: Request):
    registry = _registry(request)
    return {"years": registry.supported_years(), "default_year": _settings(request).default_year}


@app.get("/tax/{year}/jurisdictions")
def tax_jurisdictions(request: Request, year: str):
    registry = _registry(request)
    if not registry.is_year_supported(year):
        raise ConfigurationNotFoundError(year, "any jurisdiction")
    return [
        {
            "slug": member.value,
            "code": member.code,
            "name": member.display_name,
            "has_spending_data": registry.get_spending_config(year, member) is not None,
        }
        for member in registry.supported_jurisdictions(year)
    ]


@app.get("/tax/calculate", response_model=DetailedTaxCalculation)
def tax_calculate(
    request: Request,
    income: Income,
    jurisdiction: str | None = None,
    year: str | None = None,
):
    return calculate_detailed_tax(
        income, _jurisdiction(request, jurisdiction), _year(request, year), _registry(request)
    )


@app.get("/tax/breakdown")
def tax_breakdown(
    request: Request,
    income: Income,
    jurisdiction: str | None = None,
    year: str | None = None,
):
    registry = _registry(request)
    target_year = _year(request, year)
    target = _jurisdiction(request, jurisdiction)
    calculation = calculate_detailed_tax(income, target, target_year, registry)
    breakdown = calculate_personal_tax_breakdown(calculation.summary(), target, target_year, registry)
    return {
        "calculation": calculation,
        "spending_available": breakdown is not None,
        "breakdown": breakdown,
    }


@app.get("/tax/brackets")
def tax_brackets(
    request: Request,
    income: Income,
    jurisdiction: str | None = None,
    year: str | None = None,
):
    return calculate_bracket_breakdown(
        income, _jurisdiction(request, jurisdiction), _year(request, year), _registry(request)
    )


@app.get("/tax/compare", response_model=list[JurisdictionComparison])
def tax_compare(request: Request, income: Income, year: str | None = None):
    target_year = _year(request, year)
    registry = _registry(request)
    if not registry.is_year_supported(target_year):
        raise ConfigurationNotFoundError(target_year, "any jurisdiction")
    return compare_jurisdictions(income, target_year, registry)
