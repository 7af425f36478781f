from __future__ import annotations

import inspect
import logging
from collections.abc import AsyncIterator, Awaitable, Callable
from contextlib import asynccontextmanager
from pathlib import Path
from typing import AsyncContextManager

from fastapi import FastAPI

from canada_spends.config import Settings, get_settings
from canada_spends.tax.registry import TaxConfigRegistry, default_registry

Hook = Callable[[FastAPI], Awaitable[None] | None]

_STATE_ATTRS = ("settings", "registry", "telemetry_handler", "app_label")


def _open_telemetry_sink(logger: logging.Logger, settings: Settings, app_label: str) -> logging.Handler | None:
    logs_dir = Path(settings.log_dir)
    try:
        logs_dir.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        logger.warning("Unable to create logs directory %s: %s", logs_dir, exc)
        return None
    handler = logging.FileHandler(logs_dir / f"{app_label}.log", encoding="utf-8")
    handler.setLevel(settings.log_level_value)
    handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(name)s - %(message)s"))
    logger.addHandler(handler)
    return handler


async def _invoke_hook(hook: Hook | None, app: FastAPI) -> None:
    if hook is None:
        return
    try:
        result = hook(app)
        if inspect.isawaitable(result):
            await result  # type: ignore[func-returns-value]
    except Exception:  # pragma: no cover - hooks are user provided
        logging.getLogger("canada_spends").exception("Application lifecycle hook failed")


def build_application_lifespan(
    app_label: str,
    *,
    registry: TaxConfigRegistry | None = None,
    startup_hook: Hook | None = None,
    shutdown_hook: Hook | None = None,
) -> Callable[[FastAPI], AsyncContextManager[None]]:
    base_logger = logging.getLogger("canada_spends")

    @asynccontextmanager
    async def _lifespan(app: FastAPI) -> AsyncIterator[None]:
        settings = get_settings()
        base_logger.setLevel(settings.log_level_value)
        logger = base_logger.getChild(app_label)
        tax_registry = registry if registry is not None else default_registry()
        telemetry_handler = _open_telemetry_sink(base_logger, settings, app_label)

        app.state.settings = settings
        app.state.registry = tax_registry
        app.state.telemetry_handler = telemetry_handler
        app.state.app_label = app_label

        logger.info(
            "Startup complete: configs=%s years=%s default_year=%s",
            len(tax_registry),
            ",".join(tax_registry.supported_years()),
            settings.default_year,
        )

        try:
            await _invoke_hook(startup_hook, app)
            yield
        finally:
            await _invoke_hook(shutdown_hook, app)
            logger.info("Shutdown complete")
            if telemetry_handler is not None:
                base_logger.removeHandler(telemetry_handler)
                telemetry_handler.close()
            for attr in _STATE_ATTRS:
                if hasattr(app.state, attr):
                    delattr(app.state, attr)

    return _lifespan
