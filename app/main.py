# app/main.py
from __future__ import annotations

import importlib
import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from fastapi.routing import APIRoute

from app.providers.transport import close_client
from app.services.status_service import SERVICE_VERSION, ServiceClock
from app.utils.errors import CountryInfoError

logger = logging.getLogger("country-info")
logging.basicConfig(level=logging.INFO)

ROUTER_MODULES = (
    "app.routes.info",
    "app.routes.population",
    "app.routes.status",
)


# --- keep operation_id stable (avoid FastAPI auto-dedupe renaming) ----------
def _fixed_unique_id(route: APIRoute) -> str:
    return route.operation_id or f"{route.name}_{route.path}".strip("/").replace("/", "_")


async def _country_info_error(request: Request, exc: CountryInfoError) -> JSONResponse:
    log = logger.warning if exc.status_code < 500 else logger.error
    log("%s %s -> %d: %s", request.method, request.url.path, exc.status_code, exc)
    return JSONResponse(status_code=exc.status_code, content={"detail": exc.detail})


async def _unexpected_error(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("%s %s -> 500: unhandled %r", request.method, request.url.path, exc)
    return JSONResponse(status_code=500, content={"detail": "internal server error."})


@asynccontextmanager
async def _lifespan(app: FastAPI):
    yield
    close_client()


def _include(app: FastAPI, module_path: str) -> None:
    mod = importlib.import_module(module_path)
    app.include_router(mod.router)
    logger.info("[init] router mounted from: %s", module_path)


def create_app() -> FastAPI:
    app = FastAPI(
        title="Country Info Service",
        description="Country information and population data aggregated from REST Countries and CountriesNow",
        version=SERVICE_VERSION,
        generate_unique_id_function=_fixed_unique_id,
        lifespan=_lifespan,
    )
    # uptime is measured from here
    app.state.clock = ServiceClock()

    app.add_exception_handler(CountryInfoError, _country_info_error)
    app.add_exception_handler(Exception, _unexpected_error)

    for module_path in ROUTER_MODULES:
        _include(app, module_path)

    @app.get("/", include_in_schema=False)
    def root():
        return {
            "ok": True,
            "version": SERVICE_VERSION,
            "endpoints": [
                "/countryinfo/v1/info/{code}?limit={number}",
                "/countryinfo/v1/population/{code}?limit={startYear-endYear}",
                "/countryinfo/v1/status",
            ],
        }

    return app


app = create_app()
