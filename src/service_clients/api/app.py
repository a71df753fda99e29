"""
service_clients.api.app

FastAPI app factory for the Service Client conversion service.

Responsibilities:
- Build the FastAPI application and register routers/middleware/error handlers.
- Build the shared directory, converter and access-rights services once.
- Provide a single composition root where cross-cutting concerns live.
"""

from __future__ import annotations

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from service_clients import __version__
from service_clients.api.error_handlers import register_error_handlers
from service_clients.api.routers.health import router as health_router
from service_clients.api.routers.local_groups import router as local_groups_router
from service_clients.api.routers.service_clients import router as service_clients_router
from service_clients.converters.service_client_converter import ServiceClientConverter
from service_clients.globalconf.facade import GlobalConfFacade, StaticGlobalConf, load_snapshot
from service_clients.observability.logging import configure_logging, get_logger
from service_clients.observability.middleware import RequestContextMiddleware
from service_clients.services.access_rights import AccessRightsService
from service_clients.services.local_groups import LocalGroupRegistry
from service_clients.settings import Settings

log = get_logger(__name__)


def create_app(*, settings: Settings, globalconf: GlobalConfFacade | None = None) -> FastAPI:
    configure_logging(
        service_name=settings.service_name,
        level=settings.log_level,
        json_logs=settings.log_json,
    )

    @asynccontextmanager
    async def lifespan(_: FastAPI) -> AsyncIterator[None]:
        log.info("startup", env=settings.env)
        yield
        log.info("shutdown")

    app = FastAPI(
        title="Service Client Conversion Service",
        version=__version__,
        docs_url="/docs",
        openapi_url="/openapi.json",
        lifespan=lifespan,
    )

    if globalconf is None:
        snapshot = load_snapshot(settings.globalconf_path) if settings.globalconf_path else None
        globalconf = StaticGlobalConf(snapshot)

    # Services are wired eagerly so the app is usable without running lifespan.
    local_groups = LocalGroupRegistry()
    app.state.local_groups = local_groups
    app.state.access_rights = AccessRightsService(
        converter=ServiceClientConverter(globalconf=globalconf),
        local_groups=local_groups,
    )

    app.add_middleware(RequestContextMiddleware)
    register_error_handlers(app)
    app.include_router(health_router, tags=["health"])
    app.include_router(local_groups_router)
    app.include_router(service_clients_router)

    return app


# --- Module Notes -----------------------------------------------------------
# App composition stays here; conversion logic stays in converters/services.
