"""FastAPI application entry point."""

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI

from realip.api.routes import router
from realip.configs.config import AppConfig, get_app_config
from realip.configs.system import RealIPConfig
from realip.core.resolver import RealIPResolver
from realip.infra.middleware import RealIPMiddleware

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan manager for startup/shutdown events."""
    resolver: RealIPResolver = app.state.resolver
    logger.info(
        "Starting real-ip (providers: %s)", ", ".join(resolver.enabled_providers)
    )
    yield
    logger.info("Shutting down real-ip")


def build_resolver(config: RealIPConfig) -> RealIPResolver:
    """Build the resolver from the ``real_ip`` config section.

    Raises:
        RealIPConfigError: on a malformed network or unknown provider.
    """
    return RealIPResolver.create(
        excluded_networks=config.excluded_networks,
        excluded_addresses=config.excluded_addresses,
        providers=config.providers,
        preferred_provider=config.preferred_provider,
    )


def create_app(config: AppConfig | None = None) -> FastAPI:
    """Create and configure the FastAPI application.

    The resolver is built here, so an invalid ``real_ip`` section raises
    ``RealIPConfigError`` before the app is returned.
    """
    if config is None:
        config = get_app_config()

    resolver = build_resolver(config.real_ip)

    app = FastAPI(
        title="real-ip",
        description="Resolves the originating client IP behind reverse proxies",
        version="0.1.0",
        lifespan=lifespan,
    )
    app.state.resolver = resolver
    app.add_middleware(RealIPMiddleware, resolver=resolver)
    app.include_router(router)

    return app
