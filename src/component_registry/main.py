"""FastAPI application entry point."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from component_registry import __version__
from component_registry.config import ServerConfig
from component_registry.context import ServerContext
from component_registry.integrations.source_fetcher.real import RealSourceFetcher
from component_registry.kits import build_default_registry
from component_registry.routes.components import router as components_router
from component_registry.services.kit_service import KitService

logger = logging.getLogger(__name__)


def _install_context(app: FastAPI, context: ServerContext) -> None:
    app.state.context = context
    app.state.kit_service = KitService(context)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Application lifespan handler for startup/shutdown.

    Creates production context with real implementations on startup. Kits
    start unloaded and populate on their first query.
    """
    config = ServerConfig.from_env()

    fetcher = RealSourceFetcher(timeout_seconds=config.fetch_timeout_seconds)
    providers = build_default_registry(
        shadcn_base_url=config.shadcn_base_url,
        fetcher=fetcher,
    )
    _install_context(app, ServerContext(providers=providers))
    logger.info("Serving kits: %s", ", ".join(providers.kit_names()))

    yield

    await fetcher.aclose()


def create_app(context: ServerContext | None = None) -> FastAPI:
    """Create FastAPI application.

    Args:
        context: Optional ServerContext for testing. If None, uses lifespan
                 to create production context.

    Returns:
        Configured FastAPI application
    """
    if context is not None:
        # Test mode: use provided context, no lifespan
        app = FastAPI(
            title="Component Registry",
            description="Registry of reusable UI component kits",
            version=__version__,
        )
        _install_context(app, context)
    else:
        app = FastAPI(
            title="Component Registry",
            description="Registry of reusable UI component kits",
            version=__version__,
            lifespan=lifespan,
        )

    # Browser front-end calls the API directly
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.get("/health", tags=["meta"])
    async def health_check() -> dict[str, str]:
        """Health check endpoint."""
        return {"status": "healthy"}

    app.include_router(components_router)

    return app


def run() -> None:
    """Run the server (entry point for CLI)."""
    config = ServerConfig.from_env()
    level = "DEBUG" if config.debug else config.log_level
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logger.info("Component registry listening on http://%s:%d", config.host, config.port)
    uvicorn.run(
        create_app(),
        host=config.host,
        port=config.port,
        log_level=level.lower(),
    )


if __name__ == "__main__":
    run()
