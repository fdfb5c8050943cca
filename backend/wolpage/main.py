"""wolpage FastAPI application factory."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import Any

from fastapi import FastAPI
from fastapi.responses import HTMLResponse

from wolpage import __version__
from wolpage.config import settings
from wolpage.services import create_dispatcher, create_target_list, resolve_platform

logger = logging.getLogger(__name__)


@asynccontextmanager
async def _lifespan(app: FastAPI):
    """Startup / shutdown lifecycle."""
    _setup_logging()
    logger.info(
        "wolpage v%s started on %s:%s (platform: %s, targets: %s)",
        __version__, settings.host, settings.port,
        app.state.platform.value, app.state.target_list.path,
    )
    try:
        yield
    finally:
        logger.info("wolpage shutting down")


def _setup_logging() -> None:
    logging.basicConfig(
        level=getattr(logging, settings.log_level.upper(), logging.INFO),
        format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    for noisy in ("multipart", "python_multipart"):
        logging.getLogger(noisy).setLevel(logging.WARNING)


def create_app() -> FastAPI:
    """Application factory. Services are built here and kept on ``app.state``."""
    from wolpage.api.routes import api_router, page

    app = FastAPI(
        title=settings.app_name,
        version=__version__,
        debug=settings.debug,
        lifespan=_lifespan,
    )

    app.state.dispatcher = create_dispatcher(settings)
    app.state.target_list = create_target_list(settings)
    app.state.platform = resolve_platform(settings.platform)

    app.include_router(api_router, prefix=settings.api_prefix)
    app.include_router(page.router)

    # Anything that is not "/" or the API, favicon.ico included
    @app.api_route(
        "/{full_path:path}",
        methods=["GET", "HEAD", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"],
        include_in_schema=False,
    )
    async def _fallback(full_path: str):
        return HTMLResponse("no data...")

    return app


app = create_app()


def run(**kwargs: Any) -> None:
    import uvicorn

    uvicorn.run(
        "wolpage.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
        log_level=settings.log_level.lower(),
        **kwargs,
    )


if __name__ == "__main__":
    run()
