from typing import Optional, Sequence
import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse, PlainTextResponse, Response
from fastapi.staticfiles import StaticFiles

# Routers
from performers import router as performers_router
from performers.performer_aggregator import PerformerAggregator
from performers.performer_preparers import add_cors_headers
from performers.data_sources.base import PerformerDataSource
from performers.data_sources.registry import configure_source, get_source
from cache_manager import ResponseCache
from config import Settings, get_settings

# Initialize logging
logging.basicConfig(level=get_settings().LOG_LEVEL)
logger = logging.getLogger(__name__)

# Quiet per-request client logs:
logging.getLogger('httpx').setLevel(logging.WARNING)


def _build_assets(settings: Settings) -> Optional[StaticFiles]:
    """Static file server for the frontend, or None when not configured"""
    if not settings.ASSETS_DIR:
        return None
    try:
        return StaticFiles(directory=settings.ASSETS_DIR, html=True)
    except RuntimeError as e:
        logger.error(f"Static assets disabled: {e}")
        return None


def _build_data_sources(settings: Settings) -> list:
    for name in settings.DATA_SOURCES:
        configure_source(name, {'timeout': settings.HTTP_TIMEOUT})
    return [get_source(name) for name in settings.DATA_SOURCES]


def create_app(
    settings: Optional[Settings] = None,
    data_sources: Optional[Sequence[PerformerDataSource]] = None,
) -> FastAPI:
    """
    Build the API application

    Args:
        settings: Configuration and provider credentials (defaults to env)
        data_sources: Sources to aggregate (defaults to settings.DATA_SOURCES)

    Raises:
        ConfigurationError: If no data source ends up configured
    """
    settings = settings or get_settings()
    if data_sources is None:
        data_sources = _build_data_sources(settings)

    app = FastAPI(
        title="Performer Map API",
        description="Online performer counts per country, aggregated across providers.",
        version="0.1.0",
        # every path outside /api belongs to the asset fallback
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
    )

    app.state.settings = settings
    app.state.aggregator = PerformerAggregator(data_sources)
    app.state.cache = ResponseCache(
        ttl_seconds=settings.CACHE_TTL_SECONDS,
        max_entries=settings.CACHE_MAX_ENTRIES,
    )
    app.state.assets = _build_assets(settings)

    # CORS on every response; preflight answered here for any path
    @app.middleware("http")
    async def cors_middleware(request: Request, call_next):
        if request.method == "OPTIONS":
            return add_cors_headers(Response(status_code=204))
        response = await call_next(request)
        return add_cors_headers(response)

    app.include_router(performers_router)

    @app.get("/api/health")
    async def health_check():
        """Health check endpoint to verify if the API is running."""
        return {"status": "ok"}

    @app.post("/api/clear-cache")
    async def clear_cache(request: Request):
        request.app.state.cache.clear()
        logger.info("Cache cleared successfully.")
        return JSONResponse(content={"message": "Cache cleared successfully."})

    # Fallback to serving static assets for all other requests
    @app.api_route(
        "/{full_path:path}",
        methods=["GET", "HEAD", "POST", "PUT", "PATCH", "DELETE"],
        include_in_schema=False,
    )
    async def serve_static(full_path: str, request: Request):
        assets = request.app.state.assets
        if assets is None:
            logger.error("Static asset directory is not configured or invalid.")
            return PlainTextResponse("Static asset serving is not configured.", status_code=500)
        try:
            return await assets.get_response(full_path, request.scope)
        except Exception as e:
            logger.error(f"Error serving static asset '{full_path}': {e!r}")
            return PlainTextResponse("Not found", status_code=404)

    logger.info(
        f"Performer Map API ready: sources={[s.source_name for s in data_sources]}, "
        f"assets={'on' if app.state.assets else 'off'}"
    )
    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host="0.0.0.0", port=8000)
