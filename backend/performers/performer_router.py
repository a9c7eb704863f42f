"""
Performer Router
FastAPI endpoints for the per-country performer counts
"""

import logging

from fastapi import APIRouter, BackgroundTasks, Request
from starlette.responses import Response

from cache_manager import CachedResponse, request_key
from .performer_preparers import prepare_aggregated_response, prepare_error_response

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["performers"])

CACHE_KIND = "response"


@router.get("/girls")
async def get_girls(request: Request, background_tasks: BackgroundTasks) -> Response:
    """
    Count of online performers per two-letter country code

    Served from the response cache when fresh; otherwise aggregated from
    every configured source and written back to the cache after the
    response is sent.
    """
    state = request.app.state
    key = request_key(request)

    cached = state.cache.get(CACHE_KIND, key)
    if cached is not None:
        logger.info("Cache HIT for /api/girls")
        return cached.to_response()

    logger.info("Cache MISS for /api/girls. Fetching fresh data...")

    try:
        aggregated = await state.aggregator.get_aggregated_data(state.settings)
        response = prepare_aggregated_response(aggregated, max_age=state.cache.ttl_seconds)
        background_tasks.add_task(
            state.cache.set, CACHE_KIND, key, CachedResponse.from_response(response)
        )
        return response
    except Exception as e:
        logger.exception(f"Error in /api/girls endpoint: {e}")
        return prepare_error_response(e)


@router.get("/sources")
async def get_sources(request: Request):
    """Registered providers and the ones this server aggregates"""
    from .data_sources.registry import get_source_info

    return {
        "registered": get_source_info(),
        "active": [source.source_name for source in request.app.state.aggregator.data_sources],
    }
