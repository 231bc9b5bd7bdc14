"""
Library API — Health Check Route
=================================

What:  Liveness endpoint for monitoring and load balancer probes.
How:   Reports the app version, uptime, and current catalog size.
Who:   Called by container health checks and monitoring systems.

The catalog has no external dependencies, so the service is healthy
whenever it can answer at all.
"""

import logging
import time

from fastapi import APIRouter, Depends, Request

from library_api import __version__
from library_api.dependencies import get_book_service
from library_api.schemas.book import HealthResponse
from library_api.services.book_base import BookService

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Health"])


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Service health check",
    description="Returns service status, version, catalog size, and uptime.",
)
async def health_check(
    request: Request,
    service: BookService = Depends(get_book_service),
) -> HealthResponse:
    # started_at is stamped by create_app() and again when the lifespan starts
    started_at = request.app.state.started_at
    return HealthResponse(
        status="healthy",
        version=__version__,
        book_count=len(service.list_books()),
        uptime_seconds=round(time.time() - started_at, 2),
    )
