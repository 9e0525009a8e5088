"""Amazon search scrape endpoint."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Query

from ..schemas import ErrorResponse, ScrapeResponse
from ..scraper.pipeline import ScrapePipeline

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api", tags=["scrape"])


def _get_pipeline() -> ScrapePipeline:
    from ..main import app_state
    return app_state["pipeline"]


@router.get(
    "/scrape",
    response_model=ScrapeResponse,
    responses={400: {"model": ErrorResponse}, 503: {"model": ErrorResponse}},
)
async def scrape(keyword: str = Query("", description="Search keyword")):
    # Validation errors propagate to the handlers in errors.py
    keyword = keyword.strip()
    results = await _get_pipeline().scrape(keyword)
    return ScrapeResponse(keyword=keyword, count=len(results), results=results)
