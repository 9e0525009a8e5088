"""FastAPI application with a lifespan-managed scrape pipeline."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .api.router import api_router
from .config import settings
from .errors import setup_exception_handlers
from .middleware import RateLimiter, RateLimitMiddleware, SecurityHeadersMiddleware
from .scraper.pipeline import build_pipeline
from .web.views import router as web_router

logging.basicConfig(
    level=getattr(logging, settings.log_level.upper(), logging.INFO),
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

# Shared state accessible by API endpoints
app_state: dict = {}

rate_limiter = RateLimiter(
    max_requests=settings.rate_limit_requests,
    window_seconds=settings.rate_limit_window_seconds,
)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Startup
    pipeline = build_pipeline(settings)
    app_state["pipeline"] = pipeline
    logger.info("Amazon Scraper API started on http://%s:%d", settings.host, settings.port)

    yield

    # Shutdown
    await pipeline.close()
    app_state.clear()
    logger.info("Amazon Scraper API stopped")


app = FastAPI(
    title="Amazon Scraper API",
    description="Scrapes public Amazon search results for a keyword",
    version="0.1.0",
    lifespan=lifespan,
)

# Last added runs first: CORS -> security headers -> rate limit -> error boundary
setup_exception_handlers(app)
app.add_middleware(RateLimitMiddleware, limiter=rate_limiter)
app.add_middleware(SecurityHeadersMiddleware)
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["GET"],
)

app.include_router(api_router)
app.include_router(web_router)
