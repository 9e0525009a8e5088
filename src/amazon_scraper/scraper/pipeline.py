"""Amazon search scraping orchestrator."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from ..schemas import ProductRecord
from .cache import ResultCache
from .client import AmazonClient
from .parser import SearchResultsParser
from .urls import AmazonUrlBuilder
from .validator import KeywordValidator

if TYPE_CHECKING:
    from ..config import Settings

logger = logging.getLogger(__name__)


class ScrapePipeline:
    """validate -> cache lookup -> fetch -> parse -> cache store.

    InvalidInput and FetchError propagate to the caller unchanged.
    """

    def __init__(
        self,
        validator: KeywordValidator,
        url_builder: AmazonUrlBuilder,
        client: AmazonClient,
        parser: SearchResultsParser,
        cache: ResultCache,
    ) -> None:
        self.validator = validator
        self.url_builder = url_builder
        self.client = client
        self.parser = parser
        self.cache = cache

    async def scrape(self, raw_keyword: str | None) -> list[ProductRecord]:
        keyword = self.validator.validate(raw_keyword)

        cached = self.cache.get(keyword)
        if cached is not None:
            logger.info("[CACHE HIT] Keyword: %s", keyword)
            return cached

        logger.info("[CACHE MISS] Fetching keyword: %s", keyword)
        url = self.url_builder.build(keyword)
        html = await self.client.fetch_markup(url)
        results = self.parser.parse(html)
        self.cache.set(keyword, results)
        return results

    async def close(self) -> None:
        await self.client.close()


def build_pipeline(settings: Settings) -> ScrapePipeline:
    """Wire the default collaborators from settings."""
    return ScrapePipeline(
        validator=KeywordValidator(settings.keyword_max_length),
        url_builder=AmazonUrlBuilder(),
        client=AmazonClient(
            settings.scraper_user_agent,
            timeout=settings.scraper_request_timeout,
            max_bytes=settings.scraper_max_response_bytes,
            max_attempts=settings.scraper_max_attempts,
            retry_delay=settings.scraper_retry_delay,
        ),
        parser=SearchResultsParser(settings.scraper_max_results),
        cache=ResultCache(
            settings.cache_ttl_seconds,
            max_entries=settings.cache_max_entries,
        ),
    )
