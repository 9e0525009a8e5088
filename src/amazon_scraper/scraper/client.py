"""HTTP client for fetching Amazon search pages."""

from __future__ import annotations

import asyncio
import logging

import httpx

from . import FetchError

logger = logging.getLogger(__name__)

DEFAULT_USER_AGENT = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) "
    "AppleWebKit/537.36 (KHTML, like Gecko) "
    "Chrome/120.0.0.0 Safari/537.36 Edg/120.0.0.0"
)
DEFAULT_TIMEOUT = 10.0
MAX_RESPONSE_BYTES = 2_000_000
MAX_ATTEMPTS = 3
RETRY_DELAY = 1.0  # seconds, multiplied by the attempt number
RETRYABLE_STATUS = 503


class AmazonClient:
    """Async HTTP client with a 503-only retry loop.

    Redirects are never followed: a 3xx from the search endpoint usually means
    a CAPTCHA or sign-in wall, so it is reported as a failure instead.
    """

    def __init__(
        self,
        user_agent: str = DEFAULT_USER_AGENT,
        *,
        timeout: float = DEFAULT_TIMEOUT,
        max_bytes: int = MAX_RESPONSE_BYTES,
        max_attempts: int = MAX_ATTEMPTS,
        retry_delay: float = RETRY_DELAY,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        self.timeout = timeout
        self.max_bytes = max_bytes
        self.max_attempts = max_attempts
        self.retry_delay = retry_delay
        self._headers = {
            "User-Agent": user_agent,
            "Accept": "text/html,application/xhtml+xml,application/xml;q=0.9,image/webp,*/*;q=0.8",
            "Accept-Language": "en-US,en;q=0.9",
        }
        self._client = client

    async def _get_client(self) -> httpx.AsyncClient:
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(
                headers=self._headers,
                timeout=self.timeout,
                follow_redirects=False,
            )
        return self._client

    async def fetch_markup(self, url: str) -> str:
        """Fetch a URL and return its body as text.

        Retries only on 503, sleeping ``attempt * retry_delay`` between
        attempts. Everything else (redirects, other error statuses, network
        errors, timeouts, oversized bodies) fails on the first attempt.
        """
        attempt = 0
        while True:
            attempt += 1
            try:
                # httpx timeouts are per read; this bounds the whole attempt
                html = await asyncio.wait_for(self._attempt(url, attempt), self.timeout)
            except asyncio.TimeoutError as e:
                logger.warning("Timed out after %.1fs fetching %s", self.timeout, url)
                raise FetchError(
                    f"Timed out after {self.timeout}s", url=url, attempts=attempt
                ) from e
            if html is not None:
                return html

            if attempt >= self.max_attempts:
                logger.warning(
                    "HTTP %s for %s after %d attempts", RETRYABLE_STATUS, url, attempt
                )
                raise FetchError(
                    f"Failed after {attempt} attempts: HTTP {RETRYABLE_STATUS}",
                    url=url,
                    status_code=RETRYABLE_STATUS,
                    attempts=attempt,
                )

            wait = self.retry_delay * attempt
            logger.warning(
                "HTTP %s for %s (attempt %d/%d, retry in %.1fs)",
                RETRYABLE_STATUS, url, attempt, self.max_attempts, wait,
            )
            await asyncio.sleep(wait)

    async def _attempt(self, url: str, attempt: int) -> str | None:
        """Run one request. Returns the body, or None when the status is retryable."""
        client = await self._get_client()
        try:
            async with client.stream(
                "GET", url, headers=self._headers, timeout=self.timeout
            ) as resp:
                status_code = resp.status_code
                if 300 <= status_code < 400:
                    logger.warning("Redirect from %s blocked (HTTP %s)", url, status_code)
                    raise FetchError(
                        f"Redirect blocked (status {status_code})",
                        url=url,
                        status_code=status_code,
                        attempts=attempt,
                    )
                if status_code == RETRYABLE_STATUS:
                    return None
                if status_code >= 400:
                    logger.warning("HTTP %s for %s", status_code, url)
                    raise FetchError(
                        f"Failed to fetch HTML: HTTP {status_code}",
                        url=url,
                        status_code=status_code,
                        attempts=attempt,
                    )
                body = await self._read_capped(resp, url, attempt)
                try:
                    return body.decode(resp.charset_encoding or "utf-8", errors="replace")
                except LookupError:
                    return body.decode("utf-8", errors="replace")
        except httpx.RequestError as e:
            logger.warning("Request error for %s: %s", url, e)
            raise FetchError(
                f"Failed to fetch HTML: {e!r}", url=url, attempts=attempt
            ) from e

    async def _read_capped(self, resp: httpx.Response, url: str, attempt: int) -> bytes:
        declared = resp.headers.get("Content-Length")
        if declared and declared.isdigit() and int(declared) > self.max_bytes:
            raise FetchError(
                f"Response too large ({declared} bytes)",
                url=url,
                status_code=resp.status_code,
                attempts=attempt,
            )

        buf = bytearray()
        async for chunk in resp.aiter_bytes():
            buf.extend(chunk)
            if len(buf) > self.max_bytes:
                raise FetchError(
                    f"Response exceeded {self.max_bytes} bytes",
                    url=url,
                    status_code=resp.status_code,
                    attempts=attempt,
                )
        return bytes(buf)

    async def close(self) -> None:
        if self._client and not self._client.is_closed:
            await self._client.aclose()
