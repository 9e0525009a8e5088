"""Serve the API: ``python -m amazon_scraper`` or the ``amazon-scraper`` script."""

from __future__ import annotations

import uvicorn

from .config import Settings, settings as default_settings


def main(settings: Settings | None = None) -> None:
    settings = settings or default_settings
    uvicorn.run(
        "amazon_scraper.main:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
