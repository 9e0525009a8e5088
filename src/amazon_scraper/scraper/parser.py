"""Parser for Amazon search results pages.

Each field of a result is read by its own extractor. A missing or malformed
sub-element only nulls that field; the rest of the record and the rest of
the page are still returned.
"""

from __future__ import annotations

import logging
import re
from typing import Callable

from bs4 import BeautifulSoup, Tag

from ..schemas import ProductRecord

logger = logging.getLogger(__name__)

RESULT_SELECTOR = '[data-component-type="s-search-result"]'
MAX_RESULTS = 20

_RATING_RE = re.compile(r"([0-9.]+)\s+out of")
_LEADING_FLOAT_RE = re.compile(r"\d+(?:\.\d*)?|\.\d+")
_NON_DIGIT_RE = re.compile(r"\D")


def _text(el: Tag | None) -> str | None:
    if el is None:
        return None
    return el.get_text() or None


def extract_title(item: Tag) -> str | None:
    text = _text(item.select_one("h2 span"))
    if not text:
        return None
    return text.strip() or None


def extract_rating(item: Tag) -> float | None:
    text = _text(item.select_one(".a-icon-alt"))
    m = _RATING_RE.search(text) if text else None
    # leading number only: "4.5." -> 4.5, "4..5" -> 4.0
    number = _LEADING_FLOAT_RE.match(m.group(1)) if m else None
    if not number:
        return None
    rating = float(number.group(0))
    return rating if 0.0 <= rating <= 5.0 else None


def extract_reviews(item: Tag) -> int | None:
    text = _text(item.select_one('[aria-label*="ratings"]'))
    digits = _NON_DIGIT_RE.sub("", text) if text else ""
    return int(digits) if digits else None


def extract_image(item: Tag) -> str | None:
    img = item.select_one("img.s-image")
    src = img.get("src") if img is not None else None
    return src if isinstance(src, str) and src else None


class SearchResultsParser:
    """Parse an Amazon search results page into ProductRecords."""

    _FIELDS: dict[str, Callable[[Tag], object]] = {
        "title": extract_title,
        "rating": extract_rating,
        "reviews": extract_reviews,
        "image": extract_image,
    }

    def __init__(self, max_results: int = MAX_RESULTS) -> None:
        self.max_results = max_results

    def parse(self, html: str) -> list[ProductRecord]:
        if not html:
            return []
        soup = BeautifulSoup(html, "lxml")
        items = soup.select(RESULT_SELECTOR, limit=self.max_results)
        return [self._parse_item(item) for item in items]

    def _parse_item(self, item: Tag) -> ProductRecord:
        fields = {name: self._safe(name, fn, item) for name, fn in self._FIELDS.items()}
        return ProductRecord(**fields)

    @staticmethod
    def _safe(name: str, fn: Callable[[Tag], object], item: Tag) -> object:
        try:
            return fn(item)
        except Exception as e:
            logger.debug("Failed to extract %s from search result: %s", name, e)
            return None
