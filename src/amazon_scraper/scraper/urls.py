"""Amazon search URL construction."""

from __future__ import annotations

from urllib.parse import quote

AMAZON_SEARCH_URL = "https://www.amazon.com/s?k={}"


class AmazonUrlBuilder:
    def __init__(self, template: str = AMAZON_SEARCH_URL) -> None:
        self.template = template

    def build(self, keyword: str) -> str:
        # safe="" so that "/" and "&" cannot leak into the query string
        return self.template.format(quote(keyword, safe=""))
