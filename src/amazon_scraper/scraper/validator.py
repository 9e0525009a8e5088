"""Search keyword validation."""

from __future__ import annotations

import re

from . import InvalidInput

MAX_KEYWORD_LENGTH = 50

_KEYWORD_RE = re.compile(r"[\w\s-]+", re.ASCII)


def validate_keyword(raw: str | None, max_length: int = MAX_KEYWORD_LENGTH) -> str:
    """Return the trimmed keyword, or raise InvalidInput."""
    keyword = (raw or "").strip()
    if not keyword:
        raise InvalidInput("Keyword is required")
    if len(keyword) > max_length:
        raise InvalidInput(f"Keyword must be at most {max_length} characters")
    if not _KEYWORD_RE.fullmatch(keyword):
        raise InvalidInput("Keyword contains invalid characters")
    return keyword


class KeywordValidator:
    def __init__(self, max_length: int = MAX_KEYWORD_LENGTH) -> None:
        self.max_length = max_length

    def validate(self, raw: str | None) -> str:
        return validate_keyword(raw, self.max_length)
