class ScraperError(Exception):
    """Base class for scrape pipeline failures."""


class InvalidInput(ScraperError):
    """Raised when a search keyword is missing, too long, or malformed."""


class FetchError(ScraperError):
    """Raised when the search page could not be retrieved."""

    def __init__(
        self,
        message: str,
        url: str = "",
        status_code: int | None = None,
        attempts: int = 1,
    ):
        super().__init__(message)
        self.url = url
        self.status_code = status_code
        self.attempts = attempts
