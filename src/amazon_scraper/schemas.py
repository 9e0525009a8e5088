from pydantic import BaseModel, Field


# --- Scrape ---

class ProductRecord(BaseModel):
    """One search result. Every field is None when absent from the markup."""

    title: str | None = None
    rating: float | None = Field(None, ge=0.0, le=5.0)
    reviews: int | None = Field(None, ge=0)
    image: str | None = None

    model_config = {"frozen": True}


class ScrapeResponse(BaseModel):
    keyword: str
    count: int
    results: list[ProductRecord]


class ErrorResponse(BaseModel):
    error: str


# --- System ---

class HealthResponse(BaseModel):
    status: str  # "ok"
    cache_entries: int = 0
