from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # Server
    host: str = "127.0.0.1"
    port: int = 3000
    cors_origins: list[str] = ["http://localhost:3000"]

    # Scraper
    scraper_user_agent: str = (
        "Mozilla/5.0 (Windows NT 10.0; Win64; x64) "
        "AppleWebKit/537.36 (KHTML, like Gecko) "
        "Chrome/120.0.0.0 Safari/537.36 Edg/120.0.0.0"
    )
    scraper_request_timeout: float = 10.0
    scraper_max_response_bytes: int = 2_000_000
    scraper_max_attempts: int = 3       # only 503 is retried
    scraper_retry_delay: float = 1.0    # seconds, multiplied by attempt number
    scraper_max_results: int = 20
    keyword_max_length: int = 50

    # Cache
    cache_ttl_seconds: int = 300
    cache_max_entries: int = 0  # 0 = unbounded

    # Rate limit (per client IP, rolling window)
    rate_limit_requests: int = 10
    rate_limit_window_seconds: int = 60

    # Log
    log_level: str = "INFO"

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


settings = Settings()
