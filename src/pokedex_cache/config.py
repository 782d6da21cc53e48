import logging
import os
from dataclasses import dataclass
from functools import lru_cache

import redis.asyncio as redis
from dotenv import load_dotenv

load_dotenv()

CACHE_BACKENDS = ("memory", "redis")


@dataclass(frozen=True)
class Settings:
    """Application settings loaded from environment variables."""

    # Database
    database_url: str = os.getenv("DATABASE_URL", "sqlite:///data/pokemon.db")

    # Response cache
    cache_backend: str = os.getenv("CACHE_BACKEND", "memory").lower()
    cache_key_prefix: str = os.getenv("CACHE_KEY_PREFIX", "pokemon")
    cache_ttl: int = int(os.getenv("CACHE_TTL", "0"))  # 0 = never expires
    cache_max_entries: int = int(os.getenv("CACHE_MAX_ENTRIES", "0"))  # 0 = unbounded

    # Redis
    redis_url: str = os.getenv("REDIS_URL", "redis://localhost:6379")
    redis_password: str | None = os.getenv("REDIS_PASSWORD")

    # Pagination
    default_page: int = int(os.getenv("DEFAULT_PAGE", "1"))
    default_limit: int = int(os.getenv("DEFAULT_LIMIT", "10"))
    max_limit: int = int(os.getenv("MAX_LIMIT", "100"))

    # API
    api_host: str = os.getenv("API_HOST", "0.0.0.0")
    api_port: int = int(os.getenv("API_PORT", "8000"))
    api_reload: bool = os.getenv("API_RELOAD", "true").lower() == "true"

    # Logging
    log_level: str = os.getenv("LOG_LEVEL", "INFO").upper()

    @property
    def database_path(self) -> str:
        """Filesystem path for the SQLite database.

        Returns:
            Path portion of DATABASE_URL (":memory:" for in-memory databases)
        """
        if self.database_url.startswith("sqlite:///"):
            return self.database_url.replace("sqlite:///", "", 1)
        raise ValueError(f"Unsupported DATABASE_URL: {self.database_url}. Only sqlite is supported.")

    def __post_init__(self) -> None:
        """Validate settings after initialization."""
        if self.cache_backend not in CACHE_BACKENDS:
            raise ValueError(
                f"CACHE_BACKEND must be one of {list(CACHE_BACKENDS)}, got {self.cache_backend!r}"
            )

        if self.cache_ttl < 0:
            raise ValueError("CACHE_TTL must be >= 0 (0 disables expiry)")

        if self.cache_max_entries < 0:
            raise ValueError("CACHE_MAX_ENTRIES must be >= 0 (0 means unbounded)")

        if not 1 <= self.default_limit <= self.max_limit:
            raise ValueError(
                f"DEFAULT_LIMIT must be between 1 and MAX_LIMIT ({self.max_limit}), "
                f"got {self.default_limit}"
            )

        if self.default_page < 1:
            raise ValueError("DEFAULT_PAGE must be >= 1")


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


# Global settings instance
settings = get_settings()


def get_redis_client() -> redis.Redis:
    """Create an asyncio Redis client instance."""
    return redis.from_url(
        settings.redis_url,
        password=settings.redis_password,
        decode_responses=True,
    )


def configure_logging(level: str | None = None) -> None:
    """Configure root logging for the service."""
    logging.basicConfig(
        level=level or settings.log_level,
        format="%(asctime)s %(levelname)-8s %(name)s: %(message)s",
    )
