"""Application settings loaded from environment variables via pydantic-settings.

Sources, highest priority first:

  1. Environment variables, e.g. ``REDIS_URL=redis://cache:6379/0``
  2. A ``.env`` file in the working directory (local development)
  3. The defaults below

Field names map to upper-cased environment variables automatically
(``cache_default_ttl`` ↔ ``CACHE_DEFAULT_TTL``).
"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """cachestore settings.

    Environment variables override defaults. Loaded from .env file when present.
    """

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # === Engine ===
    # Empty string = no server configured → the in-memory fakeredis engine.
    redis_url: str = ""

    # === Store defaults ===
    # Seconds applied to writes that carry no per-call ttl; unset = no expiry.
    cache_default_ttl: int | None = None

    # === App Config ===
    app_env: str = "development"
    log_level: str = "INFO"

    def uses_memory_engine(self) -> bool:
        """Return True when no Redis server URL is configured."""
        return not self.redis_url
