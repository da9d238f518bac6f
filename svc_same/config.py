import os
from dataclasses import dataclass
from typing import List


def _split(value: str) -> List[str]:
    return [part.strip() for part in value.split(",") if part.strip()]


@dataclass
class Settings:
    # App
    app_env: str = os.getenv("APP_ENV", "production")
    port: int = int(os.getenv("PORT", "8080"))
    log_level: str = os.getenv("LOG_LEVEL", "info")
    log_format: str = os.getenv("LOG_FORMAT", "json")

    # CORS
    cors_allow_origins: str = os.getenv("CORS_ALLOW_ORIGINS", "*")
    cors_allow_credentials: bool = os.getenv("CORS_ALLOW_CREDENTIALS", "false").lower() == "true"
    cors_allow_headers: str = os.getenv("CORS_ALLOW_HEADERS", "Authorization,Content-Type")
    cors_allow_methods: str = os.getenv("CORS_ALLOW_METHODS", "GET,POST,OPTIONS")

    # Cache
    cache_api_ttl: int = int(os.getenv("CACHE_API_TTL", "60"))
    cache_max_items: int = int(os.getenv("CACHE_MAX_ITEMS", "512"))

    # Redis
    enable_redis_cache: bool = os.getenv("ENABLE_REDIS_CACHE", "false").lower() == "true"
    redis_url: str = os.getenv("REDIS_URL", "redis://redis:6379/0")

    # SAME
    max_arguments: int = int(os.getenv("SAME_MAX_ARGUMENTS", "1024"))

    @property
    def cors_origins(self) -> List[str]:
        return _split(self.cors_allow_origins)

    @property
    def cors_headers(self) -> List[str]:
        return _split(self.cors_allow_headers)

    @property
    def cors_methods(self) -> List[str]:
        return _split(self.cors_allow_methods)


def get_settings() -> Settings:
    return Settings()
