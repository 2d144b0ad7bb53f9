from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="allow",
    )

    HOST: str = "0.0.0.0"
    PORT: int = 8000
    APP_ENV: Literal["development", "production", "vercel"] = "production"
    # Comma separated; "*" allows any origin
    CORS_ALLOW_ORIGINS: str = "*"

    # Lifetime (seconds) advertised in Cache-Control / CDN cache headers
    CACHE_TIME: int = 7200

    DOUBAN_BASE_URL: str = "https://movie.douban.com"
    DOUBAN_TIMEOUT: float = 10.0
    IMAGE_PROXY_PREFIX: str = "https://search.pstatic.net/common?src="


settings = Settings()


def get_cache_time() -> int:
    """Cache lifetime in seconds for catalog responses."""
    return max(settings.CACHE_TIME, 0)


def get_cors_origins() -> list[str]:
    origins = [origin.strip() for origin in settings.CORS_ALLOW_ORIGINS.split(",") if origin.strip()]
    return origins or ["*"]
