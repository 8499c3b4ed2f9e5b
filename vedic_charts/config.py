from pydantic_settings import BaseSettings
from typing import Literal, Optional


class Settings(BaseSettings):
    # ─── App ──────────────────────────────
    APP_NAME: str = "vedic-charts"
    ENV: str = "local"
    DEBUG: bool = False

    # ─── Ephemeris provider ───────────────
    EPHEMERIS_PROVIDER: Literal["http", "swisseph"] = "swisseph"
    EPHEMERIS_API_URL: str = "https://api.example.com"
    EPHEMERIS_API_KEY: Optional[str] = None
    EPHEMERIS_TIMEOUT: float = 10.0
    EPHEMERIS_FETCH_HOUSE_CUSPS: bool = True
    EPHEMERIS_PATH: Optional[str] = None  # Swiss Ephemeris data files

    # ─── Redis cache ──────────────────────
    CACHE_ENABLED: bool = False
    REDIS_HOST: str = "localhost"
    REDIS_PORT: int = 6379
    REDIS_DB: int = 0
    REDIS_PASSWORD: Optional[str] = None
    REDIS_TIMEOUT: float = 2.0  # seconds; a slow cache falls through to the provider

    # ─── Output ───────────────────────────
    NAME_LOCALE: Literal["en", "ru"] = "en"


    class Config:
        env_file = ".env"
        case_sensitive = True


settings = Settings()
