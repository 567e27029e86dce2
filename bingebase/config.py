from typing import List

from pydantic_settings import BaseSettings, SettingsConfigDict

# Search aggregation window
SEARCH_MAX_PAGES = 3

# Trending window requested from TMDB
TRENDING_WINDOW = "week"

# Window (seconds) the TMDB rate-limit number applies to
TMDB_RATE_LIMIT_PERIOD_SECONDS = 10


class Settings(BaseSettings):
    PORT: int = 8080
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"

    TMDB_API_KEY: str = ""
    OMDB_API_KEY: str = ""
    TMDB_BASE_URL: str = "https://api.themoviedb.org/3"
    OMDB_BASE_URL: str = "http://www.omdbapi.com/"
    HTTP_TIMEOUT_SECONDS: float = 30.0

    DB_PATH: str = "./database/bingebase.db"

    ALLOWED_ORIGINS: List[str] = ["http://localhost:5173", "http://localhost:3000"]

    # Read but not enforced unless RATE_LIMIT_ENABLED is set
    TMDB_RATE_LIMIT: int = 40
    OMDB_RATE_LIMIT: int = 1000
    RATE_LIMIT_ENABLED: bool = False

    # Read but unused, there is no cache layer
    CACHE_DURATION: int = 3600

    DEFAULT_USER_ID: str = "default_user"

    model_config = SettingsConfigDict(env_file=".env", extra="ignore", frozen=True)


settings = Settings()
