from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # Safe defaults; override via environment or .env file
    APP_NAME: str = "Job Search API"
    LOG_LEVEL: str = "INFO"

    # External job-search source (JSearch on RapidAPI)
    RAPIDAPI_KEY: str = ""
    JSEARCH_URL: str = "https://jsearch.p.rapidapi.com/search"
    JSEARCH_HOST: str = "jsearch.p.rapidapi.com"
    JSEARCH_NUM_PAGES: int = 10  # result pages requested per search
    JSEARCH_TIMEOUT_SECONDS: float = 30.0

    # Persisted store
    DATABASE_URL: str = "sqlite:///./jobs.db"

    # HTTP server
    HOST: str = "0.0.0.0"
    PORT: int = 5000
    CORS_ALLOW_ORIGINS: str = "http://localhost:5173"  # comma-separated
    API_KEY: str = ""  # guards the on-demand refresh endpoint when set

    # Refresh cycles
    INITIAL_QUERY: str = "all"
    REFRESH_ON_STARTUP: bool = True
    REFRESH_INTERVAL_SECONDS: int = 0  # 0 disables periodic refresh

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    @property
    def cors_origins(self) -> list[str]:
        return [o.strip() for o in self.CORS_ALLOW_ORIGINS.split(",") if o.strip()]


@lru_cache
def get_settings() -> Settings:
    return Settings()
