"""
Application configuration using Pydantic Settings.

Loads configuration from environment variables (.env file).
"""

from typing import List, Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Project Info
    PROJECT_NAME: str = "Rehab Coach: readiness-driven rehabilitation decision engine."
    VERSION: str = "0.1.0"
    AUTHORS: List[str] = ["Rehab Coach contributors"]
    AUTHORS_EMAILS: List[str] = ["N.A."]
    PROJECT_URL: str = "https://example.invalid/rehab-coach"

    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"

    # Database
    # A full URL wins over the Postgres parts below.
    DATABASE_URL: Optional[str] = None
    DATABASE_USER: str = "postgres"
    DATABASE_PASSWORD: str = ""
    DATABASE_HOST: str = ""
    DATABASE_PORT: int = 5432
    DATABASE_DBNAME: str = "postgres"
    SQLITE_PATH: str = "./rehab_coach.db"

    # History retention (days) used by the prune endpoint default.
    HISTORY_RETENTION_DAYS: int = 90

    # Partial override of the coach threshold table, as a JSON object,
    # e.g. '{"low_confidence": 3, "pain_stop_game": 3}'.
    COACH_THRESHOLDS_JSON: str = ""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=True, extra="ignore")

    @property
    def database_url(self) -> str:
        """Resolved SQLAlchemy URL.

        ``DATABASE_URL`` if set, Postgres when ``DATABASE_HOST`` is set,
        otherwise a local SQLite file.
        """
        if self.DATABASE_URL:
            return self.DATABASE_URL
        if self.DATABASE_HOST:
            return (f"postgresql://{self.DATABASE_USER}:{self.DATABASE_PASSWORD}@{self.DATABASE_HOST}"
                    f":{self.DATABASE_PORT}"
                    f"/{self.DATABASE_DBNAME}")
        return f"sqlite:///{self.SQLITE_PATH}"


# Global settings instance
settings = Settings()
