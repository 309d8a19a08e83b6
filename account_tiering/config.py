"""Application configuration with validation."""
from typing import Literal
from functools import lru_cache
from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from the environment / .env file."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    APP_NAME: str = "Account Research & Tiering Tool"
    APP_VERSION: str = "1.0.0"
    APP_ENV: Literal["development", "staging", "production"] = "development"
    DEBUG: bool = False
    LOG_LEVEL: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    LOG_FORMAT: Literal["json", "console"] = "json"

    # API
    API_V1_PREFIX: str = "/api/v1"

    # Criteria builder bounds (form boundary, not the scoring engine)
    MIN_QUESTION_WEIGHT: float = Field(default=1.0, gt=0)
    MAX_QUESTION_WEIGHT: float = Field(default=10.0, gt=0, le=1000)
    DEFAULT_QUESTION_WEIGHT: float = Field(default=5.0, gt=0)
    SEED_DEFAULT_QUESTION: bool = True

    # Results
    TOP_ACCOUNTS_LIMIT: int = Field(default=10, ge=1, le=100)
    EXPORT_FILENAME: str = "account-evaluation-results.csv"

    # In-memory session store
    MAX_SESSIONS: int = Field(default=1000, ge=1)

    @model_validator(mode="after")
    def validate_weight_bounds(self):
        """Ensure MIN <= DEFAULT <= MAX question weight."""
        if not (self.MIN_QUESTION_WEIGHT <= self.DEFAULT_QUESTION_WEIGHT <= self.MAX_QUESTION_WEIGHT):
            raise ValueError(
                "Question weights must satisfy MIN_QUESTION_WEIGHT <= "
                "DEFAULT_QUESTION_WEIGHT <= MAX_QUESTION_WEIGHT, got "
                f"{self.MIN_QUESTION_WEIGHT} / {self.DEFAULT_QUESTION_WEIGHT} / {self.MAX_QUESTION_WEIGHT}"
            )
        return self

    @model_validator(mode="after")
    def validate_production_settings(self):
        """Ensure production runs without debug mode."""
        if self.APP_ENV == "production" and self.DEBUG:
            raise ValueError("DEBUG must be False in production")
        return self


@lru_cache
def get_settings() -> Settings:
    return Settings()

settings = get_settings()
