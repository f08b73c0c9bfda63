from enum import Enum

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class ModeEnum(str, Enum):
    development = "development"
    production = "production"
    testing = "testing"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        case_sensitive=True,
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # ── App ───────────────────────────────────────────────────
    MODE: ModeEnum = ModeEnum.production
    API_V1_STR: str = "/api/v1"
    PROJECT_NAME: str = "PITCHDECK"
    LOG_LEVEL: str = "INFO"

    # ── CORS ──────────────────────────────────────────────────
    ALLOWED_ORIGINS: list[str] = [
        "http://localhost:5173",
        "http://localhost:3000",
        "http://127.0.0.1:5173",
        "http://127.0.0.1:3000",
    ]

    # ── OpenAI ────────────────────────────────────────────────
    # Empty key (or the demo key) puts the gateway in demo mode.
    OPENAI_API_KEY: str = ""
    OPENAI_MODEL: str = "gpt-4o"
    GENERATION_TEMPERATURE: float = 0.7

    # ── Generation ────────────────────────────────────────────
    SLIDE_PACING_SECONDS: float = 0.5
    DEFAULT_THEME: str = "modern"

    @field_validator("LOG_LEVEL", mode="before")
    @classmethod
    def normalise_log_level(cls, v: str) -> str:
        return str(v).upper()

    @field_validator("SLIDE_PACING_SECONDS")
    @classmethod
    def non_negative_pacing(cls, v: float) -> float:
        if v < 0:
            raise ValueError("SLIDE_PACING_SECONDS must be >= 0")
        return v


settings = Settings()
