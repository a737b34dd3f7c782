from functools import lru_cache
from pathlib import Path

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

BACKEND_ENV_FILE = Path(__file__).resolve().parent / ".env"


class Settings(BaseSettings):
    # Values come from the environment or backend/.env
    model_config = SettingsConfigDict(env_file=str(BACKEND_ENV_FILE), env_file_encoding="utf-8", extra="ignore")

    project_name: str = "Teacher Substitution API"
    cors_origins: list[str] = [
        "http://localhost:3000",
        "http://127.0.0.1:3000",
    ]
    log_level: str = "INFO"

    # Worker threads used when several absent teachers are planned together. 1 = sequential.
    plan_max_workers: int = 1
    include_trace_by_default: bool = False

    @field_validator("plan_max_workers")
    @classmethod
    def validate_plan_max_workers(cls, value: int) -> int:
        if value < 1:
            raise ValueError("plan_max_workers must be at least 1")
        return value

    @field_validator("log_level")
    @classmethod
    def normalize_log_level(cls, value: str) -> str:
        return value.strip().upper()


@lru_cache
def get_settings() -> Settings:
    return Settings()
