from functools import lru_cache
import json
from pathlib import Path
from typing import Annotated

from pydantic import field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict

from classgrid.schemas.assignment import DAY_VALUES


BACKEND_ENV_FILE = Path(__file__).resolve().parents[2] / ".env"


def _split_list(value: str | list[str]) -> list[str]:
    if isinstance(value, str):
        stripped = value.strip()
        if stripped.startswith("["):
            try:
                parsed = json.loads(stripped)
                if isinstance(parsed, list):
                    return [str(item).strip() for item in parsed if str(item).strip()]
            except json.JSONDecodeError:
                pass
        return [item.strip() for item in value.split(",") if item.strip()]
    return value


class Settings(BaseSettings):
    # Resolve to backend/.env so `uvicorn --app-dir backend` works from any cwd.
    model_config = SettingsConfigDict(
        env_file=str(BACKEND_ENV_FILE),
        env_file_encoding="utf-8",
        env_prefix="CLASSGRID_",
        extra="ignore",
    )

    project_name: str = "ClassGrid API"
    api_prefix: str = "/api"
    log_level: str = "INFO"
    max_request_size_bytes: int = 2_500_000

    cors_origins: Annotated[list[str], NoDecode] = [
        "http://localhost:3000",
        "http://127.0.0.1:3000",
        "http://localhost:5173",
        "http://127.0.0.1:5173",
    ]

    days: Annotated[list[str], NoDecode] = ["Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday"]
    timezone: str = "Asia/Kolkata"

    room_count: int = 10
    max_weekly_load: float = 18.0
    utilization_warning_pct: float = 90
    daily_load_threshold: int = 4
    layout_default_start_hour: int = 9
    reminder_min_minutes: float = 14
    reminder_max_minutes: float = 15.5

    @field_validator("cors_origins", "days", mode="before")
    @classmethod
    def split_list_values(cls, value: str | list[str]) -> list[str]:
        return _split_list(value)

    @field_validator("days")
    @classmethod
    def validate_days(cls, value: list[str]) -> list[str]:
        invalid = [day for day in value if day not in DAY_VALUES]
        if invalid:
            raise ValueError(f"Invalid day value(s): {', '.join(invalid)}")
        if not value:
            raise ValueError("At least one teaching day is required")
        return value

    @field_validator("log_level")
    @classmethod
    def normalize_log_level(cls, value: str) -> str:
        level = value.strip().upper()
        if level not in {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"}:
            raise ValueError(f"Unknown log level {value!r}")
        return level

    @field_validator("room_count", "daily_load_threshold")
    @classmethod
    def require_positive_count(cls, value: int) -> int:
        if value < 1:
            raise ValueError("Must be at least 1")
        return value

    @field_validator("max_weekly_load")
    @classmethod
    def require_positive_load(cls, value: float) -> float:
        if value <= 0:
            raise ValueError("max_weekly_load must be positive")
        return value

    @field_validator("utilization_warning_pct")
    @classmethod
    def require_non_negative_pct(cls, value: float) -> float:
        if value < 0:
            raise ValueError("utilization_warning_pct must not be negative")
        return value

    @field_validator("layout_default_start_hour")
    @classmethod
    def validate_start_hour(cls, value: int) -> int:
        if not 0 <= value <= 23:
            raise ValueError("layout_default_start_hour must be between 0 and 23")
        return value


@lru_cache
def get_settings() -> Settings:
    return Settings()
