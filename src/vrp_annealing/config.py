"""Application configuration and settings management."""

from pathlib import Path
from typing import Any, Optional

import json
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Runtime configuration loaded from environment variables or defaults."""

    model_config = SettingsConfigDict(
        env_prefix="VRPSA_",
        case_sensitive=False,
        env_file=".env",
        env_file_encoding="utf-8",
    )

    app_name: str = "VRP Simulated Annealing API"
    api_prefix: str = "/api"
    data_root: Path = Field(default=Path("data"), description="Root directory for persisted run outputs.")
    depot_index: int = Field(default=1, ge=1, description="Customer index that acts as the depot.")
    initial_temperature: float = Field(default=500.0, ge=0.0)
    final_temperature: float = Field(default=0.0, ge=0.0)
    cooling_rate: float = Field(default=0.0001, gt=0.0, description="Linear temperature decrement per iteration.")
    default_runs: int = Field(default=1, ge=1, description="Independent anneals per scenario.")
    max_vehicles: int = Field(default=1_000_000, ge=1)
    max_runs: int = Field(default=1_000_000, ge=1)
    max_iterations: int = Field(default=50_000_000, ge=1, description="Upper bound on iterations per anneal.")
    max_workers: int = Field(default=1, ge=1, description="Worker processes for independent runs.")
    random_seed: Optional[int] = Field(default=None, ge=0, description="Root seed; unset means OS entropy.")
    frontend_allowed_origins: tuple[str, ...] = Field(
        default=(
            "http://localhost:5173",
            "http://127.0.0.1:5173",
        ),
        description="Permitted web origins for browser clients (CORS).",
    )

    @field_validator("data_root", mode="before")
    @classmethod
    def _expand_path(cls, value: Any) -> Path:
        path_value = value if isinstance(value, Path) else Path(str(value))
        return path_value.expanduser().resolve()

    @field_validator("frontend_allowed_origins", mode="before")
    @classmethod
    def _parse_str_tuple_from_env(cls, value: Any) -> tuple[str, ...]:
        """Parse string tuple from environment variable (comma-separated or JSON array)."""
        if isinstance(value, tuple):
            return value
        if isinstance(value, list):
            return tuple(str(item) for item in value)
        if isinstance(value, str):
            try:
                parsed = json.loads(value)
                if isinstance(parsed, list):
                    return tuple(str(item) for item in parsed)
            except (json.JSONDecodeError, TypeError):
                pass
            if "," in value:
                return tuple(item.strip() for item in value.split(",") if item.strip())
            if value.strip():
                return (value.strip(),)
        return tuple()


settings = Settings()
