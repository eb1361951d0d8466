import os
from pathlib import Path
from typing import List, Optional

import yaml
from dotenv import load_dotenv
from pydantic import BaseModel, Field, model_validator

from c4backend.app.engine.constants import MIN_DEPTH, MAX_DEPTH

load_dotenv()

DEFAULT_CONFIG_PATH = Path(__file__).resolve().parents[2] / "config" / "search.yaml"


class SearchSettings(BaseModel):
    min_depth: int = Field(default=MIN_DEPTH, ge=1)
    max_depth: int = Field(default=MAX_DEPTH, ge=1)
    time_budget_ms: int = Field(default=0, ge=0)

    @model_validator(mode="after")
    def check_depth_range(self):
        if self.min_depth > self.max_depth:
            raise ValueError(f"min_depth ({self.min_depth}) must not exceed max_depth ({self.max_depth})")
        return self


class Settings(BaseModel):
    search: SearchSettings = SearchSettings()
    cors_origins: List[str] = ["http://localhost:5173", "http://localhost:3000"]


def get_config_path() -> Path:
    """Helper to resolve the YAML path, overridable from the environment"""
    return Path(os.getenv("C4_SEARCH_CONFIG", str(DEFAULT_CONFIG_PATH)))


def load_settings(path: Optional[Path] = None) -> Settings:
    """
    Reads the YAML config (defaults if the file is missing), then applies
    C4_* environment overrides.
    """
    path = path or get_config_path()
    data = {}
    if path.exists():
        with open(path, "r") as f:
            data = yaml.safe_load(f) or {}

    search = dict(data.get("search") or {})
    env_overrides = {
        "min_depth": "C4_MIN_DEPTH",
        "max_depth": "C4_MAX_DEPTH",
        "time_budget_ms": "C4_TIME_BUDGET_MS",
    }
    for field, env_name in env_overrides.items():
        value = os.getenv(env_name)
        if value:
            search[field] = int(value)
    data["search"] = search

    origins = os.getenv("C4_CORS_ORIGINS")
    if origins:
        data["cors_origins"] = [o.strip() for o in origins.split(",") if o.strip()]

    return Settings(**data)
