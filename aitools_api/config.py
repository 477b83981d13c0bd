"""Runtime configuration, read from environment variables."""

from __future__ import annotations

import os
from pathlib import Path
from typing import List, Mapping, Optional

from pydantic import BaseModel, Field

from . import __version__

# Bundled dataset, used when AITOOLS_DATA_FILE is not set.
DATA_FILE = Path(__file__).resolve().parent / "data" / "tools.json"

API_NAME = "AI Tools Database API"
API_DESCRIPTION = "Get structured data on AI tools"


def _split_csv(value: str) -> List[str]:
    return [part.strip() for part in value.split(",") if part.strip()]


class Settings(BaseModel):
    data_file: Path = DATA_FILE
    api_version: str = __version__
    # Date stamp of the bundled dataset, reported by /api/stats.
    last_updated: str = "2026-01-13"
    cors_origins: List[str] = Field(default_factory=lambda: ["*"])
    log_level: str = "INFO"
    host: str = "0.0.0.0"
    port: int = 8000

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Settings":
        """Build settings from ``environ`` (defaults to ``os.environ``).

        Unset variables fall back to the field defaults.
        """
        env = os.environ if environ is None else environ
        values = {}
        if env.get("AITOOLS_DATA_FILE"):
            values["data_file"] = Path(env["AITOOLS_DATA_FILE"])
        if env.get("AITOOLS_API_VERSION"):
            values["api_version"] = env["AITOOLS_API_VERSION"]
        if env.get("AITOOLS_LAST_UPDATED"):
            values["last_updated"] = env["AITOOLS_LAST_UPDATED"]
        if env.get("AITOOLS_CORS_ORIGINS"):
            values["cors_origins"] = _split_csv(env["AITOOLS_CORS_ORIGINS"])
        if env.get("LOG_LEVEL"):
            values["log_level"] = env["LOG_LEVEL"].upper()
        if env.get("HOST"):
            values["host"] = env["HOST"]
        if env.get("PORT"):
            values["port"] = env["PORT"]
        return cls(**values)
