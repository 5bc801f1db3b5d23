"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Defaults are provided for all fields so the
service starts without any configuration at all.
"""

import os
from dataclasses import dataclass
from typing import Optional


def _env_flag(name: str, default: str) -> bool:
    return os.getenv(name, default).lower() in {"1", "true", "yes"}


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "Person API")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    debug: bool = _env_flag("DEBUG", "false")
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    log_file: Optional[str] = os.getenv("LOG_FILE") or None

    # Prefix under which the versioned routers are mounted.  Empty by
    # default so that persons live at ``/person``.
    api_prefix: str = os.getenv("API_PREFIX", "")

    # Load the two sample persons into the store when the application
    # is created.  Disable for a clean store (tests do this).
    seed_sample_data: bool = _env_flag("SEED_SAMPLE_DATA", "true")

    # When true, ``GET /person`` answers 404 on an empty store instead
    # of returning an empty list.
    empty_list_not_found: bool = _env_flag("EMPTY_LIST_NOT_FOUND", "true")

    host: str = os.getenv("HOST", "0.0.0.0")
    port: int = int(os.getenv("PORT", "8000"))


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Environment variables
# must be set before importing this module.
settings = Settings()
