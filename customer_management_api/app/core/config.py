"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Defaults are provided for all fields so the
API runs out of the box against an in‑memory store.  In a production
deployment you should override these via environment variables.
"""

import os
from dataclasses import dataclass


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "Customer Management API")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    debug: bool = os.getenv("DEBUG", "false").lower() in {"1", "true", "yes"}
    log_level: str = os.getenv("LOG_LEVEL", "INFO")

    # Optional path of a log file.  When empty only console logging is used.
    log_file: str = os.getenv("LOG_FILE", "")

    # Which store backs the API: ``inmemory`` (default) or ``sqlite``.
    # Matching is case insensitive.
    database_provider: str = os.getenv("DATABASE_PROVIDER", "inmemory")

    # Path of the SQLite database file, used only by the ``sqlite``
    # provider.  Relative paths are resolved against the project root by
    # the ``db`` module.
    database_url: str = os.getenv("DATABASE_URL", "customers.db")


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Environment variables must
# be set before importing this module.
settings = Settings()
