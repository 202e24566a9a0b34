"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Defaults are provided for all fields so the
service starts with an on‑disk SQLite database and a public quote
provider.  Override these via environment variables in a deployment.
"""

import os
from dataclasses import dataclass


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "User Quotes API")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    debug: bool = os.getenv("DEBUG", "false").lower() in {"1", "true", "yes"}
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    log_file: str = os.getenv("LOG_FILE", "")

    # Prefix under which the versioned routers are mounted.  Empty by
    # default so that the public paths are exactly ``/users`` and
    # ``/health``.
    api_prefix: str = os.getenv("API_PREFIX", "")

    # Either ``sqlite`` or ``memory``.  The in‑memory backend loses all
    # records when the process exits.
    storage_backend: str = os.getenv("STORAGE_BACKEND", "sqlite").lower()

    # Path to the SQLite database file.  A relative path is resolved
    # relative to the project root by the ``db`` module.
    database_url: str = os.getenv("DATABASE_URL", "users.db")

    # External quote provider.  ``quote_api_field`` names the key of the
    # JSON payload holding the quote text.
    quote_api_url: str = os.getenv("QUOTE_API_URL", "https://api.quotable.io/random")
    quote_api_field: str = os.getenv("QUOTE_API_FIELD", "content")
    quote_api_timeout: float = float(os.getenv("QUOTE_API_TIMEOUT", "5"))

    default_page_size: int = int(os.getenv("DEFAULT_PAGE_SIZE", "10"))

    host: str = os.getenv("HOST", "0.0.0.0")
    port: int = int(os.getenv("PORT", "8000"))


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Because the dataclass
# computes defaults at class definition time, environment variables
# must be set before importing this module.
settings = Settings()
