"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Defaults are provided for all fields and match
a local development setup: the service listens on ``localhost:8080``.
"""

import os
from dataclasses import dataclass, field


def _env_bool(name: str, default: str = "false") -> bool:
    return os.getenv(name, default).lower() in {"1", "true", "yes"}


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = field(default_factory=lambda: os.getenv("PROJECT_NAME", "Album API"))
    api_version: str = field(default_factory=lambda: os.getenv("API_VERSION", "1.0.0"))
    debug: bool = field(default_factory=lambda: _env_bool("DEBUG"))
    log_level: str = field(default_factory=lambda: os.getenv("LOG_LEVEL", "INFO"))

    # Optional path of a log file.  Empty means console logging only.
    log_file: str = field(default_factory=lambda: os.getenv("LOG_FILE", ""))

    # Bind address used by ``run.py``.
    host: str = field(default_factory=lambda: os.getenv("HOST", "localhost"))
    port: int = field(default_factory=lambda: int(os.getenv("PORT", "8080")))

    # Indentation of JSON response bodies.
    json_indent: int = field(default_factory=lambda: int(os.getenv("JSON_INDENT", "4")))


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Environment variables
# should be set before importing this module; tests build their own
# ``Settings()`` instances instead.
settings = Settings()
