"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Defaults are provided for all fields so the
front-end can start against a local API server with no setup at all.
"""

import os
from dataclasses import dataclass
from typing import Optional


def _optional_float(name: str) -> Optional[float]:
    raw = os.getenv(name, "").strip()
    if not raw:
        return None
    return float(raw)


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "Proposal Planner")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    debug: bool = os.getenv("DEBUG", "false").lower() in {"1", "true", "yes"}
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    log_file: Optional[str] = os.getenv("LOG_FILE") or None

    # Root of the remote proposals API.  The store appends
    # ``/api/proposals`` itself, so this should not include a path.
    api_base_url: str = os.getenv("PROPOSALS_API_URL", "http://localhost:3000")

    # Handed to the HTTP transport only.  ``None`` keeps the httpx
    # default; the store never imposes its own deadline.
    request_timeout: Optional[float] = _optional_float("PROPOSALS_API_TIMEOUT")

    # Placeholder credentials for the login screen.  This is a plain
    # string comparison, not authentication.
    admin_username: str = os.getenv("ADMIN_USERNAME", "admin")
    admin_password: str = os.getenv("ADMIN_PASSWORD", "password")

    host: str = os.getenv("APP_HOST", "0.0.0.0")
    port: int = int(os.getenv("APP_PORT", "4200"))


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Environment variables
# should be set before importing this module.
settings = Settings()
