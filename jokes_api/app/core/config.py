"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Defaults are provided for all fields, so the
service starts without any configuration at all and listens on port
5000.  Each field is read through a ``default_factory``; constructing a
new ``Settings`` picks up the environment as it is at that moment.
"""

import os
from dataclasses import dataclass, field
from typing import List, Optional


def _env_flag(name: str, default: str = "false") -> bool:
    return os.getenv(name, default).lower() in {"1", "true", "yes"}


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = field(default_factory=lambda: os.getenv("PROJECT_NAME", "Jokes API"))
    api_version: str = field(default_factory=lambda: os.getenv("API_VERSION", "1.0.0"))
    log_level: str = field(default_factory=lambda: os.getenv("LOG_LEVEL", "INFO"))
    log_file: Optional[str] = field(default_factory=lambda: os.getenv("LOG_FILE") or None)

    # Bind address and port for uvicorn.  ``PORT`` is the conventional
    # override used by hosting platforms; 5000 is the fallback.
    host: str = field(default_factory=lambda: os.getenv("HOST", "0.0.0.0"))
    port: int = field(default_factory=lambda: int(os.getenv("PORT", "5000")))

    # Cross‑origin support is wired but switched off.  The frontend is
    # expected to reach the API from the same origin (or through a
    # proxy), so no CORS headers are sent unless ENABLE_CORS is set.
    enable_cors: bool = field(default_factory=lambda: _env_flag("ENABLE_CORS"))
    cors_origins: str = field(default_factory=lambda: os.getenv("CORS_ORIGINS", "*"))

    @property
    def cors_origin_list(self) -> List[str]:
        """Return ``cors_origins`` split on commas, blanks removed."""
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.
settings = Settings()
