"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Defaults are provided for all fields, so the
scripted run needs no environment at all.  The log level defaults to
``WARNING`` so that a scripted run prints nothing but its verdict on
stdout; set ``LOG_LEVEL=INFO`` (or ``DEBUG``) to follow every handler
decision on stderr.
"""

import os
from dataclasses import dataclass
from typing import Optional


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "User Verification API")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    log_level: str = os.getenv("LOG_LEVEL", "WARNING")

    # Optional path of a file that receives a copy of every log record.
    log_file: Optional[str] = os.getenv("LOG_FILE") or None


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Environment variables must
# be set before this module is imported.
settings = Settings()
