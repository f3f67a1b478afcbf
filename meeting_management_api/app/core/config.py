"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Defaults are provided for all fields so the
service starts without any configuration at all.
"""

import os
from dataclasses import dataclass


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "Meeting Management API")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    debug: bool = os.getenv("DEBUG", "false").lower() in {"1", "true", "yes"}
    log_level: str = os.getenv("LOG_LEVEL", "INFO")

    # Optional path of a log file.  When empty, logs only go to the
    # console.
    log_file: str = os.getenv("LOG_FILE", "")

    # Path of the JSON file meetings are loaded from at startup and
    # written to at shutdown.  A relative path is resolved against the
    # project root by the ``storage`` module.
    meetings_file: str = os.getenv("MEETINGS_FILE", "meetings.json")

    # Write the in‑memory meetings back to ``meetings_file`` when the
    # application shuts down.
    persist_on_shutdown: bool = os.getenv("PERSIST_ON_SHUTDOWN", "true").lower() in {"1", "true", "yes"}


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Environment variables
# should be set before importing this module.
settings = Settings()
