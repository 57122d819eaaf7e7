import os
import tempfile
from pathlib import Path
from typing import Optional


class Config:
    """Centralized configuration management for the adr tool."""

    # Settings file (always resolved against the current directory)
    SETTINGS_FILE: str = os.getenv("ADR_SETTINGS_FILE", "adr-settings.json")

    # Editor Configuration
    EDITOR: Optional[str] = os.getenv("ADR_EDITOR") or os.getenv("VISUAL") or os.getenv("EDITOR")
    TEMP_DIR: Path = Path(os.getenv("ADR_TEMP_DIR", tempfile.gettempdir()))

    # Record Formatting
    DATE_FORMAT: str = os.getenv("ADR_DATE_FORMAT", "%d/%m/%Y")

    # Logging Controls
    LOG_LEVEL: str = os.getenv("ADR_LOG_LEVEL", "WARNING").upper()
    LOG_FILE: Optional[str] = os.getenv("ADR_LOG_FILE")
