"""
Settings management for imagick-convert.

Handles persistent storage of the convert program, temp directory and
download timeout in settings.ini.
"""

import os
import tempfile
from configparser import ConfigParser
from pathlib import Path
from typing import Optional, Union


class Settings:
    """Manages adapter settings via settings.ini."""

    # Settings file location (project root)
    SETTINGS_FILE = Path(__file__).parent.parent.parent / "settings.ini"

    # Section and keys
    SECTION = "convert"
    KEY_PROGRAM = "program"
    KEY_TEMP_DIR = "temp_dir"
    KEY_HTTP_TIMEOUT = "http_timeout"

    DEFAULT_PROGRAM = "convert"
    DEFAULT_HTTP_TIMEOUT = 30.0

    ENV_PROGRAM = "IMAGICK_CONVERT_PROGRAM"
    ENV_TEMP_DIR = "IMAGICK_CONVERT_TEMP_DIR"

    def __init__(self, settings_file: Optional[Union[str, Path]] = None):
        """Initialize settings from file, falling back to defaults."""
        self.settings_file = Path(settings_file) if settings_file else self.SETTINGS_FILE
        self.config = ConfigParser()
        self._load()

    def _load(self) -> None:
        """Load settings from file or create defaults in memory."""
        if self.settings_file.exists():
            self.config.read(self.settings_file)
        if not self.config.has_section(self.SECTION):
            self.config.add_section(self.SECTION)

    def _save(self) -> None:
        """Save settings to file."""
        self.settings_file.parent.mkdir(parents=True, exist_ok=True)
        with open(self.settings_file, "w") as f:
            self.config.write(f)

    def _set(self, key: str, value: str) -> None:
        if not self.config.has_section(self.SECTION):
            self.config.add_section(self.SECTION)
        self.config.set(self.SECTION, key, value)
        self._save()

    def get_program(self) -> str:
        """Get the convert executable (default: 'convert')."""
        env = os.getenv(self.ENV_PROGRAM)
        if env:
            return env
        return self.config.get(self.SECTION, self.KEY_PROGRAM, fallback="") or self.DEFAULT_PROGRAM

    def set_program(self, program: str) -> None:
        """Set and save the convert executable."""
        self._set(self.KEY_PROGRAM, program)

    def get_temp_dir(self) -> str:
        """Get the directory for downloads, local copies and masks."""
        env = os.getenv(self.ENV_TEMP_DIR)
        if env:
            return env
        return self.config.get(self.SECTION, self.KEY_TEMP_DIR, fallback="") or tempfile.gettempdir()

    def set_temp_dir(self, path: str) -> None:
        """Set and save the temp directory."""
        self._set(self.KEY_TEMP_DIR, path)

    def get_http_timeout(self) -> float:
        """Get the download timeout in seconds (default: 30)."""
        try:
            return self.config.getfloat(
                self.SECTION, self.KEY_HTTP_TIMEOUT, fallback=self.DEFAULT_HTTP_TIMEOUT
            )
        except ValueError:
            return self.DEFAULT_HTTP_TIMEOUT

    def set_http_timeout(self, seconds: float) -> None:
        """Set and save the download timeout."""
        self._set(self.KEY_HTTP_TIMEOUT, str(seconds))
