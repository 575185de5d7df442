"""Settings Manager - Handles server URL and logging configuration."""

import os
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

from libre_translate.services.translation.libre_translation_service import LibreTranslationService

DEFAULT_BASE_URL = LibreTranslationService.DEFAULT_BASE_URL
DEFAULT_LOG_LEVEL = "INFO"


class SettingsManager:
    """
    Manages application settings.

    Reads LIBRETRANSLATE_URL and LOG_LEVEL from a .env file in the project root,
    falling back to the process environment and then to built-in defaults.
    """

    def __init__(self, project_root: Optional[Path] = None):
        """
        Initialize settings manager.

        Args:
            project_root: Path to project root where .env is located.
                         If None, searches upward from current file.
        """
        if project_root is None:
            current = Path(__file__).resolve()
            project_root = current.parent.parent.parent.parent

        env_path = project_root / ".env"
        load_dotenv(dotenv_path=env_path)

        self._project_root = project_root

    def get_base_url(self) -> str:
        """Get the LibreTranslate server URL."""
        url = os.getenv("LIBRETRANSLATE_URL")
        return url.strip() if url and url.strip() else DEFAULT_BASE_URL

    def get_log_level(self) -> str:
        """Get the configured log level name."""
        level = os.getenv("LOG_LEVEL")
        return level.strip().upper() if level and level.strip() else DEFAULT_LOG_LEVEL

    def reload_env(self) -> None:
        """Reload environment variables from .env file."""
        env_path = self._project_root / ".env"
        load_dotenv(dotenv_path=env_path, override=True)
