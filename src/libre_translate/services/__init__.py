"""Services layer - API client, background workers and settings."""

from libre_translate.services.settings_manager import SettingsManager

# Translation services
from libre_translate.services.translation import (
    ApiError,
    DecodeError,
    LibreTranslationService,
    SerializationError,
    TranslationError,
    TranslationService,
    TransportError,
)

# Background workers
from libre_translate.services.api_workers import LanguagesWorker, TranslationWorker, WorkerSignals

__all__ = [
    "SettingsManager",
    "TranslationService",
    "LibreTranslationService",
    "TranslationError",
    "TransportError",
    "ApiError",
    "DecodeError",
    "SerializationError",
    "LanguagesWorker",
    "TranslationWorker",
    "WorkerSignals",
]
