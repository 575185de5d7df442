"""Translation services - abstract interface, error family and LibreTranslate implementation."""

from libre_translate.services.translation.errors import (
    ApiError,
    DecodeError,
    SerializationError,
    TranslationError,
    TransportError,
)
from libre_translate.services.translation.translation_service import TranslationService
from libre_translate.services.translation.libre_translation_service import LibreTranslationService

__all__ = [
    "TranslationService",
    "LibreTranslationService",
    "TranslationError",
    "TransportError",
    "ApiError",
    "DecodeError",
    "SerializationError",
]
