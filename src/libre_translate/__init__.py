"""
Translate - A desktop front-end for the LibreTranslate web API.

This package provides:
- A LibreTranslate API client with a closed error family
- A session coordinator that owns the screen state
- A PySide6 window rendering that state
"""

__version__ = "0.1.0"

# Make key components available at package level
from libre_translate.core import DEFAULT_SOURCE_LANGUAGE, Language, TranslationResult

__all__ = [
    "Language",
    "DEFAULT_SOURCE_LANGUAGE",
    "TranslationResult",
]
