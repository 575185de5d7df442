"""Domain layer - Pure entities for languages, results and session state."""

from .language import DEFAULT_SOURCE_LANGUAGE, Language
from .session_state import TranslationSessionState
from .translation_result import TranslationResult

__all__ = [
    "Language",
    "DEFAULT_SOURCE_LANGUAGE",
    "TranslationResult",
    "TranslationSessionState",
]
