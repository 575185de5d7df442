"""UI layer - PySide6 presentation components."""

from .translation_window import TranslationWindow

__all__ = ["TranslationWindow"]
