"""Translation result entity."""

from dataclasses import dataclass


@dataclass(frozen=True)
class TranslationResult:
    """Translated text returned by a single translate request."""

    translated_text: str
