"""Translation Service - Abstract interface for translation backends."""

from abc import ABC, abstractmethod
from typing import List

from libre_translate.core import Language, TranslationResult


class TranslationService(ABC):
    """
    Abstract service for listing languages and translating text.

    Implementations raise a ``TranslationError`` subclass on any failure.
    """

    @abstractmethod
    def list_languages(self) -> List[Language]:
        """
        Fetch the languages supported by the backend.

        Returns:
            Languages in the order the backend reports them.
        """
        pass

    @abstractmethod
    def translate(
        self, text: str, source_language: Language, target_language: Language
    ) -> TranslationResult:
        """
        Translate text from one language to another.

        Args:
            text: Text to translate. Empty text is passed through to the backend.
            source_language: Language the text is written in.
            target_language: Language to translate into.

        Returns:
            TranslationResult with the translated text.
        """
        pass
