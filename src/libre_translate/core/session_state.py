"""Session state snapshot rendered by the UI."""

from dataclasses import dataclass, field
from typing import List

from .language import Language


@dataclass
class TranslationSessionState:
    """Mutable snapshot of what the translation screen shows.

    Attributes:
        languages: Supported languages in server order (empty until fetched).
        translated_text: Result of the latest translate request.
        is_loading: True while a request is in flight.
        error_message: Description of the last surfaced error.
        has_error: True until the user dismisses the error.
    """

    languages: List[Language] = field(default_factory=list)
    translated_text: str = ""
    is_loading: bool = False
    error_message: str = ""
    has_error: bool = False
