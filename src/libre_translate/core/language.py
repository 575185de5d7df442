"""Language entity - a translatable language offered by the server."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Language:
    """A language identified by its short code and display name.

    Attributes:
        id: Language code as used by the API (e.g. "en", "es").
        name: Human-readable label shown in the language picker.
    """

    id: str
    name: str


DEFAULT_SOURCE_LANGUAGE = Language(id="en", name="English")
