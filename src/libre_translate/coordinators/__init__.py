"""Coordinators - Orchestration layer connecting UI with the translation service."""

from .translation_session_coordinator import TranslationSessionCoordinator

__all__ = ["TranslationSessionCoordinator"]
