"""Translation Session Coordinator - Owns session state and drives API calls."""

from typing import Callable, Dict, Optional

from PySide6.QtCore import QObject, QThreadPool, Signal, Slot

from libre_translate.core import DEFAULT_SOURCE_LANGUAGE, Language, TranslationSessionState
from libre_translate.logging_config import get_logger
from libre_translate.services import (
    LanguagesWorker,
    TranslationError,
    TranslationService,
    TranslationWorker,
)

logger = get_logger(__name__)


class _PendingRequest(QObject):
    """Helper class to hold request context and route worker results back to the coordinator."""

    def __init__(
        self,
        request_id: int,
        on_success: Callable[[int, object], None],
        on_failure: Callable[[int, TranslationError], None],
        on_finished: Callable[[int], None],
    ):
        super().__init__()
        self.request_id = request_id
        self._on_success = on_success
        self._on_failure = on_failure
        self._on_finished = on_finished

    @Slot(object)
    def on_succeeded(self, result):
        self._on_success(self.request_id, result)

    @Slot(object)
    def on_failed(self, error):
        self._on_failure(self.request_id, error)

    @Slot()
    def on_finished(self):
        self._on_finished(self.request_id)


class TranslationSessionCoordinator(QObject):
    """
    Mediates between the translation window and the translation service.

    Responsibilities:
    - Hold the single TranslationSessionState snapshot.
    - Start background workers for language refreshes and translations.
    - Apply worker results on the coordinator's thread and notify listeners.

    Results from a request that has since been superseded by a newer request
    of the same kind are dropped. A successful request never clears an error
    the user has not dismissed yet.
    """

    state_changed = Signal(object)  # TranslationSessionState

    def __init__(
        self,
        translation_service: TranslationService,
        thread_pool: Optional[QThreadPool] = None,
        source_language: Language = DEFAULT_SOURCE_LANGUAGE,
    ):
        super().__init__()

        self.translation_service = translation_service
        self.thread_pool = thread_pool or QThreadPool.globalInstance()
        self.source_language = source_language
        self.state = TranslationSessionState()

        self._request_counter = 0
        self._active_languages_request: Optional[int] = None
        self._active_translation_request: Optional[int] = None

        # Keep helpers alive while their workers run in background threads
        self._pending: Dict[int, _PendingRequest] = {}

    def initialize(self) -> None:
        """Start the session by fetching the supported languages."""
        self.refresh_languages()

    def refresh_languages(self) -> None:
        """Fetch the language list and replace the current one on success."""
        request_id = self._next_request_id()
        self._active_languages_request = request_id

        self.state.is_loading = True
        self._notify()

        logger.info("Refreshing languages (request %d)", request_id)
        worker = LanguagesWorker(self.translation_service)
        self._start(worker, request_id, self._handle_languages_result, self._handle_languages_error)

    def translate(self, text: str, target_language: Language) -> None:
        """
        Translate text from the source language into target_language.

        The previous translation is cleared straight away. Empty text stops
        there without touching the loading or error state.
        """
        self.state.translated_text = ""
        if not text:
            self._notify()
            return

        request_id = self._next_request_id()
        self._active_translation_request = request_id

        self.state.is_loading = True
        self._notify()

        logger.info(
            "Translating %d chars %s -> %s (request %d)",
            len(text), self.source_language.id, target_language.id, request_id,
        )
        worker = TranslationWorker(
            translation_service=self.translation_service,
            text=text,
            source_language=self.source_language,
            target_language=target_language,
        )
        self._start(worker, request_id, self._handle_translation_result, self._handle_translation_error)

    def dismiss_error(self) -> None:
        """Clear the surfaced error."""
        self.state.error_message = ""
        self.state.has_error = False
        self._notify()

    def _next_request_id(self) -> int:
        self._request_counter += 1
        return self._request_counter

    def _start(self, worker, request_id: int, on_success, on_failure) -> None:
        helper = _PendingRequest(request_id, on_success, on_failure, self._release)
        self._pending[request_id] = helper

        worker.signals.succeeded.connect(helper.on_succeeded)
        worker.signals.failed.connect(helper.on_failed)
        worker.signals.finished.connect(helper.on_finished)

        self.thread_pool.start(worker)

    def _release(self, request_id: int) -> None:
        self._pending.pop(request_id, None)

    def _handle_languages_result(self, request_id: int, languages) -> None:
        if request_id != self._active_languages_request:
            logger.debug("Ignoring stale language list (request %d)", request_id)
            return

        self.state.languages = list(languages)
        self.state.is_loading = False
        self._notify()

    def _handle_languages_error(self, request_id: int, error: TranslationError) -> None:
        if request_id != self._active_languages_request:
            logger.debug("Ignoring stale language error (request %d)", request_id)
            return

        self.state.is_loading = False
        self._show_error(error)

    def _handle_translation_result(self, request_id: int, result) -> None:
        if request_id != self._active_translation_request:
            logger.debug("Ignoring stale translation (request %d)", request_id)
            return

        self.state.translated_text = result.translated_text
        self.state.is_loading = False
        self._notify()

    def _handle_translation_error(self, request_id: int, error: TranslationError) -> None:
        if request_id != self._active_translation_request:
            logger.debug("Ignoring stale translation error (request %d)", request_id)
            return

        self.state.is_loading = False
        self._show_error(error)

    def _show_error(self, error: TranslationError) -> None:
        logger.warning("%s: %s", type(error).__name__, error)
        self.state.error_message = str(error)
        self.state.has_error = True
        self._notify()

    def _notify(self) -> None:
        self.state_changed.emit(self.state)
