"""Async workers for non-blocking API calls using Qt threading."""

from PySide6.QtCore import QObject, QRunnable, Signal, Slot

from libre_translate.core import Language
from libre_translate.logging_config import get_logger
from libre_translate.services.translation import TranslationError, TranslationService

logger = get_logger(__name__)


class WorkerSignals(QObject):
    """
    Signals for communicating results from worker threads.

    QRunnable doesn't inherit from QObject, so we need a separate
    QObject to hold the signals. Exactly one of succeeded/failed is
    emitted per run, followed by finished.
    """
    finished = Signal()
    succeeded = Signal(object)  # list[Language] or TranslationResult
    failed = Signal(object)  # TranslationError


class _ServiceWorker(QRunnable):
    """Runs one service call in a background thread and reports its outcome."""

    def __init__(self, translation_service: TranslationService):
        super().__init__()
        self.translation_service = translation_service
        self.signals = WorkerSignals()
        self.setAutoDelete(True)

    def call(self):
        """Run the service call; subclasses return the service result."""
        raise NotImplementedError

    @Slot()
    def run(self):
        """Execute the API call and emit the outcome."""
        try:
            result = self.call()
        except TranslationError as e:
            self.signals.failed.emit(e)
        except Exception as e:
            # Anything the service did not classify itself
            logger.exception("Unexpected error in %s", type(self).__name__)
            self.signals.failed.emit(TranslationError(f"Unexpected error: {e}"))
        else:
            self.signals.succeeded.emit(result)
        finally:
            self.signals.finished.emit()


class LanguagesWorker(_ServiceWorker):
    """Worker that fetches the supported language list."""

    def call(self):
        return self.translation_service.list_languages()


class TranslationWorker(_ServiceWorker):
    """Worker that runs a translate call in a background thread."""

    def __init__(
        self,
        translation_service: TranslationService,
        text: str,
        source_language: Language,
        target_language: Language,
    ):
        super().__init__(translation_service)
        self.text = text
        self.source_language = source_language
        self.target_language = target_language

    def call(self):
        return self.translation_service.translate(
            text=self.text,
            source_language=self.source_language,
            target_language=self.target_language,
        )
