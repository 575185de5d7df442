"""Unit tests for the background API workers."""

from unittest.mock import MagicMock

import pytest

from libre_translate.core import Language, TranslationResult
from libre_translate.services import (
    ApiError,
    LanguagesWorker,
    TranslationError,
    TranslationWorker,
    TransportError,
)

ENGLISH = Language(id="en", name="English")
SPANISH = Language(id="es", name="Spanish")


@pytest.fixture
def mock_translation_service():
    """Provide a mocked TranslationService."""
    service = MagicMock()
    service.list_languages = MagicMock(return_value=[ENGLISH, SPANISH])
    service.translate = MagicMock(return_value=TranslationResult(translated_text="hola"))
    return service


def connect_spies(worker):
    spies = {"succeeded": MagicMock(), "failed": MagicMock(), "finished": MagicMock()}
    worker.signals.succeeded.connect(spies["succeeded"])
    worker.signals.failed.connect(spies["failed"])
    worker.signals.finished.connect(spies["finished"])
    return spies


class TestLanguagesWorker:

    def test_emits_languages_on_success(self, mock_translation_service):
        worker = LanguagesWorker(mock_translation_service)
        spies = connect_spies(worker)

        worker.run()

        spies["succeeded"].assert_called_once_with([ENGLISH, SPANISH])
        spies["failed"].assert_not_called()
        spies["finished"].assert_called_once()

    def test_forwards_translation_error(self, mock_translation_service):
        error = ApiError("Internal failure", status_code=500)
        mock_translation_service.list_languages.side_effect = error
        worker = LanguagesWorker(mock_translation_service)
        spies = connect_spies(worker)

        worker.run()

        spies["failed"].assert_called_once_with(error)
        spies["succeeded"].assert_not_called()
        spies["finished"].assert_called_once()


class TestTranslationWorker:

    def test_calls_service_with_languages(self, mock_translation_service):
        worker = TranslationWorker(mock_translation_service, "hello", ENGLISH, SPANISH)
        spies = connect_spies(worker)

        worker.run()

        mock_translation_service.translate.assert_called_once_with(
            text="hello",
            source_language=ENGLISH,
            target_language=SPANISH,
        )
        spies["succeeded"].assert_called_once_with(TranslationResult(translated_text="hola"))

    def test_forwards_transport_error(self, mock_translation_service):
        error = TransportError(OSError("Network is unreachable"))
        mock_translation_service.translate.side_effect = error
        worker = TranslationWorker(mock_translation_service, "hello", ENGLISH, SPANISH)
        spies = connect_spies(worker)

        worker.run()

        spies["failed"].assert_called_once_with(error)
        spies["finished"].assert_called_once()

    def test_wraps_unexpected_exception(self, mock_translation_service):
        mock_translation_service.translate.side_effect = RuntimeError("boom")
        worker = TranslationWorker(mock_translation_service, "hello", ENGLISH, SPANISH)
        spies = connect_spies(worker)

        worker.run()

        spies["failed"].assert_called_once()
        error = spies["failed"].call_args[0][0]
        assert isinstance(error, TranslationError)
        assert str(error) == "Unexpected error: boom"
        spies["succeeded"].assert_not_called()
        spies["finished"].assert_called_once()


class TestServiceWorkerBase:

    def test_worker_without_call_reports_failure(self, mock_translation_service):
        """A worker subclass that does not implement call() fails instead of raising."""
        from libre_translate.services.api_workers import _ServiceWorker

        worker = _ServiceWorker(mock_translation_service)
        spies = connect_spies(worker)

        worker.run()

        spies["failed"].assert_called_once()
        assert isinstance(spies["failed"].call_args[0][0], TranslationError)
        spies["finished"].assert_called_once()
