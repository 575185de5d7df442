"""Main entry point for the translate application."""

import sys

from PySide6.QtWidgets import QApplication

from libre_translate.coordinators import TranslationSessionCoordinator
from libre_translate.logging_config import get_logger, setup_logging
from libre_translate.services import LibreTranslationService, SettingsManager
from libre_translate.ui import TranslationWindow

logger = get_logger(__name__)


def main():
    """
    Bootstrap the application following the Composition Root pattern.
    This is the only place that knows how to instantiate and wire all components.
    """
    # 1. Load settings and logging
    settings = SettingsManager()
    setup_logging(settings.get_log_level())

    # 2. Initialize Application
    app = QApplication(sys.argv)
    app.setApplicationName("Translate")

    # 3. Initialize Infrastructure (one client for the whole process)
    service = LibreTranslationService(base_url=settings.get_base_url())
    logger.info("Using LibreTranslate server at %s", service.base_url)

    # 4. Construct UI and Coordinator (Dependency Injection)
    window = TranslationWindow()
    coordinator = TranslationSessionCoordinator(translation_service=service)

    # 5. Signal Wiring
    coordinator.state_changed.connect(window.render)
    window.translate_requested.connect(coordinator.translate)
    window.error_dismissed.connect(coordinator.dismiss_error)

    # 6. Show UI, fetch languages and start event loop
    window.render(coordinator.state)
    window.show()
    coordinator.initialize()

    try:
        return app.exec()
    finally:
        service.close()


if __name__ == "__main__":
    sys.exit(main())
