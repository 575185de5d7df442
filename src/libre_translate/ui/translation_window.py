"""Translation Window - Input field, language picker and result display."""

from typing import List

from PySide6.QtCore import Signal
from PySide6.QtWidgets import (
    QComboBox,
    QGroupBox,
    QLabel,
    QLineEdit,
    QMainWindow,
    QMessageBox,
    QProgressBar,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from libre_translate.core import DEFAULT_SOURCE_LANGUAGE, Language, TranslationSessionState


class TranslationWindow(QMainWindow):
    """Renders a TranslationSessionState and forwards user actions."""

    # Emitted with (input text, selected Language) when the user asks for a translation
    translate_requested = Signal(str, object)
    # Emitted when the user closes the error alert
    error_dismissed = Signal()

    def __init__(self):
        super().__init__()
        self.setWindowTitle("Translate")
        self.setGeometry(100, 100, 480, 420)

        self._languages: List[Language] = []
        self._error_box = None

        self._setup_ui()

    def _setup_ui(self):
        """Initialize the main UI layout."""
        central_widget = QWidget()
        self.setCentralWidget(central_widget)

        layout = QVBoxLayout(central_widget)
        layout.setContentsMargins(12, 12, 12, 12)
        layout.setSpacing(8)

        original_box = QGroupBox("Original")
        original_layout = QVBoxLayout(original_box)
        self.input_edit = QLineEdit()
        self.input_edit.setPlaceholderText("Input text to translate")
        self.input_edit.textChanged.connect(self._update_translate_button)
        original_layout.addWidget(self.input_edit)
        layout.addWidget(original_box)

        translated_box = QGroupBox("Translated")
        translated_layout = QVBoxLayout(translated_box)
        self.translated_label = QLabel("")
        self.translated_label.setWordWrap(True)
        translated_layout.addWidget(self.translated_label)
        layout.addWidget(translated_box)

        self.language_combo = QComboBox()
        self.language_combo.setVisible(False)
        layout.addWidget(self.language_combo)

        self.languages_loading_label = QLabel("Loading languages...")
        self.languages_loading_label.setStyleSheet("color: gray;")
        layout.addWidget(self.languages_loading_label)

        layout.addStretch()

        self.progress_bar = QProgressBar()
        self.progress_bar.setRange(0, 0)  # indeterminate
        self.progress_bar.setVisible(False)
        layout.addWidget(self.progress_bar)

        self.translate_button = QPushButton("Translate!")
        self.translate_button.setEnabled(False)
        self.translate_button.clicked.connect(self._on_translate_clicked)
        layout.addWidget(self.translate_button)

    def render(self, state: TranslationSessionState) -> None:
        """Update every widget from the given state."""
        self._set_languages(state.languages)

        self.translated_label.setText(state.translated_text)

        self.progress_bar.setVisible(state.is_loading)
        self.translate_button.setVisible(not state.is_loading)
        self._update_translate_button()

        if state.has_error and self._error_box is None:
            self._show_error(state.error_message)
        elif state.has_error:
            self._error_box.setText(state.error_message)
        elif not state.has_error and self._error_box is not None:
            box, self._error_box = self._error_box, None
            box.close()

    def selected_language(self):
        """Return the Language currently picked, or None while none are loaded."""
        index = self.language_combo.currentIndex()
        if index < 0 or index >= len(self._languages):
            return None
        return self._languages[index]

    def _set_languages(self, languages: List[Language]) -> None:
        if languages == self._languages:
            return

        previous = self.selected_language()
        self._languages = list(languages)

        self.language_combo.blockSignals(True)
        self.language_combo.clear()
        for language in self._languages:
            self.language_combo.addItem(language.name, language.id)
        if previous is None:
            previous = DEFAULT_SOURCE_LANGUAGE
        if previous in self._languages:
            self.language_combo.setCurrentIndex(self._languages.index(previous))
        self.language_combo.blockSignals(False)

        has_languages = len(self._languages) > 0
        self.language_combo.setVisible(has_languages)
        self.languages_loading_label.setVisible(not has_languages)

    def _update_translate_button(self, *_):
        self.translate_button.setEnabled(
            bool(self.input_edit.text()) and self.selected_language() is not None
        )

    def _on_translate_clicked(self):
        language = self.selected_language()
        if language is None:
            return
        self.translate_requested.emit(self.input_edit.text(), language)

    def _show_error(self, message: str) -> None:
        box = QMessageBox(self)
        box.setIcon(QMessageBox.Icon.Warning)
        box.setWindowTitle("Error")
        box.setText(message)
        box.setStandardButtons(QMessageBox.StandardButton.Ok)
        box.finished.connect(self._on_error_box_finished)
        self._error_box = box
        box.open()

    def _on_error_box_finished(self, _result: int) -> None:
        if self._error_box is None:
            return
        self._error_box = None
        self.error_dismissed.emit()
