"""
LyricFinder - Suggestion Field Widget

A line edit with a completer popup fed by the search controller.  The
widget does no debouncing or filtering of its own: it reports every edit
immediately and shows whatever list it is given, in the given order.
"""

from PyQt6.QtCore import Qt, QStringListModel, pyqtSignal
from PyQt6.QtWidgets import QCompleter, QLineEdit

from models import SuggestionSet, SuggestionStatus


class SuggestField(QLineEdit):
    """Text input with an autocomplete popup.

    Signals:
        text_typed(str): User edited the text (not emitted for setText()).
        suggestion_chosen(str): User picked an entry from the popup.
        focus_lost(): Focus moved elsewhere (popup focus excluded).
    """

    text_typed = pyqtSignal(str)
    suggestion_chosen = pyqtSignal(str)
    focus_lost = pyqtSignal()

    def __init__(self, placeholder: str = "", parent=None):
        super().__init__(parent)
        self.setPlaceholderText(placeholder)
        self.setClearButtonEnabled(True)

        self._model = QStringListModel(self)
        self._completer = QCompleter(self._model, self)
        self._completer.setCompletionMode(
            QCompleter.CompletionMode.UnfilteredPopupCompletion
        )
        self._completer.setCaseSensitivity(Qt.CaseSensitivity.CaseInsensitive)
        self._completer.setMaxVisibleItems(12)
        self._completer.activated[str].connect(self.suggestion_chosen)
        self.setCompleter(self._completer)

        self.textEdited.connect(self.text_typed)

    def suggestions(self) -> list[str]:
        return self._model.stringList()

    def show_suggestions(self, suggestion_set: SuggestionSet) -> None:
        """Render a SuggestionSet: popup for READY, hidden otherwise."""
        if suggestion_set.status is SuggestionStatus.READY:
            self._model.setStringList(list(suggestion_set.items))
            if self.hasFocus():
                self._completer.complete()
            return

        if suggestion_set.status in (SuggestionStatus.IDLE, SuggestionStatus.EMPTY):
            self._model.setStringList([])
        self._completer.popup().hide()

    def set_text_quietly(self, text: str) -> None:
        """Replace the text without emitting ``text_typed``."""
        if self.text() != text:
            self.setText(text)

    def focusOutEvent(self, event):
        super().focusOutEvent(event)
        if event.reason() != Qt.FocusReason.PopupFocusReason:
            self.focus_lost.emit()
