"""Observer/Listener: a text view that reports every text change."""
from abc import ABC, abstractmethod
from typing import Optional


class TextChangedListener(ABC):
    @abstractmethod
    def on_text_changed(self, old_text: str, new_text: str) -> None:
        """Called after the text has changed."""


class PrintingTextChangedListener(TextChangedListener):
    def on_text_changed(self, old_text: str, new_text: str) -> None:
        print(f"Text is changed {old_text} -> {new_text}")


class TextView:
    """Holds text and notifies its listener on every assignment."""

    def __init__(self, listener: Optional[TextChangedListener] = None):
        self.listener = listener
        self._text = "<empty>"

    @property
    def text(self) -> str:
        return self._text

    @text.setter
    def text(self, new_text: str) -> None:
        old_text = self._text
        self._text = new_text
        if self.listener is not None:
            self.listener.on_text_changed(old_text, new_text)


def demo() -> None:
    text_view = TextView(listener=PrintingTextChangedListener())
    text_view.text = "Lorem ipsum"
    text_view.text = "dolor sit amet"
