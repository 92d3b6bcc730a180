import threading
from typing import List

import pytest

from paster.clipboard import ClipboardAccessError, TextClipboard
from paster.database.card_store import CardStore


class FakeClipboard(TextClipboard):
    """In-memory clipboard; set ``fail`` to simulate platform errors."""

    def __init__(self, text: str = "") -> None:
        self.text = text
        self.fail = False
        self.writes: List[str] = []
        self.reads = 0
        self._lock = threading.Lock()

    def _read_text(self) -> str:
        with self._lock:
            self.reads += 1
            if self.fail:
                raise ClipboardAccessError("clipboard busy")
            return self.text

    def _write_text(self, text: str) -> bool:
        with self._lock:
            if self.fail:
                raise OSError("clipboard busy")
            self.writes.append(text)
            self.text = text
            return True


@pytest.fixture
def clipboard():
    return FakeClipboard()


@pytest.fixture
def store():
    return CardStore()
