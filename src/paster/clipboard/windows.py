import time

import win32clipboard as wc

from paster.clipboard.base import ClipboardAccessError, TextClipboard


class WindowsClipboard(TextClipboard):
    """Windows clipboard via win32clipboard, unicode text only."""

    OPEN_ATTEMPTS = 3

    def _open(self) -> None:
        for _ in range(self.OPEN_ATTEMPTS):
            try:
                wc.OpenClipboard()
                return
            except Exception:
                time.sleep(0.05)
        raise ClipboardAccessError("Could not open the clipboard")

    def _read_text(self) -> str:
        self._open()
        try:
            if wc.IsClipboardFormatAvailable(wc.CF_UNICODETEXT):
                return wc.GetClipboardData(wc.CF_UNICODETEXT)
            return ""
        finally:
            wc.CloseClipboard()

    def _write_text(self, text: str) -> bool:
        self._open()
        try:
            wc.EmptyClipboard()
            wc.SetClipboardData(wc.CF_UNICODETEXT, text)
            return True
        finally:
            wc.CloseClipboard()
