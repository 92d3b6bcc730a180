import logging
from abc import ABC, abstractmethod

logger = logging.getLogger(__name__)


class ClipboardAccessError(RuntimeError):
    """The platform clipboard could not be read."""


class TextClipboard(ABC):

    @abstractmethod
    def _read_text(self) -> str:
        pass

    @abstractmethod
    def _write_text(self, text: str) -> bool:
        pass

    def read_text(self) -> str:
        """
        Read the current clipboard text.

        Returns:
            str: clipboard text, empty when the clipboard holds no text

        Raises:
            ClipboardAccessError: if the platform API fails
        """
        try:
            return self._read_text() or ""
        except ClipboardAccessError:
            raise
        except Exception as e:
            raise ClipboardAccessError(str(e)) from e

    def set_clipboard(self, text: str) -> bool:
        try:
            return self._write_text(text)
        except Exception as e:
            logger.error(f"Clipboard write failed: {e}")
            return False
