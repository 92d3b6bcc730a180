from paster.clipboard.base import ClipboardAccessError, TextClipboard

try:
    from AppKit import NSPasteboard, NSPasteboardTypeString
    HAS_APPKIT = True
except ImportError:
    HAS_APPKIT = False


class MacOSClipboard(TextClipboard):

    def _pasteboard(self):
        if not HAS_APPKIT:
            raise ClipboardAccessError("pyobjc AppKit is not installed")
        return NSPasteboard.generalPasteboard()

    def _read_text(self) -> str:
        pasteboard = self._pasteboard()
        if NSPasteboardTypeString not in (pasteboard.types() or []):
            return ""
        return pasteboard.stringForType_(NSPasteboardTypeString) or ""

    def _write_text(self, text: str) -> bool:
        pasteboard = self._pasteboard()
        pasteboard.clearContents()
        return bool(pasteboard.setString_forType_(text, NSPasteboardTypeString))
