"""
Cross-platform clipboard access.

Only plain text is read and written; images and files are ignored.
"""

from paster.clipboard.base import ClipboardAccessError, TextClipboard
from paster.clipboard.factory import get_clipboard, get_clipboard_class, supported_platforms

__all__ = [
    'ClipboardAccessError',
    'TextClipboard',
    'get_clipboard',
    'get_clipboard_class',
    'supported_platforms',
]
