"""Service layer for Paster."""

from paster.services.clipboard_service import ClipboardWatcher
from paster.services.paster_service import PasterService

__all__ = ["ClipboardWatcher", "PasterService"]
