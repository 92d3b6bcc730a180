import logging
import threading
from typing import Callable, Iterable, List, Optional

from paster.clipboard import ClipboardAccessError, TextClipboard, get_clipboard
from paster.config import PasterConfig
from paster.database.card_store import CardStore
from paster.models.card import Card
from paster.services.clipboard_service import CardListener, ClipboardWatcher

logger = logging.getLogger(__name__)

PanelListener = Callable[[], None]


class PasterService:
    """
    Boundary between the card engine and its collaborators.

    The window layer, hotkey binder and HTTP API only talk to this object.
    It owns the store, the clipboard backend and the watcher.
    """

    def __init__(
        self,
        config: Optional[PasterConfig] = None,
        clipboard: Optional[TextClipboard] = None,
        store: Optional[CardStore] = None,
    ) -> None:
        self.config = config if config is not None else PasterConfig()
        self.clipboard = clipboard if clipboard is not None else get_clipboard(self.config.clipboard_backend)
        self.store = store if store is not None else CardStore(capacity=self.config.capacity)
        self.watcher = ClipboardWatcher(
            store=self.store,
            clipboard=self.clipboard,
            poll_interval=self.config.poll_interval,
        )
        self._panel_lock = threading.Lock()
        self._panel_visible = False
        self._show_listeners: List[PanelListener] = []
        self._hide_listeners: List[PanelListener] = []

    # lifecycle

    def start(self) -> None:
        self.watcher.start()

    def stop(self) -> None:
        self.watcher.stop()

    def clear(self) -> None:
        self.store.clear()

    @property
    def is_running(self) -> bool:
        return self.watcher.is_running

    # cards

    def get_all_cards(self) -> List[Card]:
        return self.store.all()

    def get_card(self, card_id: str) -> Optional[Card]:
        return self.store.get(card_id)

    def capture_now(self) -> Optional[Card]:
        return self.watcher.capture_now()

    def pin_card(self, card_id: str, pinned: bool = True) -> Optional[Card]:
        return self.store.pin(card_id, pinned)

    def set_card_tags(self, card_id: str, tags: Iterable[str]) -> Optional[Card]:
        return self.store.set_tags(card_id, tags)

    # clipboard

    def peek_clipboard(self) -> str:
        try:
            return self.clipboard.read_text()
        except ClipboardAccessError as e:
            logger.warning(f"Clipboard read failed: {e}")
            return ""

    def paste_card_content(self, text: str) -> bool:
        """
        Stage text on the system clipboard.

        The watcher records the staged text as seen so it does not turn it
        back into a card; a failed write leaves the watcher untouched.
        """
        ok = self.watcher.stage_text(text)
        if ok:
            logger.info(f"Staged {len(text)} characters on the clipboard")
        else:
            logger.warning("Could not stage content on the clipboard")
        return ok

    def paste_card(self, card_id: str) -> Optional[bool]:
        card = self.store.get(card_id)
        if card is None:
            return None
        return self.paste_card_content(card.content)

    # events

    def on_card_created(self, listener: CardListener) -> None:
        self.watcher.add_listener(listener)

    def on_show_panel(self, listener: PanelListener) -> None:
        self._show_listeners.append(listener)

    def on_hide_panel(self, listener: PanelListener) -> None:
        self._hide_listeners.append(listener)

    @property
    def panel_visible(self) -> bool:
        return self._panel_visible

    def show_panel(self) -> List[Card]:
        with self._panel_lock:
            self._panel_visible = True
        self._fire(self._show_listeners, "show-panel")
        return self.get_all_cards()

    def hide_panel(self) -> None:
        with self._panel_lock:
            self._panel_visible = False
        self._fire(self._hide_listeners, "hide-panel")

    def _fire(self, listeners: List[PanelListener], name: str) -> None:
        for listener in list(listeners):
            try:
                listener()
            except Exception as e:
                logger.error(f"Error in {name} listener: {e}")

    def __enter__(self) -> "PasterService":
        self.start()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.stop()
