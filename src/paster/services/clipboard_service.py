import logging
import threading
from typing import Callable, List, Optional

from paster.clipboard import ClipboardAccessError, TextClipboard
from paster.config import DEFAULT_POLL_INTERVAL
from paster.database.card_store import CardStore
from paster.models.card import Card
from paster.utils.fingerprint import fingerprint

logger = logging.getLogger(__name__)


CardListener = Callable[[Card], None]


class ClipboardWatcher:
    """
    Polls the clipboard and turns new text into cards.

    Every tick, manual capture and ``stop()`` run under one lock, so two
    admissions never interleave and nothing is admitted once ``stop()``
    has returned. Missed intervals are dropped rather than queued.
    """

    def __init__(
        self,
        store: CardStore,
        clipboard: TextClipboard,
        poll_interval: float = DEFAULT_POLL_INTERVAL,
        on_card_created: Optional[CardListener] = None,
        auto_start: bool = False,
    ) -> None:
        if poll_interval <= 0:
            raise ValueError(f"poll_interval must be positive, got {poll_interval}")

        self.store = store
        self.clipboard = clipboard
        self.poll_interval = poll_interval
        self._listeners: List[CardListener] = []
        if on_card_created is not None:
            self._listeners.append(on_card_created)

        self._lock = threading.RLock()
        self._stop_event = threading.Event()
        self._poll_thread: Optional[threading.Thread] = None
        self._is_running = False
        self._last_hash: Optional[str] = None

        if auto_start:
            self.start()

    @property
    def is_running(self) -> bool:
        return self._is_running

    @property
    def last_fingerprint(self) -> Optional[str]:
        return self._last_hash

    def add_listener(self, listener: CardListener) -> None:
        with self._lock:
            if listener not in self._listeners:
                self._listeners.append(listener)

    def remove_listener(self, listener: CardListener) -> None:
        with self._lock:
            if listener in self._listeners:
                self._listeners.remove(listener)

    def start(self) -> None:
        with self._lock:
            if self._is_running:
                return

            self._last_hash = self._prime()
            self._stop_event.clear()
            self._is_running = True
            self._poll_thread = threading.Thread(
                target=self._poll_loop, name="paster-clipboard-watcher", daemon=True)
            self._poll_thread.start()
            logger.info(f"Clipboard watcher started (interval {self.poll_interval}s)")

    def stop(self) -> None:
        with self._lock:
            if not self._is_running:
                return

            self._is_running = False
            self._stop_event.set()
            self._last_hash = None
            thread = self._poll_thread
            self._poll_thread = None

        if thread is not None and thread is not threading.current_thread():
            thread.join(timeout=1.0)
        logger.info("Clipboard watcher stopped")

    def poll_once(self) -> Optional[Card]:
        """Run one poll tick. Does nothing while the watcher is stopped."""
        with self._lock:
            if not self._is_running:
                return None

            try:
                text = self.clipboard.read_text()
            except ClipboardAccessError as e:
                logger.warning(f"Clipboard read failed: {e}")
                return None

            return self._process(text)

    def capture_now(self) -> Optional[Card]:
        """
        Read the clipboard and admit it immediately, outside the poll cadence.

        Returns:
            Optional[Card]: the created card, or None for empty text, a head
            duplicate or a failed read
        """
        with self._lock:
            try:
                text = self.clipboard.read_text()
            except ClipboardAccessError as e:
                logger.warning(f"Manual capture failed: {e}")
                return None

            if not text.strip():
                logger.info("Clipboard is empty, nothing to capture")
                return None

            self._last_hash = fingerprint(text)
            card = self.store.admit(text)
            if card is not None:
                self._notify(card)
            return card

    def mark_seen(self, text: str) -> None:
        """Record text as already seen so the next tick ignores it."""
        if not text.strip():
            return
        with self._lock:
            self._last_hash = fingerprint(text)

    def stage_text(self, text: str) -> bool:
        """
        Write text to the clipboard without it coming back as a new card.

        The last-seen fingerprint only moves to the staged text when the
        write succeeds.
        """
        with self._lock:
            previous = self._last_hash
            self.mark_seen(text)
            ok = self.clipboard.set_clipboard(text)
            if not ok:
                self._last_hash = previous
            return ok

    def _prime(self) -> Optional[str]:
        try:
            text = self.clipboard.read_text()
        except ClipboardAccessError as e:
            logger.warning(f"Initial clipboard read failed: {e}")
            return None
        return fingerprint(text) if text.strip() else None

    def _process(self, text: str) -> Optional[Card]:
        if not text.strip():
            return None

        current_hash = fingerprint(text)
        if current_hash == self._last_hash:
            return None

        self._last_hash = current_hash
        card = self.store.admit(text)
        if card is not None:
            self._notify(card)
        return card

    def _notify(self, card: Card) -> None:
        for listener in list(self._listeners):
            try:
                listener(card)
            except Exception as e:
                logger.error(f"Error in card listener: {e}")

    def _poll_loop(self) -> None:
        while not self._stop_event.wait(self.poll_interval):
            try:
                self.poll_once()
            except Exception as e:
                logger.error(f"Unexpected error in poll tick: {e}")

    def __enter__(self) -> "ClipboardWatcher":
        self.start()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.stop()
