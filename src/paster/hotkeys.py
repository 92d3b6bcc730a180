import logging
from typing import List

import keyboard

from paster.services.paster_service import PasterService

logger = logging.getLogger(__name__)


class HotkeyBinder:
    """Global hotkeys: one captures the clipboard, one opens the panel."""

    def __init__(
        self,
        service: PasterService,
        capture_hotkey: str = "ctrl+shift+c",
        panel_hotkey: str = "ctrl+e",
    ) -> None:
        self.service = service
        self.capture_hotkey = capture_hotkey
        self.panel_hotkey = panel_hotkey
        self._handles: List = []

    def bind(self) -> bool:
        ok = True
        for hotkey, callback in (
            (self.capture_hotkey, self._on_capture),
            (self.panel_hotkey, self._on_panel),
        ):
            try:
                self._handles.append(keyboard.add_hotkey(hotkey, callback))
                logger.info(f"Registered hotkey {hotkey}")
            except Exception as e:
                logger.warning(f"Could not register hotkey {hotkey}: {e}")
                ok = False
        return ok

    def unbind(self) -> None:
        for handle in self._handles:
            try:
                keyboard.remove_hotkey(handle)
            except (KeyError, ValueError) as e:
                logger.debug(f"Hotkey already removed: {e}")
        self._handles.clear()

    def _on_capture(self) -> None:
        logger.debug("Capture hotkey pressed")
        card = self.service.capture_now()
        if card:
            logger.info(f"Captured card: {card.title}")

    def _on_panel(self) -> None:
        logger.debug("Panel hotkey pressed")
        self.service.show_panel()
