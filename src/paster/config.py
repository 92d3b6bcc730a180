import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

from paster.database.card_store import DEFAULT_CAPACITY

DEFAULT_POLL_INTERVAL = 0.5


def _to_bool(value: Optional[str], default: bool = True) -> bool:
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


def _to_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if not raw:
        return default
    try:
        return float(raw)
    except ValueError:
        raise ValueError(f"{name} must be a number, got {raw!r}") from None


def _to_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from None


@dataclass(frozen=True)
class PasterConfig:
    poll_interval: float = DEFAULT_POLL_INTERVAL
    capacity: int = DEFAULT_CAPACITY
    api_host: str = "127.0.0.1"
    api_port: int = 5174
    capture_hotkey: str = "ctrl+shift+c"
    panel_hotkey: str = "ctrl+e"
    enable_hotkeys: bool = True
    enable_api: bool = True
    clipboard_backend: Optional[str] = None

    def __post_init__(self) -> None:
        if self.poll_interval <= 0:
            raise ValueError(f"poll_interval must be positive, got {self.poll_interval}")
        if self.capacity < 1:
            raise ValueError(f"capacity must be positive, got {self.capacity}")
        if not 0 < self.api_port < 65536:
            raise ValueError(f"api_port out of range: {self.api_port}")

    @classmethod
    def from_env(cls, *, env_path: Optional[Path] = None) -> "PasterConfig":
        load_dotenv(dotenv_path=env_path)

        return cls(
            poll_interval=_to_float("PASTER_POLL_INTERVAL", cls.poll_interval),
            capacity=_to_int("PASTER_CAPACITY", cls.capacity),
            api_host=os.getenv("PASTER_API_HOST", cls.api_host),
            api_port=_to_int("PASTER_API_PORT", cls.api_port),
            capture_hotkey=os.getenv("PASTER_CAPTURE_HOTKEY", cls.capture_hotkey),
            panel_hotkey=os.getenv("PASTER_PANEL_HOTKEY", cls.panel_hotkey),
            enable_hotkeys=_to_bool(os.getenv("PASTER_ENABLE_HOTKEYS"), default=True),
            enable_api=_to_bool(os.getenv("PASTER_ENABLE_API"), default=True),
            clipboard_backend=os.getenv("PASTER_CLIPBOARD_BACKEND") or None,
        )
