import importlib
import platform
from typing import Dict, List, Optional, Tuple, Type

from paster.clipboard.base import TextClipboard

# platform.system() name -> (module, class); modules load lazily because each
# one imports its own platform bindings
_BACKENDS: Dict[str, Tuple[str, str]] = {
    "Windows": ("paster.clipboard.windows", "WindowsClipboard"),
    "Linux": ("paster.clipboard.linux", "LinuxClipboard"),
    "Darwin": ("paster.clipboard.macos", "MacOSClipboard"),
}


def supported_platforms() -> List[str]:
    return sorted(_BACKENDS)


def get_clipboard_class(system: Optional[str] = None) -> Type[TextClipboard]:
    """
    Resolve the TextClipboard implementation for a platform.

    Args:
        system: a platform.system() name; the running platform when omitted.
            Matching is case-insensitive.

    Raises:
        NotImplementedError: If the platform is not supported
    """
    system = system or platform.system()
    for name, (module_name, class_name) in _BACKENDS.items():
        if name.lower() == system.lower():
            module = importlib.import_module(module_name)
            return getattr(module, class_name)
    raise NotImplementedError(
        f"Platform '{system}' is not supported (expected one of {', '.join(supported_platforms())})")


def get_clipboard(system: Optional[str] = None) -> TextClipboard:
    return get_clipboard_class(system)()
