import os
import shutil
import subprocess
from typing import List, Optional

from paster.clipboard.base import ClipboardAccessError, TextClipboard

READ_TIMEOUT = 1.5
WRITE_TIMEOUT = 2.0


class LinuxClipboard(TextClipboard):
    _TEXT_TARGETS = {
        "text/plain",
        "text/plain;charset=utf-8",
        "text/plain;charset=utf8",
        "utf8_string",
        "string",
    }

    def __init__(self, timeout: float = READ_TIMEOUT) -> None:
        self.timeout = timeout

    def _read_text(self) -> str:
        command = self._read_command()
        if command is None:
            raise ClipboardAccessError("Neither wl-paste nor xclip is available")

        if command[0] == "xclip":
            targets = self._query_targets()
            if targets is None:
                # no selection owner
                return ""
            if targets and not any(t.lower() in self._TEXT_TARGETS for t in targets):
                return ""

        data = self._run_command(command)
        return data.decode("utf-8", errors="ignore")

    def _write_text(self, text: str) -> bool:
        command = self._write_command()
        if command is None:
            return False

        subprocess.run(
            command,
            input=text.encode("utf-8"),
            check=True,
            timeout=WRITE_TIMEOUT,
        )
        return True

    def _read_command(self) -> Optional[List[str]]:
        if os.environ.get("WAYLAND_DISPLAY") and shutil.which("wl-paste"):
            return ["wl-paste", "--no-newline"]
        if shutil.which("xclip"):
            return ["xclip", "-selection", "clipboard", "-o"]
        return None

    def _write_command(self) -> Optional[List[str]]:
        if os.environ.get("WAYLAND_DISPLAY") and shutil.which("wl-copy"):
            return ["wl-copy"]
        if shutil.which("xclip"):
            return ["xclip", "-selection", "clipboard"]
        return None

    def _query_targets(self) -> Optional[List[str]]:
        try:
            result = subprocess.run(
                ["xclip", "-selection", "clipboard", "-t", "TARGETS", "-o"],
                stdout=subprocess.PIPE,
                stderr=subprocess.PIPE,
                check=True,
                timeout=self.timeout,
            )
        except subprocess.CalledProcessError:
            return None
        except subprocess.TimeoutExpired as e:
            raise ClipboardAccessError(f"xclip timed out after {self.timeout}s") from e
        return self._parse_type_list(result.stdout)

    def _parse_type_list(self, data: Optional[bytes]) -> List[str]:
        if not data:
            return []
        text = data.decode("utf-8", errors="ignore")
        return [line.strip() for line in text.splitlines() if line.strip()]

    def _run_command(self, command: List[str]) -> bytes:
        try:
            result = subprocess.run(
                command,
                stdout=subprocess.PIPE,
                stderr=subprocess.PIPE,
                check=True,
                timeout=self.timeout,
            )
            return result.stdout
        except subprocess.TimeoutExpired as e:
            raise ClipboardAccessError(f"{command[0]} timed out after {self.timeout}s") from e
        except (subprocess.CalledProcessError, FileNotFoundError) as e:
            raise ClipboardAccessError(f"{command[0]} failed: {e}") from e
