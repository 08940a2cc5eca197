"""Launch-at-login registration.

* Linux: XDG autostart entry ``~/.config/autostart/breakminder.desktop``
* macOS: LaunchAgent ``~/Library/LaunchAgents/dev.breakminder.agent.plist``
* Windows: ``HKCU\\Software\\Microsoft\\Windows\\CurrentVersion\\Run`` value

Registration is idempotent. Failures are logged and swallowed so the
scheduler never sees them; ``set_enabled`` reports success to direct callers.
"""

from __future__ import annotations

import logging
import plistlib
import shlex
import sys
from pathlib import Path

from platformdirs import user_config_dir

from breakminder.core.ports import LoginItemPort

logger = logging.getLogger(__name__)

APP_NAME = "breakminder"
LAUNCH_AGENT_LABEL = "dev.breakminder.agent"
RUN_KEY_PATH = r"Software\Microsoft\Windows\CurrentVersion\Run"


def default_command() -> list[str]:
    """Command line that starts the reminder loop."""
    return [sys.executable, "-m", "breakminder", "run"]


class LoginItemManager(LoginItemPort):
    """Registers breakminder to start when the user logs in."""

    def __init__(
        self,
        platform: str | None = None,
        autostart_dir: Path | None = None,
        command: list[str] | None = None,
    ):
        self.platform = platform or sys.platform
        self.command = command or default_command()
        self.autostart_dir = autostart_dir or self._default_autostart_dir()

    def _default_autostart_dir(self) -> Path | None:
        if self.platform == "darwin":
            return Path.home() / "Library" / "LaunchAgents"
        if self.platform == "win32":
            return None
        return Path(user_config_dir()) / "autostart"

    @property
    def entry_path(self) -> Path | None:
        if self.autostart_dir is None:
            return None
        if self.platform == "darwin":
            return self.autostart_dir / f"{LAUNCH_AGENT_LABEL}.plist"
        return self.autostart_dir / f"{APP_NAME}.desktop"

    def set_enabled(self, enabled: bool) -> bool:
        try:
            if self.platform == "win32":
                self._set_registry_run(enabled)
            elif enabled:
                self._write_entry()
            else:
                self._remove_entry()
        except OSError as e:
            logger.warning("could not %s login item: %s", "enable" if enabled else "disable", e)
            return False
        logger.info("login item %s", "enabled" if enabled else "disabled")
        return True

    def is_enabled(self) -> bool:
        if self.platform == "win32":
            return self._read_registry_run() is not None
        path = self.entry_path
        return path is not None and path.exists()

    # ----- File based (Linux / macOS) -----

    def render_entry(self) -> bytes:
        if self.platform == "darwin":
            return plistlib.dumps(
                {
                    "Label": LAUNCH_AGENT_LABEL,
                    "ProgramArguments": self.command,
                    "RunAtLoad": True,
                    "ProcessType": "Interactive",
                }
            )
        lines = [
            "[Desktop Entry]",
            "Type=Application",
            "Name=breakminder",
            "Comment=Work/break interval reminder",
            f"Exec={shlex.join(self.command)}",
            "X-GNOME-Autostart-enabled=true",
            "Terminal=false",
            "",
        ]
        return "\n".join(lines).encode("utf-8")

    def _write_entry(self) -> None:
        path = self.entry_path
        path.parent.mkdir(parents=True, exist_ok=True)
        content = self.render_entry()
        if path.exists() and path.read_bytes() == content:
            return
        path.write_bytes(content)

    def _remove_entry(self) -> None:
        path = self.entry_path
        if path.exists():
            path.unlink()

    # ----- Windows registry -----

    def _set_registry_run(self, enabled: bool) -> None:
        import winreg

        key = winreg.OpenKey(winreg.HKEY_CURRENT_USER, RUN_KEY_PATH, 0, winreg.KEY_SET_VALUE)
        try:
            if enabled:
                value = " ".join(f'"{part}"' for part in self.command)
                winreg.SetValueEx(key, APP_NAME, 0, winreg.REG_SZ, value)
            else:
                try:
                    winreg.DeleteValue(key, APP_NAME)
                except FileNotFoundError:
                    pass
        finally:
            winreg.CloseKey(key)

    def _read_registry_run(self) -> str | None:
        import winreg

        try:
            with winreg.OpenKey(winreg.HKEY_CURRENT_USER, RUN_KEY_PATH) as key:
                value, _ = winreg.QueryValueEx(key, APP_NAME)
                return value
        except FileNotFoundError:
            return None
