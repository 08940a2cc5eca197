"""Platform idle-time detection.

Seconds since the last keyboard or mouse event, read from:

* Windows: ``GetLastInputInfo`` through ctypes
* macOS: ``CGEventSourceSecondsSinceLastEventType`` from CoreGraphics
* Linux: the ``xprintidle`` helper (X11)

When detection is unavailable the user is treated as active, so the work
countdown keeps running rather than freezing forever.
"""

from __future__ import annotations

import logging
import subprocess
import sys
from collections.abc import Callable

from breakminder.core.ports import InactivityProbe

logger = logging.getLogger(__name__)

IdleReader = Callable[[], float]


def _tick_delta_seconds(now_ms: int, last_input_ms: int) -> float:
    # GetTickCount is a 32-bit millisecond counter that wraps every ~49.7 days
    return ((now_ms - last_input_ms) & 0xFFFFFFFF) / 1000.0


def _windows_reader() -> IdleReader:
    from ctypes import Structure, byref, c_uint, sizeof, windll

    class LASTINPUTINFO(Structure):
        _fields_ = [("cbSize", c_uint), ("dwTime", c_uint)]

    def read() -> float:
        lii = LASTINPUTINFO()
        lii.cbSize = sizeof(LASTINPUTINFO)
        if windll.user32.GetLastInputInfo(byref(lii)):
            return _tick_delta_seconds(windll.kernel32.GetTickCount(), lii.dwTime)
        return 0.0

    return read


def _macos_reader() -> IdleReader:
    import ctypes
    import ctypes.util

    cg = ctypes.cdll.LoadLibrary(ctypes.util.find_library("CoreGraphics"))
    fn = cg.CGEventSourceSecondsSinceLastEventType
    fn.restype = ctypes.c_double
    fn.argtypes = [ctypes.c_int32, ctypes.c_uint32]

    # kCGEventSourceStateCombinedSessionState = 0, kCGAnyInputEventType = ~0
    def read() -> float:
        return float(fn(0, 0xFFFFFFFF))

    return read


def _linux_reader() -> IdleReader:
    def read() -> float:
        result = subprocess.run(
            ["xprintidle"], capture_output=True, text=True, timeout=2, check=True
        )
        return int(result.stdout.strip()) / 1000.0

    return read


def default_idle_reader(platform: str | None = None) -> IdleReader:
    """Pick the idle reader for ``platform`` (defaults to ``sys.platform``)."""
    platform = platform or sys.platform
    if platform == "win32":
        return _windows_reader()
    if platform == "darwin":
        return _macos_reader()
    return _linux_reader()


class SystemInactivityProbe(InactivityProbe):
    """``InactivityProbe`` backed by the OS idle timer."""

    def __init__(self, reader: IdleReader | None = None):
        self._reader = reader

    def idle_seconds(self) -> float:
        """Seconds since last user input, 0.0 if it can't be determined."""
        try:
            if self._reader is None:
                self._reader = default_idle_reader()
            return self._reader()
        except (OSError, ValueError, AttributeError, subprocess.SubprocessError) as e:
            logger.debug("idle detection unavailable: %s", e)
            return 0.0

    def is_inactive(self, threshold_minutes: int) -> bool:
        return self.idle_seconds() >= threshold_minutes * 60
