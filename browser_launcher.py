"""Open the user's default browser through the platform's own URL handler."""

import enum
import subprocess
import sys
import threading
from typing import List, Optional


class LaunchError(Exception):
    """The browser could not be opened. Never fatal to the server."""


class UnsupportedPlatform(LaunchError):
    def __init__(self, platform: str):
        super().__init__(f"unsupported platform: {platform}")
        self.platform = platform


class SpawnError(LaunchError):
    pass


class Platform(enum.Enum):
    WINDOWS = "windows"
    MACOS = "darwin"
    LINUX = "linux"

    @classmethod
    def detect(cls, name: Optional[str] = None) -> "Platform":
        name = sys.platform if name is None else name
        if name in ("win32", "cygwin"):
            return cls.WINDOWS
        if name == "darwin":
            return cls.MACOS
        if name.startswith(("linux", "freebsd", "openbsd", "netbsd")):
            return cls.LINUX
        raise UnsupportedPlatform(name)

    def command(self, url: str) -> List[str]:
        if self is Platform.WINDOWS:
            return ["cmd", "/c", "start", url]
        if self is Platform.MACOS:
            return ["open", url]
        return ["xdg-open", url]


def launch(url: str, platform: Optional[str] = None) -> subprocess.Popen:
    """Start the browser process and return without waiting for it.

    A daemon thread waits on the child so it does not linger as a zombie
    while the server runs.
    """
    cmd = Platform.detect(platform).command(url)
    try:
        proc = subprocess.Popen(
            cmd,
            stdin=subprocess.DEVNULL,
            stdout=subprocess.DEVNULL,
            stderr=subprocess.DEVNULL,
        )
    except OSError as e:
        raise SpawnError(f"Command failed: {' '.join(cmd)}: {e}") from e
    threading.Thread(target=proc.wait, name="browser-reaper", daemon=True).start()
    return proc
