"""Drivers d'entrées synthétiques (souris/clavier)."""

from __future__ import annotations

import ctypes
import sys
from typing import List, Optional, Tuple

from .types import InputEvent

# Constantes user32
MOUSEEVENTF_LEFTDOWN = 0x0002
MOUSEEVENTF_LEFTUP = 0x0004
KEYEVENTF_KEYUP = 0x0002

VIRTUAL_KEYS = {
    "ctrl": 0x11,
    "shift": 0x10,
    "alt": 0x12,
    "escape": 0x1B,
    "enter": 0x0D,
}


def virtual_key(key: str) -> int:
    """Code de touche virtuelle Windows pour un nom de touche ou un caractère."""
    name = key.lower()
    if name in VIRTUAL_KEYS:
        return VIRTUAL_KEYS[name]
    if len(key) == 1 and key.isalnum():
        return ord(key.upper())
    raise ValueError(f"Touche inconnue: {key}")


class Win32InputDriver:
    """Injection d'entrées natives via user32 (Windows uniquement)."""

    def __init__(self):
        if sys.platform != "win32":
            raise RuntimeError("Injection d'entrées disponible uniquement sous Windows")
        self.user32 = ctypes.windll.user32
        try:
            ctypes.windll.shcore.SetProcessDpiAwareness(1)
        except (AttributeError, OSError):
            self.user32.SetProcessDPIAware()

    def move_to(self, x: int, y: int) -> None:
        self.user32.SetCursorPos(int(x), int(y))

    def mouse_down(self) -> None:
        self.user32.mouse_event(MOUSEEVENTF_LEFTDOWN, 0, 0, 0, 0)

    def mouse_up(self) -> None:
        self.user32.mouse_event(MOUSEEVENTF_LEFTUP, 0, 0, 0, 0)

    def key_down(self, key: str) -> None:
        self.user32.keybd_event(virtual_key(key), 0, 0, 0)

    def key_up(self, key: str) -> None:
        self.user32.keybd_event(virtual_key(key), 0, KEYEVENTF_KEYUP, 0)


class RecordingInputDriver:
    """Driver sans effet : enregistre les évènements (dry-run, tests)."""

    def __init__(self):
        self.events: List[InputEvent] = []
        self.position: Optional[Tuple[int, int]] = None

    def move_to(self, x: int, y: int) -> None:
        self.position = (int(x), int(y))
        self.events.append(InputEvent("move", position=self.position))

    def mouse_down(self) -> None:
        self.events.append(InputEvent("down", position=self.position))

    def mouse_up(self) -> None:
        self.events.append(InputEvent("up", position=self.position))

    def key_down(self, key: str) -> None:
        self.events.append(InputEvent("key_down", key=key))

    def key_up(self, key: str) -> None:
        self.events.append(InputEvent("key_up", key=key))

    def kinds(self) -> List[str]:
        return [e.kind for e in self.events]

    def clear(self) -> None:
        self.events.clear()
