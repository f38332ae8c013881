"""Module s0_input : Entrées synthétiques souris/clavier."""

from .types import InputDriver, InputEvent
from .driver import Win32InputDriver, RecordingInputDriver, virtual_key
from .actions import click, drag, press_shortcut

__all__ = [
    "InputDriver",
    "InputEvent",
    "Win32InputDriver",
    "RecordingInputDriver",
    "virtual_key",
    "click",
    "drag",
    "press_shortcut",
]
