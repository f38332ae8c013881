"""Actions de bas niveau composées à partir d'un driver."""

from __future__ import annotations

import time

from tableau_bot.config import WAIT_TIMES
from tableau_bot.lib.s0_coordinates import ScreenPoint
from .types import InputDriver


def _pause(delay: float) -> None:
    if delay > 0:
        time.sleep(delay)


def click(driver: InputDriver, point: ScreenPoint, delay: float = WAIT_TIMES['input']) -> None:
    """Clic gauche à une position écran."""
    driver.move_to(point.x, point.y)
    _pause(delay)
    driver.mouse_down()
    driver.mouse_up()
    _pause(delay)


def drag(
    driver: InputDriver,
    start: ScreenPoint,
    end: ScreenPoint,
    delay: float = WAIT_TIMES['drag_step'],
) -> None:
    """Glisser-déposer de `start` vers `end`."""
    driver.move_to(start.x, start.y)
    _pause(delay)
    driver.mouse_down()
    # le bouton est toujours relâché, même si le déplacement échoue
    try:
        _pause(delay)
        driver.move_to(end.x, end.y)
        _pause(delay)
    finally:
        driver.mouse_up()
    _pause(delay)


def press_shortcut(
    driver: InputDriver,
    key: str,
    modifier: str = "ctrl",
    delay: float = WAIT_TIMES['input'],
) -> None:
    """Raccourci clavier du type Ctrl+N."""
    driver.key_down(modifier)
    try:
        _pause(delay)
        driver.key_down(key)
        driver.key_up(key)
        _pause(delay)
    finally:
        driver.key_up(modifier)
    _pause(delay)
