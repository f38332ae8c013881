"""Types pour le module s0_input."""

from dataclasses import dataclass
from typing import Optional, Protocol, Tuple


@dataclass
class InputEvent:
    """Évènement bas niveau envoyé (ou enregistré) par un driver."""
    kind: str                                  # move, down, up, key_down, key_up
    position: Optional[Tuple[int, int]] = None
    key: Optional[str] = None


class InputDriver(Protocol):
    def move_to(self, x: int, y: int) -> None: ...

    def mouse_down(self) -> None: ...

    def mouse_up(self) -> None: ...

    def key_down(self, key: str) -> None: ...

    def key_up(self, key: str) -> None: ...
