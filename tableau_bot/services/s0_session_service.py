"""Service de session : ouverture du jeu et choix de la difficulté."""

from __future__ import annotations

import time
from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from tableau_bot.config import DEFAULT_DIFFICULTY, DIFFICULTY_CONFIG, FOCUS_POINT, PARK_POINT, WAIT_TIMES
from tableau_bot.lib.s0_coordinates import CoordinateConverter
from tableau_bot.lib.s0_input import InputDriver, Win32InputDriver, click, press_shortcut


@dataclass
class Session:
    """Session active avec tous les composants initialisés."""
    driver: InputDriver
    converter: CoordinateConverter
    difficulty: str
    level: int
    session_id: str


def resolve_difficulty(difficulty: Optional[str]) -> str:
    """Valide un nom de difficulté (easy, medium, hard, expert)."""
    name = (difficulty or DEFAULT_DIFFICULTY).lower()
    if name not in DIFFICULTY_CONFIG:
        raise ValueError(
            f"Difficulté inconnue: {difficulty} (parmi: {', '.join(DIFFICULTY_CONFIG)})"
        )
    return name


class SessionService:
    """Gère le démarrage d'une partie."""

    def __init__(
        self,
        driver: Optional[InputDriver] = None,
        converter: Optional[CoordinateConverter] = None,
    ):
        self.driver = driver
        self.converter = converter or CoordinateConverter()
        self.session: Optional[Session] = None

    def start(self, difficulty: Optional[str] = None, new_game: bool = True) -> Session:
        """Démarre une nouvelle session (et une nouvelle partie si demandé)."""
        name = resolve_difficulty(difficulty)
        driver = self.driver or Win32InputDriver()

        self.session = Session(
            driver=driver,
            converter=self.converter,
            difficulty=name,
            level=DIFFICULTY_CONFIG[name]['level'],
            session_id=datetime.now().strftime("%Y%m%d_%H%M%S"),
        )
        if new_game:
            self.new_game(self.session)
        return self.session

    def new_game(self, session: Session, wait: Optional[float] = None) -> None:
        """Focus fenêtre → Ctrl+N → bouton de difficulté → attente de la distribution."""
        converter = session.converter
        print(f"[SESSION] Nouvelle partie ({DIFFICULTY_CONFIG[session.difficulty]['name']})")

        # 1. Donner le focus à la fenêtre du jeu
        click(session.driver, converter.to_screen(*FOCUS_POINT))

        # 2. Nouvelle partie
        press_shortcut(session.driver, "n", modifier="ctrl")

        # 3. Choix de la difficulté
        button = DIFFICULTY_CONFIG[session.difficulty]['button']
        click(session.driver, converter.to_screen(*button))

        # 4. Curseur hors du plateau, attente de la distribution
        park = converter.to_screen(*PARK_POINT)
        session.driver.move_to(park.x, park.y)
        delay = WAIT_TIMES['game_start'] if wait is None else wait
        if delay > 0:
            time.sleep(delay)

    def get_session(self) -> Optional[Session]:
        """Retourne la session active."""
        return self.session


# === API fonctionnelle ===

_service: Optional[SessionService] = None


def _get_service() -> SessionService:
    global _service
    if _service is None:
        _service = SessionService()
    return _service


def create_session(
    difficulty: Optional[str] = None,
    driver: Optional[InputDriver] = None,
    new_game: bool = True,
) -> Session:
    """Crée une session et lance une nouvelle partie."""
    global _service
    if driver is not None:
        _service = SessionService(driver=driver)
    return _get_service().start(difficulty, new_game=new_game)


def get_current_session() -> Optional[Session]:
    """Retourne la session active."""
    return _get_service().get_session()
