"""Bot Tableau : démarrage de partie, reconnaissance, résolution, rejeu."""

from __future__ import annotations

from typing import Any, Dict, Optional

from tableau_bot.config import DIFFICULTY_CONFIG, get_session_paths
from tableau_bot.lib.s0_input import InputDriver
from tableau_bot.lib.s7_debug import DebugLogger
from tableau_bot.services import (
    ImagePerception,
    ScreenPerception,
    Session,
    create_session,
    resolve_difficulty,
    run_game,
)


class TableauBot:
    """Bot de résolution du tableau, pipeline modulaire."""

    def __init__(self, driver: Optional[InputDriver] = None):
        self.driver = driver
        self.session: Optional[Session] = None
        self.logger: Optional[DebugLogger] = None
        self.last_result: Dict[str, Any] = {}

    def run_pipeline(
        self,
        difficulty: Optional[str] = None,
        *,
        overlay_enabled: bool = False,
        dry_run: bool = False,
        image_path: Optional[str] = None,
        timeout: Optional[float] = None,
        unbounded: bool = False,
    ) -> bool:
        """Pipeline principal : nouvelle partie → capture → vision → solver → rejeu."""
        try:
            name = resolve_difficulty(difficulty)
            level = DIFFICULTY_CONFIG[name]['level']
            solver_config = None
            if unbounded:
                solver_config = {"timeout": None}
            elif timeout is not None:
                solver_config = {"timeout": timeout}

            if image_path:
                paths = get_session_paths("image")
                self.logger = DebugLogger(paths['logs'])
                perception = ImagePerception.from_file(
                    image_path,
                    level,
                    overlay_dir=paths['overlays'] if overlay_enabled else None,
                )
                self.last_result = run_game(
                    perception, replay=False, logger=self.logger, solver_config=solver_config
                )
            else:
                self.session = create_session(name, driver=self.driver)
                paths = get_session_paths(self.session.session_id)
                self.logger = DebugLogger(paths['logs'])
                perception = ScreenPerception(
                    level,
                    converter=self.session.converter,
                    capture_dir=paths['captures'],
                    overlay_dir=paths['overlays'] if overlay_enabled else None,
                )
                self.last_result = run_game(
                    perception,
                    session=self.session,
                    replay=not dry_run,
                    logger=self.logger,
                    solver_config=solver_config,
                )

            print(f"[GAME] statut={self.last_result['status']} coups={len(self.last_result['moves'])} "
                  f"rejoués={self.last_result['executed']}")
            return self.last_result.get("success", False)
        except (OSError, RuntimeError, ValueError) as e:
            print(f"[ERREUR] {e}")
            return False

    def cleanup(self) -> None:
        """Sauvegarde les logs de la session."""
        if self.logger:
            path = self.logger.save_session()
            print(f"[LOGS] {path}")
            self.logger = None
        self.session = None
