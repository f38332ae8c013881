import argparse

from tableau_bot.bot_tableau import TableauBot
from tableau_bot.config import DIFFICULTY_CONFIG, DEFAULT_DIFFICULTY


def main() -> None:
    parser = argparse.ArgumentParser(description="Pipeline nouvelle partie → vision → solver → rejeu")

    parser.add_argument(
        "--difficulty",
        default=DEFAULT_DIFFICULTY,
        help="Difficulté (parmi: %s)" % ", ".join(DIFFICULTY_CONFIG.keys()),
    )
    parser.add_argument(
        "--overlay",
        action="store_true",
        help="Sauvegarder l'overlay de reconnaissance des cartes",
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Résoudre et afficher les coups sans les rejouer",
    )
    parser.add_argument(
        "--image",
        help="Résoudre une capture existante du tableau au lieu de l'écran",
    )
    limits = parser.add_mutually_exclusive_group()
    limits.add_argument(
        "--timeout",
        type=float,
        default=None,
        help="Limite de temps du solver en secondes (garde-fou)",
    )
    limits.add_argument(
        "--no-timeout",
        action="store_true",
        help="Recherche sans limite de temps (arrêt par Ctrl+C)",
    )
    args = parser.parse_args()

    bot = TableauBot()
    success = bot.run_pipeline(
        args.difficulty,
        overlay_enabled=args.overlay,
        dry_run=args.dry_run,
        image_path=args.image,
        timeout=args.timeout,
        unbounded=args.no_timeout,
    )
    bot.cleanup()

    print("[FIN] Succès" if success else "[FIN] Échec")


if __name__ == "__main__":
    try:
        main()
    except KeyboardInterrupt:
        print("\nArrêt demandé par l'utilisateur.")
    except Exception as e:
        print(f"[ERREUR] Exception non capturée: {e}")
        import traceback
        traceback.print_exc()
