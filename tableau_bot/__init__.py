"""Bot Tableau : résolution automatique d'un solitaire à colonnes et cases de réserve."""

__version__ = "0.1.0"
