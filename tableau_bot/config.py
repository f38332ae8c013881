"""
Configuration centrale pour le bot Tableau.

Ce fichier contient tous les paramètres configurables du jeu,
y compris la forme du plateau, les dimensions graphiques et les temps d'attente.
"""

# Paramètres du plateau
COLUMN_COUNT = 8       # Nombre de colonnes du tableau (fixe pour toute la partie)
COLUMN_DEPTH = 5       # Nombre de cartes distribuées par colonne
CARD_VALUES = 10       # Nombre de faces distinctes (cartes 0..9)
RUN_LENGTH = 4         # Nombre d'exemplaires de chaque face = longueur d'une suite complète
MAX_SLOTS = 4          # Nombre de cases de réserve en difficulté la plus basse

# Paramètres graphiques (pixels, relatifs au moniteur du jeu)
SCREEN_OFFSET = (1920, 0)       # Origine du moniteur du jeu dans le ScreenSpace
CARD_ORIGIN = (470, 474)        # Coin supérieur gauche de l'échantillon de la 1re carte
CARD_STRIDE = (128, 30)         # Décalage entre colonnes (x) et entre cartes empilées (y)
CARD_SAMPLE_SIZE = 20           # Taille de l'échantillon comparé aux templates
SLOT_ORIGIN = (470, 300)        # Coin supérieur gauche de la 1re case de réserve
SLOT_STRIDE = 128               # Décalage horizontal entre cases de réserve
FOCUS_POINT = (5, 5)            # Point cliqué pour donner le focus à la fenêtre
PARK_POINT = (5, 5)             # Position de repos du curseur (hors du plateau)

# Temps d'attente (en secondes)
WAIT_TIMES = {
    'input': 0.05,             # Temps d'attente entre deux évènements clavier/souris
    'game_start': 7.0,         # Animation de distribution après le choix de difficulté
    'between_moves': 0.2,      # Temps d'attente entre deux coups rejoués
    'drag_step': 0.05,         # Pause pendant un glisser-déposer
}

# Configuration des difficultés (nombre de cases de réserve = MAX_SLOTS - level)
DIFFICULTY_CONFIG = {
    'easy': {
        'name': 'Easy',
        'level': 0,
        'button': (925, 555)
    },
    'medium': {
        'name': 'Medium',
        'level': 1,
        'button': (1115, 555)
    },
    'hard': {
        'name': 'Hard',
        'level': 2,
        'button': (925, 685)
    },
    'expert': {
        'name': 'Expert',
        'level': 3,
        'button': (1115, 685)
    }
}

# Configuration par défaut
DEFAULT_DIFFICULTY = 'easy'

# Paramètres du solver
SOLVER_CONFIG = {
    'timeout': 120.0,          # Limite de temps en secondes (None = pas de limite)
}

# Paramètres de la reconnaissance
VISION_CONFIG = {
    'templates_dir': 'assets',     # Dossier contenant 0.png .. 9.png
    'match_threshold': 30.0,       # Distance L2 maximale pour accepter un template
}

# Chemins des fichiers
PATHS = {
    'logs': 'logs',
}


def get_session_paths(session_id: str) -> dict:
    """
    Retourne les chemins configurés pour une session spécifique.
    Structure: temp/sessions/{session_id}/{category}/...
    """
    base = f"temp/sessions/{session_id}"
    return {
        'captures': f"{base}/s1_captures",      # Captures d'écran du plateau
        'overlays': f"{base}/s2_overlays",      # Overlays de reconnaissance
        'logs': f"{base}/logs",                 # Logs JSON de la session
    }
