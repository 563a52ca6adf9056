"""
Constantes globales pour JavOrg.

Ce module contient les valeurs fixes du pipeline:
- Extensions video reconnues par le scanner
- Motif d'extraction des codes
- Valeurs par defaut du fichier NFO
- Noms des artefacts generes
"""

# Extensions video reconnues (comparaison insensible a la casse)
VIDEO_EXTENSIONS = frozenset({
    ".mp4",
    ".mkv",
    ".wmv",
    ".avi",
})

# Code: lettres, tiret, chiffres (ex: ABC-123)
CODE_PATTERN = r"[A-Za-z]+-\d+"

# Valeurs NFO non fournies par la source de metadonnees
DEFAULT_RUNTIME = "120"
DEFAULT_STUDIO = "Unknown"
DEFAULT_DIRECTOR = "Unknown"
ACTOR_ROLE = "Actress"

# Identifiant de source pour <uniqueid type="...">
UNIQUE_ID_TYPE = "javdb"

# Artefacts du dossier de destination
NFO_EXTENSION = ".nfo"
POSTER_FILENAME = "poster.jpg"
FANART_FILENAME = "fanart.jpg"

# Declaration XML ecrite en tete du NFO
XML_DECLARATION = '<?xml version="1.0" encoding="UTF-8" standalone="yes"?>'

# Reseau
DEFAULT_JAVDB_URL = "https://javdb.com"
DEFAULT_USER_AGENT = (
    "Mozilla/5.0 (Macintosh; Intel Mac OS X 10_15_7) "
    "AppleWebKit/537.36 (KHTML, like Gecko) Chrome/120.0 Safari/537.36"
)
DEFAULT_HTTP_TIMEOUT = 30.0

# Taille des blocs pour la copie et le telechargement (1 MB)
COPY_CHUNK_SIZE = 1024 * 1024
