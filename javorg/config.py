"""
Configuration de l'application via pydantic-settings.

La configuration est chargee depuis les variables d'environnement avec le prefixe JAVORG_,
et peut optionnellement etre fournie via un fichier .env.

Les options de ligne de commande (--input, --output) surchargent input_dir et output_dir.
"""

import re
from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from javorg.utils.constants import (
    CODE_PATTERN,
    DEFAULT_HTTP_TIMEOUT,
    DEFAULT_JAVDB_URL,
    DEFAULT_USER_AGENT,
    VIDEO_EXTENSIONS,
)

# Trouver le fichier .env a la racine du projet (parent de javorg/)
_PROJECT_ROOT = Path(__file__).parent.parent
_ENV_FILE = _PROJECT_ROOT / ".env"


class Settings(BaseSettings):
    """Parametres de l'application avec support des variables d'environnement.

    Tous les parametres peuvent etre surcharges via des variables d'environnement
    avec le prefixe JAVORG_.
    Exemple : JAVORG_LOG_LEVEL=DEBUG

    Les chemins sont automatiquement etendus (~ -> repertoire home).
    """

    model_config = SettingsConfigDict(
        env_prefix="JAVORG_",
        env_file=_ENV_FILE if _ENV_FILE.exists() else ".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Chemins (avec expansion ~)
    input_dir: Path = Field(default=Path("."))
    output_dir: Path = Field(default=Path("./output"))

    # Service de metadonnees
    javdb_url: str = Field(default=DEFAULT_JAVDB_URL)
    user_agent: str = Field(default=DEFAULT_USER_AGENT)
    http_timeout: float = Field(default=DEFAULT_HTTP_TIMEOUT, gt=0)

    # Scan
    video_extensions: list[str] = Field(
        default_factory=lambda: sorted(VIDEO_EXTENSIONS)
    )
    code_pattern: str = Field(default=CODE_PATTERN)

    # Logging (fichier + stderr, rotation 10MB, 5 fichiers de retention)
    log_level: str = Field(default="INFO")
    log_file: Path = Field(default=Path("logs/javorg.log"))
    log_rotation_size: str = Field(default="10 MB")
    log_retention_count: int = Field(default=5)

    @field_validator("input_dir", "output_dir", "log_file", mode="before")
    @classmethod
    def expand_path(cls, v: str | Path) -> Path:
        """Etend ~ vers le repertoire home dans les chemins."""
        return Path(v).expanduser()

    @field_validator("javdb_url")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        """Le chemin des candidats commence par '/', pas de slash final."""
        return v.rstrip("/")

    @field_validator("video_extensions")
    @classmethod
    def normalize_extensions(cls, v: list[str]) -> list[str]:
        """Normalise les extensions en minuscules avec le point initial."""
        normalized = []
        for ext in v:
            ext = ext.strip().lower()
            if not ext:
                continue
            normalized.append(ext if ext.startswith(".") else f".{ext}")
        if not normalized:
            raise ValueError("Au moins une extension video est requise")
        return normalized

    @field_validator("code_pattern")
    @classmethod
    def validate_pattern(cls, v: str) -> str:
        """Verifie que le motif de code est une expression reguliere valide."""
        try:
            re.compile(v)
        except re.error as e:
            raise ValueError(f"Motif de code invalide: {e}") from e
        return v
