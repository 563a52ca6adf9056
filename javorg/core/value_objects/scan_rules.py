"""
Objet valeur pour les regles de scan.

Regroupe la liste des extensions video acceptees et le motif d'extraction
des codes. Immutable, il est injecte dans le scanner et l'extracteur pour
permettre de les substituer dans les tests.
"""

import re
from dataclasses import dataclass, field
from pathlib import PurePath
from typing import TYPE_CHECKING, Iterable

from javorg.utils.constants import CODE_PATTERN, VIDEO_EXTENSIONS

if TYPE_CHECKING:
    from javorg.config import Settings


def normalize_extension(extension: str) -> str:
    """Normalise une extension: minuscules, point initial ('MP4' -> '.mp4')."""
    extension = extension.strip().lower()
    if not extension.startswith("."):
        extension = f".{extension}"
    return extension


def compile_code_pattern(pattern: str) -> re.Pattern:
    """Compile le motif de code, toujours insensible a la casse."""
    return re.compile(pattern, re.IGNORECASE)


@dataclass(frozen=True)
class ScanRules:
    """
    Regles appliquees par le scanner.

    Attributs:
        video_extensions: Extensions acceptees (minuscules, avec le point)
        code_pattern: Motif compile d'extraction du code
    """

    video_extensions: frozenset[str] = VIDEO_EXTENSIONS
    code_pattern: re.Pattern = field(
        default_factory=lambda: compile_code_pattern(CODE_PATTERN)
    )

    @classmethod
    def build(cls, extensions: Iterable[str], pattern: str) -> "ScanRules":
        """Construit des regles a partir de valeurs brutes."""
        return cls(
            video_extensions=frozenset(normalize_extension(e) for e in extensions),
            code_pattern=compile_code_pattern(pattern),
        )

    @classmethod
    def from_settings(cls, settings: "Settings") -> "ScanRules":
        """Construit les regles depuis la configuration de l'application."""
        return cls.build(settings.video_extensions, settings.code_pattern)

    def accepts(self, filename: str) -> bool:
        """Verifie si l'extension du fichier fait partie des extensions video."""
        return PurePath(filename).suffix.lower() in self.video_extensions
