"""
Entites du pipeline d'organisation.

Un DiscoveredItem represente un fichier video trouve par le scanner,
avec le code extrait de son nom (eventuellement vide).
"""

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class DiscoveredItem:
    """
    Fichier video decouvert lors du scan.

    Attributs :
        path : Chemin absolu du fichier
        filename : Nom du fichier (sans le chemin)
        code : Code extrait du nom, en majuscules ("" si absent)
    """

    path: Path
    filename: str
    code: str = ""

    @property
    def has_code(self) -> bool:
        """Indique si un code a ete extrait du nom de fichier."""
        return bool(self.code)

    @property
    def extension(self) -> str:
        """Extension d'origine du fichier, casse conservee (ex: '.MP4')."""
        return self.path.suffix
