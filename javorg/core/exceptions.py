"""
Exceptions du domaine JavOrg.

Hierarchie des erreurs levees par le pipeline d'organisation:
- ScanError : fatale, interrompt tout le traitement
- CodeAbsent, NotFound, Mismatch : l'element est ignore
- MetadataServiceError : echec de transport ou de parsing pour un element
- SidecarWriteError, NoCoverAvailable, DownloadFailed, RelocationFailed :
  echec d'une etape, les etapes suivantes sont tout de meme tentees
"""

from pathlib import Path
from typing import Optional


class JavOrgError(Exception):
    """
    Exception de base de JavOrg.

    Attributes:
        code: Code de l'element concerne, ou None si non applicable.
    """

    def __init__(self, message: str, code: Optional[str] = None) -> None:
        self.code = code
        super().__init__(message)


class ScanError(JavOrgError):
    """Le repertoire d'entree (ou de sortie) est inexploitable."""

    def __init__(self, path: Path, reason: str) -> None:
        self.path = Path(path)
        self.reason = reason
        super().__init__(f"Scan impossible de {path}: {reason}")


class CodeAbsent(JavOrgError):
    """Aucun code n'a pu etre extrait du nom de fichier."""

    def __init__(self, filename: str) -> None:
        self.filename = filename
        super().__init__(f"Aucun code dans '{filename}'")


class MetadataError(JavOrgError):
    """Base des erreurs de resolution des metadonnees."""


class NotFound(MetadataError):
    """La recherche n'a retourne aucun candidat."""

    def __init__(self, code: str) -> None:
        super().__init__(f"Aucun resultat pour {code}", code=code)


class Mismatch(MetadataError):
    """
    Le premier candidat ne correspond pas exactement au code recherche.

    Attributes:
        found: Code du premier candidat retourne par la recherche.
    """

    def __init__(self, code: str, found: str) -> None:
        self.found = found
        super().__init__(f"Premier resultat {found!r} != {code!r}", code=code)


class MetadataServiceError(MetadataError):
    """Erreur de transport ou de parsing du service de metadonnees."""


class SidecarWriteError(JavOrgError):
    """Le fichier NFO n'a pas pu etre ecrit."""

    def __init__(self, path: Path, reason: str, code: Optional[str] = None) -> None:
        self.path = Path(path)
        super().__init__(f"Ecriture NFO impossible ({path}): {reason}", code=code)


class ImageError(JavOrgError):
    """Base des erreurs d'acquisition des images."""


class NoCoverAvailable(ImageError):
    """Les metadonnees ne fournissent pas d'URL de couverture."""

    def __init__(self, code: Optional[str] = None) -> None:
        super().__init__(f"Pas de couverture pour {code or '?'}", code=code)


class DownloadFailed(ImageError):
    """
    Le telechargement d'une image a echoue.

    Attributes:
        url: URL telechargee
        status_code: Statut HTTP si la reponse a ete recue, None sinon
    """

    def __init__(
        self,
        url: str,
        reason: str,
        status_code: Optional[int] = None,
        code: Optional[str] = None,
    ) -> None:
        self.url = url
        self.status_code = status_code
        super().__init__(f"Telechargement echoue ({url}): {reason}", code=code)


class RelocationFailed(JavOrgError):
    """Le deplacement du fichier video a echoue, la source est intacte."""

    def __init__(
        self,
        source: Path,
        destination: Path,
        reason: str,
        code: Optional[str] = None,
    ) -> None:
        self.source = Path(source)
        self.destination = Path(destination)
        super().__init__(
            f"Deplacement impossible {source} -> {destination}: {reason}", code=code
        )
