"""
Service de scan du repertoire d'entree.

Parcourt recursivement le repertoire, filtre les fichiers video par extension
et extrait le code de chaque nom de fichier.
"""

from pathlib import Path
from typing import Iterable, Iterator, Optional

from loguru import logger

from javorg.core.entities.item import DiscoveredItem
from javorg.core.exceptions import ScanError
from javorg.core.ports.file_system import IFileSystem
from javorg.core.value_objects.scan_rules import ScanRules
from javorg.services.code_extractor import extract_code


class ScannerService:
    """
    Service orchestrant le scan du repertoire d'entree.

    Coordonne:
    - Le systeme de fichiers (IFileSystem) pour parcourir l'arborescence
    - Les regles de scan (ScanRules) pour filtrer et extraire les codes
    """

    def __init__(
        self,
        file_system: IFileSystem,
        rules: Optional[ScanRules] = None,
    ) -> None:
        """
        Initialise le service de scan.

        Args:
            file_system: Implementation de IFileSystem pour le parcours
            rules: Extensions acceptees et motif de code (defaut: ScanRules())
        """
        self._file_system = file_system
        self._rules = rules or ScanRules()

    def scan(
        self,
        root: Path,
        exclude: Iterable[Path] = (),
    ) -> Iterator[DiscoveredItem]:
        """
        Scanne un repertoire et yield un DiscoveredItem par fichier video.

        Les fichiers sans code sont tout de meme retournes (code vide) :
        c'est au pipeline de les ignorer.

        Args:
            root: Repertoire racine a scanner
            exclude: Sous-arborescences ignorees (ex: le repertoire de sortie
                quand il se trouve sous la racine)

        Yields:
            DiscoveredItem pour chaque fichier dont l'extension est acceptee

        Raises:
            ScanError: Si la racine n'existe pas, n'est pas un repertoire,
                ou si le parcours echoue
        """
        root = Path(root)
        if not root.exists():
            raise ScanError(root, "repertoire introuvable")
        if not root.is_dir():
            raise ScanError(root, "n'est pas un repertoire")

        excluded = [Path(p).absolute() for p in exclude]
        try:
            for path in self._file_system.walk_files(root):
                if not self._rules.accepts(path.name):
                    continue
                if _is_under(path.absolute(), excluded):
                    continue
                yield self._process_file(path)
        except OSError as e:
            raise ScanError(root, str(e)) from e

    def scan_all(
        self,
        root: Path,
        exclude: Iterable[Path] = (),
    ) -> list[DiscoveredItem]:
        """
        Scanne un repertoire et retourne la liste complete.

        Le parcours complet a lieu avant tout traitement, de sorte qu'une
        erreur de scan interrompt le lot avant le premier deplacement.
        """
        items = list(self.scan(root, exclude))
        logger.info(
            "Scan termine",
            root=str(root),
            files=len(items),
            with_code=sum(1 for item in items if item.has_code),
        )
        return items

    def _process_file(self, file_path: Path) -> DiscoveredItem:
        """
        Cree un DiscoveredItem a partir d'un chemin de fichier.

        Args:
            file_path: Chemin du fichier video

        Returns:
            DiscoveredItem avec le code extrait (eventuellement vide)
        """
        code = extract_code(file_path.name, self._rules.code_pattern)
        if not code:
            logger.debug("Aucun code dans le nom de fichier", filename=file_path.name)
        return DiscoveredItem(
            path=file_path.absolute(),
            filename=file_path.name,
            code=code,
        )


def _is_under(path: Path, directories: list[Path]) -> bool:
    """Verifie si un chemin se trouve sous l'un des repertoires donnes."""
    return any(directory == path or directory in path.parents for directory in directories)
