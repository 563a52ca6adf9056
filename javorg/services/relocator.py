"""
Service de deplacement des fichiers video vers leur dossier final.

Ce module fournit le deplacement d'un fichier video vers sa destination
avec:
- Renommage atomique quand source et destination sont sur le meme volume
- Repli copie + synchronisation disque + suppression de la source sinon
- Ecrasement silencieux d'une destination existante
"""

from pathlib import Path
from typing import Optional

from loguru import logger

from javorg.core.entities.item import DiscoveredItem
from javorg.core.exceptions import RelocationFailed
from javorg.core.ports.file_system import IFileSystem


class RelocatorService:
    """
    Service de deplacement des fichiers video.

    La seule situation interdite est la perte de l'unique copie du fichier :
    la source n'est supprimee qu'apres un renommage reussi ou une copie
    complete et synchronisee.

    Utilisation:
        relocator = RelocatorService(file_system)
        final_path = relocator.relocate_item(item, folder)
    """

    def __init__(self, file_system: IFileSystem) -> None:
        """
        Initialise le service de deplacement.

        Args:
            file_system: Adaptateur systeme de fichiers avec atomic_move
        """
        self._fs = file_system

    @staticmethod
    def destination_for(item: DiscoveredItem, folder: Path) -> Path:
        """Chemin final du fichier video : <folder>/<CODE><extension d'origine>."""
        return Path(folder) / f"{item.code}{item.extension}"

    def relocate(
        self,
        source: Path,
        destination: Path,
        code: Optional[str] = None,
    ) -> Path:
        """
        Deplace un fichier vers sa destination.

        Args:
            source: Chemin du fichier source
            destination: Chemin cible
            code: Code de l'element (pour le rapport d'erreur)

        Returns:
            Le chemin de destination

        Raises:
            RelocationFailed: Si le renommage et la copie echouent
        """
        source = Path(source)
        destination = Path(destination)

        try:
            self._fs.atomic_move(source, destination)
        except OSError as e:
            raise RelocationFailed(source, destination, str(e), code=code) from e

        logger.debug("Fichier deplace", source=str(source), destination=str(destination))
        return destination

    def relocate_item(self, item: DiscoveredItem, folder: Path) -> Path:
        """
        Deplace le fichier d'un element dans son dossier, renomme d'apres le code.

        Args:
            item: Element decouvert par le scanner
            folder: Dossier de l'element (deja cree)

        Returns:
            Chemin final du fichier video
        """
        return self.relocate(item.path, self.destination_for(item, folder), code=item.code)
