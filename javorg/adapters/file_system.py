"""
Adaptateur pour les operations sur le systeme de fichiers.

Implementation concrete de IFileSystem : parcours deterministe d'une
arborescence et deplacement atomique avec repli copie entre volumes.
"""

import os
import shutil
import uuid
from pathlib import Path
from typing import Iterator

from loguru import logger

from javorg.core.ports.file_system import IFileSystem
from javorg.utils.constants import COPY_CHUNK_SIZE


def _raise_walk_error(error: OSError) -> None:
    """Callback os.walk : propage les erreurs de parcours."""
    raise error


class FileSystemAdapter(IFileSystem):
    """
    Implementation de IFileSystem pour le systeme de fichiers reel.
    """

    def walk_files(self, root: Path) -> Iterator[Path]:
        """
        Liste les fichiers reguliers d'un repertoire (recursif).

        Les repertoires et les fichiers sont parcourus dans l'ordre
        alphabetique pour un resultat deterministe. Les symlinks sont
        ignores.

        Args:
            root: Repertoire a parcourir

        Yields:
            Chemins des fichiers reguliers

        Raises:
            OSError: Si un repertoire ne peut pas etre lu
        """
        for dirpath, dirnames, filenames in os.walk(root, onerror=_raise_walk_error):
            dirnames.sort()
            for filename in sorted(filenames):
                path = Path(dirpath) / filename
                if path.is_symlink() or not path.is_file():
                    continue
                yield path

    def atomic_move(self, source: Path, destination: Path) -> None:
        """
        Deplace un fichier de maniere atomique.

        Utilise os.replace pour un deplacement atomique sur le meme filesystem.
        Pour un deplacement cross-filesystem, copie vers un fichier temporaire
        du repertoire de destination, synchronise sur le disque, renomme
        atomiquement puis supprime la source.

        Args:
            source: Chemin du fichier source
            destination: Chemin de destination

        Raises:
            OSError: Si le deplacement echoue. La source est alors intacte.
        """
        destination.parent.mkdir(parents=True, exist_ok=True)

        # Tentative de rename atomique (fonctionne sur le meme filesystem)
        try:
            os.replace(source, destination)
            return
        except OSError as e:
            logger.debug(
                "Renommage impossible, repli sur copie: {}", e, source=str(source)
            )

        self._copy_then_delete(source, destination)

    def _copy_then_delete(self, source: Path, destination: Path) -> None:
        """
        Copie durable puis suppression de la source.

        La source n'est supprimee qu'une fois la destination complete,
        synchronisee et en place.
        """
        # Nom temporaire unique pour eviter les collisions
        temp = destination.with_name(f".tmp_{uuid.uuid4().hex}_{destination.name}")
        try:
            self.copy_durable(source, temp)
            os.replace(temp, destination)
        except Exception:
            # Nettoyer le fichier temporaire en cas d'erreur
            if temp.exists():
                temp.unlink()
            raise

        source.unlink()

    def copy_durable(self, source: Path, destination: Path) -> None:
        """
        Copie en flux un fichier puis force l'ecriture sur le disque.

        Args:
            source: Fichier a copier
            destination: Fichier a ecrire (ecrase)

        Raises:
            OSError: Si la lecture, l'ecriture ou la synchronisation echoue
        """
        with open(source, "rb") as src, open(destination, "wb") as dst:
            shutil.copyfileobj(src, dst, COPY_CHUNK_SIZE)
            dst.flush()
            os.fsync(dst.fileno())
        shutil.copystat(source, destination)
