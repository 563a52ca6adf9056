"""
Interfaces ports pour le systeme de fichiers et le telechargement.

Interfaces abstraites (ports) definissant les contrats pour les operations
fichiers du scanner et du relocateur, ainsi que pour la recuperation
d'images distantes.
"""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Iterator


class IFileSystem(ABC):
    """
    Interface pour les operations sur les fichiers.

    Definit le parcours d'un repertoire et le deplacement d'un fichier.
    """

    @abstractmethod
    def walk_files(self, root: Path) -> Iterator[Path]:
        """
        Parcourt recursivement les fichiers reguliers d'un repertoire.

        L'ordre est deterministe pour un meme contenu. Les repertoires
        ne sont jamais retournes.

        Args :
            root : Repertoire racine

        Retourne :
            Iterateur sur les chemins des fichiers

        Leve :
            OSError : Si le parcours lui-meme echoue (racine illisible)
        """
        ...

    @abstractmethod
    def atomic_move(self, source: Path, destination: Path) -> None:
        """
        Deplace un fichier, avec repli copie + suppression entre volumes.

        La source n'est supprimee que si la copie est complete et
        synchronisee sur le disque. Une destination existante est ecrasee.

        Args :
            source : Chemin actuel du fichier
            destination : Chemin cible du fichier

        Leve :
            OSError : Si le renommage et la copie echouent
        """
        ...


class IImageDownloader(ABC):
    """
    Interface pour le telechargement d'une image vers un fichier local.
    """

    @abstractmethod
    def download(self, url: str, destination: Path) -> Path:
        """
        Telecharge une URL vers un fichier (ecrase s'il existe).

        Un fichier partiellement ecrit reste sur le disque en cas d'echec.

        Args :
            url : URL de l'image
            destination : Chemin du fichier a ecrire

        Retourne :
            Le chemin ecrit

        Leve :
            DownloadFailed : Statut HTTP non 2xx, transfert interrompu
                ou erreur d'ecriture
        """
        ...
