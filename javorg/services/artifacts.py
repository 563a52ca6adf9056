"""
Service de generation des artefacts d'un element.

Deux operations independantes, l'echec de l'une n'empeche pas l'autre :
- Generation du fichier NFO (<CODE>.nfo) a partir de la fiche
- Acquisition des images (poster.jpg et fanart.jpg) depuis l'URL de couverture

Le NFO est serialise de facon deterministe : une meme fiche et un meme
code produisent toujours les memes octets.
"""

import xml.etree.ElementTree as ET
from pathlib import Path
from typing import Optional

from loguru import logger

from javorg.core.exceptions import DownloadFailed, NoCoverAvailable, SidecarWriteError
from javorg.core.ports.file_system import IImageDownloader
from javorg.core.ports.metadata_service import DetailRecord
from javorg.core.value_objects.sidecar import MetadataSidecar
from javorg.utils.constants import (
    FANART_FILENAME,
    NFO_EXTENSION,
    POSTER_FILENAME,
    UNIQUE_ID_TYPE,
    XML_DECLARATION,
)


def render_sidecar(sidecar: MetadataSidecar) -> bytes:
    """
    Serialise un sidecar en XML UTF-8 indente.

    Structure: movie > {title, originaltitle, plot, runtime, year, studio,
    director, genre*, actor{name,role}*, art>{poster,fanart}, uniqueid}

    Args:
        sidecar: Contenu du NFO

    Returns:
        Document XML complet, declaration incluse
    """
    root = ET.Element("movie")
    ET.SubElement(root, "title").text = sidecar.title
    ET.SubElement(root, "originaltitle").text = sidecar.original_title
    ET.SubElement(root, "plot").text = sidecar.plot
    ET.SubElement(root, "runtime").text = sidecar.runtime
    ET.SubElement(root, "year").text = sidecar.year
    ET.SubElement(root, "studio").text = sidecar.studio
    ET.SubElement(root, "director").text = sidecar.director

    for genre in sidecar.genres:
        ET.SubElement(root, "genre").text = genre

    for actor in sidecar.actors:
        actor_elem = ET.SubElement(root, "actor")
        ET.SubElement(actor_elem, "name").text = actor.name
        ET.SubElement(actor_elem, "role").text = actor.role

    art = ET.SubElement(root, "art")
    ET.SubElement(art, "poster").text = sidecar.poster
    ET.SubElement(art, "fanart").text = sidecar.fanart

    unique_id = ET.SubElement(root, "uniqueid", type=UNIQUE_ID_TYPE, default="true")
    unique_id.text = sidecar.unique_id

    ET.indent(root, space="  ")
    body = ET.tostring(root, encoding="unicode", short_empty_elements=False)
    return f"{XML_DECLARATION}\n{body}\n".encode("utf-8")


class ArtifactGenerator:
    """
    Genere le NFO et les images d'un element dans son dossier.

    Utilisation:
        generator = ArtifactGenerator(downloader)
        generator.write_sidecar(record, "MIDA-180", folder)
        generator.write_images(record, folder)
    """

    def __init__(self, downloader: IImageDownloader) -> None:
        """
        Initialise le generateur.

        Args:
            downloader: Implementation de IImageDownloader pour les images
        """
        self._downloader = downloader

    @staticmethod
    def sidecar_path(folder: Path, code: str) -> Path:
        """Chemin du NFO d'un element (<folder>/<CODE>.nfo)."""
        return Path(folder) / f"{code}{NFO_EXTENSION}"

    def build_sidecar(self, record: DetailRecord, code: str) -> MetadataSidecar:
        """Construit le contenu du NFO depuis la fiche."""
        return MetadataSidecar.from_record(record, code)

    def write_sidecar(self, record: DetailRecord, code: str, folder: Path) -> Path:
        """
        Ecrit le NFO de l'element, en ecrasant un fichier existant.

        Args:
            record: Fiche complete
            code: Code de l'element
            folder: Dossier de destination (deja cree)

        Returns:
            Chemin du NFO ecrit

        Raises:
            SidecarWriteError: Si l'ecriture echoue
        """
        path = self.sidecar_path(folder, code)
        content = render_sidecar(self.build_sidecar(record, code))
        try:
            path.write_bytes(content)
        except OSError as e:
            raise SidecarWriteError(path, str(e), code=code) from e

        logger.debug("NFO ecrit", code=code, path=str(path))
        return path

    def write_images(self, record: DetailRecord, folder: Path) -> tuple[Path, Path]:
        """
        Telecharge la couverture vers poster.jpg puis fanart.jpg.

        Chaque fichier fait l'objet de son propre telechargement, meme si
        le contenu est identique : la source ne fournit pas de fanart
        distinct. Les deux telechargements sont tentes meme si le premier
        echoue.

        Args:
            record: Fiche complete
            folder: Dossier de destination (deja cree)

        Returns:
            Tuple (chemin poster, chemin fanart)

        Raises:
            NoCoverAvailable: Si la fiche n'a pas d'URL de couverture
            DownloadFailed: Si l'un des telechargements echoue (le premier
                echec est propage)
        """
        if not record.cover_url:
            raise NoCoverAvailable(record.code)

        folder = Path(folder)
        poster = folder / POSTER_FILENAME
        fanart = folder / FANART_FILENAME

        first_error: Optional[DownloadFailed] = None
        for destination in (poster, fanart):
            try:
                self._downloader.download(record.cover_url, destination)
            except DownloadFailed as e:
                if e.code is None:
                    e.code = record.code
                logger.warning(
                    "Echec du telechargement: {}", e, code=record.code, file=destination.name
                )
                if first_error is None:
                    first_error = e

        if first_error is not None:
            raise first_error

        logger.debug("Images ecrites", code=record.code, folder=str(folder))
        return poster, fanart
