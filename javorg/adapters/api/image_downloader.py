"""
Telechargement des images de couverture.

Implemente IImageDownloader avec httpx en mode streaming. Aucun retry :
un echec est definitif pour l'execution en cours. Un fichier partiellement
ecrit reste sur le disque.
"""

from pathlib import Path
from typing import Optional

import httpx
from loguru import logger

from javorg.core.exceptions import DownloadFailed
from javorg.core.ports.file_system import IImageDownloader
from javorg.utils.constants import (
    COPY_CHUNK_SIZE,
    DEFAULT_HTTP_TIMEOUT,
    DEFAULT_USER_AGENT,
)


class HttpImageDownloader(IImageDownloader):
    """
    Telechargeur d'images via HTTP.

    Example:
        downloader = HttpImageDownloader(referer="https://javdb.com/")
        downloader.download("https://c0.jdbstatic.com/covers/ab/abc12.jpg", Path("poster.jpg"))
    """

    def __init__(
        self,
        user_agent: str = DEFAULT_USER_AGENT,
        timeout: float = DEFAULT_HTTP_TIMEOUT,
        referer: Optional[str] = None,
    ) -> None:
        """
        Initialise le telechargeur.

        Args:
            user_agent: User-Agent envoye avec chaque requete
            timeout: Timeout des requetes en secondes
            referer: Header Referer (certains CDN l'exigent)
        """
        headers = {"User-Agent": user_agent}
        if referer:
            headers["Referer"] = referer
        self._headers = headers
        self._timeout = timeout
        self._client: Optional[httpx.Client] = None

    def _get_client(self) -> httpx.Client:
        """Retourne le client HTTP, le cree si necessaire (lazy init)."""
        if self._client is None or self._client.is_closed:
            self._client = httpx.Client(
                headers=self._headers,
                timeout=self._timeout,
                follow_redirects=True,
            )
        return self._client

    def download(self, url: str, destination: Path) -> Path:
        """
        Telecharge une URL vers un fichier.

        Args:
            url: URL de l'image
            destination: Fichier a ecrire (ecrase s'il existe)

        Returns:
            Le chemin ecrit

        Raises:
            DownloadFailed: URL invalide, statut non 2xx, transfert interrompu
                ou erreur d'ecriture
        """
        destination = Path(destination)
        try:
            with self._get_client().stream("GET", url) as response:
                if not response.is_success:
                    raise DownloadFailed(
                        url, f"HTTP {response.status_code}", status_code=response.status_code
                    )
                with open(destination, "wb") as f:
                    for chunk in response.iter_bytes(COPY_CHUNK_SIZE):
                        f.write(chunk)
        except httpx.InvalidURL as e:
            raise DownloadFailed(url, f"URL invalide: {e}") from e
        except httpx.HTTPError as e:
            raise DownloadFailed(url, f"transfert interrompu: {e}") from e
        except OSError as e:
            raise DownloadFailed(url, f"ecriture impossible: {e}") from e

        logger.debug("Image telechargee", url=url, destination=str(destination))
        return destination

    def close(self) -> None:
        """Ferme le client HTTP (a appeler a la fin)."""
        if self._client is not None and not self._client.is_closed:
            self._client.close()
