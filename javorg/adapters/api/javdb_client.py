"""
Client JavDB pour la recherche et la recuperation des fiches.

Implemente l'interface IMetadataService. Les pages HTML sont recuperees
avec httpx (client synchrone, timeout fixe) et parsees par javdb_parser.
Les reponses 429 sont relancees avec backoff ; toute autre erreur de
transport, de statut ou de parsing devient MetadataServiceError.

Usage:
    with JavDBClient() as client:
        candidates = client.search("MIDA-180")
        record = client.fetch_detail(candidates[0].path)
"""

from typing import Optional

import httpx
from loguru import logger

from javorg.adapters.api.javdb_parser import parse_detail, parse_search_results
from javorg.adapters.api.retry import RateLimitError, request_with_retry
from javorg.core.exceptions import MetadataServiceError
from javorg.core.ports.metadata_service import Candidate, DetailRecord, IMetadataService
from javorg.utils.constants import (
    DEFAULT_HTTP_TIMEOUT,
    DEFAULT_JAVDB_URL,
    DEFAULT_USER_AGENT,
)


class JavDBClient(IMetadataService):
    """
    Client du site JavDB.

    Implemente IMetadataService avec:
    - Recherche plein texte (/search?q=<code>&f=all)
    - Recuperation d'une fiche par chemin de reference (<domaine><chemin>)
    - Retry automatique sur rate limiting (429)

    Example:
        client = JavDBClient(base_url="https://javdb.com", timeout=30.0)
        record = client.get("/v/abc12")
        client.close()
    """

    def __init__(
        self,
        base_url: str = DEFAULT_JAVDB_URL,
        user_agent: str = DEFAULT_USER_AGENT,
        timeout: float = DEFAULT_HTTP_TIMEOUT,
        max_attempts: int = 3,
    ) -> None:
        """
        Initialise le client JavDB.

        Args:
            base_url: Domaine du site (sans slash final)
            user_agent: User-Agent envoye avec chaque requete
            timeout: Timeout des requetes en secondes
            max_attempts: Tentatives maximum sur reponse 429
        """
        self._base_url = base_url.rstrip("/")
        self._user_agent = user_agent
        self._timeout = timeout
        self._max_attempts = max_attempts
        self._client: Optional[httpx.Client] = None

    def _get_client(self) -> httpx.Client:
        """
        Retourne le client HTTP, le cree si necessaire (lazy init).

        Returns:
            httpx.Client configure pour JavDB
        """
        if self._client is None or self._client.is_closed:
            self._client = httpx.Client(
                base_url=self._base_url,
                headers={
                    "User-Agent": self._user_agent,
                    "Accept-Language": "zh-TW,zh;q=0.9,en;q=0.8",
                },
                timeout=self._timeout,
                follow_redirects=True,
            )
        return self._client

    @property
    def source(self) -> str:
        """Retourne l'identifiant de la source."""
        return "javdb"

    @property
    def base_url(self) -> str:
        """Domaine interroge."""
        return self._base_url

    def url_for(self, path: str) -> str:
        """URL complete d'un chemin de reference (domaine + chemin)."""
        return f"{self._base_url}{path}"

    def _get_html(self, url: str, **kwargs) -> str:
        """
        Execute un GET et retourne le corps HTML.

        Raises:
            MetadataServiceError: Sur erreur de transport, statut ou 429 persistant
        """
        try:
            response = request_with_retry(
                self._get_client(), "GET", url, max_attempts=self._max_attempts, **kwargs
            )
        except RateLimitError as e:
            raise MetadataServiceError(f"Limite de requetes atteinte: {e}") from e
        except httpx.HTTPStatusError as e:
            raise MetadataServiceError(
                f"HTTP {e.response.status_code} pour {e.request.url}"
            ) from e
        except httpx.HTTPError as e:
            raise MetadataServiceError(f"Erreur reseau pour {url}: {e}") from e
        return response.text

    def search(self, query: str) -> list[Candidate]:
        """
        Recherche des candidats pour une requete.

        Args:
            query: Requete libre (typiquement un code)

        Returns:
            Liste de Candidate dans l'ordre de la page (vide si aucun)
        """
        logger.debug("Recherche JavDB", query=query)
        html = self._get_html("/search", params={"q": query, "f": "all"})
        results = parse_search_results(html)
        logger.debug("Resultats JavDB", query=query, count=len(results))
        return results

    def fetch_detail(self, path: str) -> DetailRecord:
        """
        Recupere la fiche complete d'un candidat.

        Args:
            path: Chemin de reference du candidat (ex: '/v/abc12')

        Returns:
            DetailRecord
        """
        return self.get(path)

    def get(self, path: str) -> DetailRecord:
        """
        Recupere une fiche en composant domaine + chemin.

        Args:
            path: Chemin de reference (ex: '/v/abc12')

        Returns:
            DetailRecord
        """
        logger.debug("Fiche JavDB", path=path)
        html = self._get_html(self.url_for(path))
        return parse_detail(html, path, self._base_url)

    def close(self) -> None:
        """Ferme le client HTTP (a appeler a la fin)."""
        if self._client is not None and not self._client.is_closed:
            self._client.close()

    def __enter__(self) -> "JavDBClient":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()
