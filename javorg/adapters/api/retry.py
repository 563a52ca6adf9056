"""
Mecanisme de retry avec backoff exponentiel pour le service de metadonnees.

Gere automatiquement les erreurs 429 (rate limiting) en relancant
les requetes apres le delai annonce par le header Retry-After (borne par
max_wait), ou a defaut avec un delai croissant et du jitter aleatoire.
Aucune autre erreur n'est relancee.

Usage:
    # Avec le decorateur
    @with_retry(max_attempts=5, max_wait=60)
    def my_api_call():
        ...

    # Avec la fonction helper
    response = request_with_retry(client, "GET", url)
"""

from typing import Callable, Optional

import httpx
from tenacity import (
    RetryCallState,
    retry,
    retry_if_exception_type,
    stop_after_attempt,
    wait_random_exponential,
)


class RateLimitError(Exception):
    """
    Exception levee quand le service retourne 429 Too Many Requests.

    Attributes:
        retry_after: Nombre de secondes a attendre (depuis le header Retry-After),
                     ou None si non specifie.
    """

    def __init__(self, retry_after: Optional[int] = None) -> None:
        """
        Initialise l'erreur avec la valeur Retry-After optionnelle.

        Args:
            retry_after: Secondes a attendre avant de relancer (optionnel)
        """
        self.retry_after = retry_after
        super().__init__(f"Rate limited. Retry after: {retry_after}s")


def wait_for_rate_limit(max_wait: int = 60) -> Callable[[RetryCallState], float]:
    """
    Strategie d'attente tenacity qui respecte le header Retry-After.

    Args:
        max_wait: Delai maximum en secondes

    Returns:
        Fonction calculant le delai avant la prochaine tentative
    """
    backoff = wait_random_exponential(multiplier=1, min=1, max=max_wait)

    def wait(retry_state: RetryCallState) -> float:
        error = retry_state.outcome.exception() if retry_state.outcome else None
        if isinstance(error, RateLimitError) and error.retry_after is not None:
            return float(min(max(error.retry_after, 0), max_wait))
        return backoff(retry_state)

    return wait


def with_retry(max_attempts: int = 5, max_wait: int = 60):
    """
    Decorateur pour relancer sur RateLimitError.

    Le delai suit Retry-After quand le service le fournit, sinon un backoff
    exponentiel avec jitter.

    Args:
        max_attempts: Nombre maximum de tentatives (defaut: 5)
        max_wait: Delai maximum entre les tentatives en secondes (defaut: 60)

    Returns:
        Decorateur a appliquer sur une fonction
    """
    return retry(
        retry=retry_if_exception_type(RateLimitError),
        wait=wait_for_rate_limit(max_wait),
        stop=stop_after_attempt(max_attempts),
        reraise=True,
    )


def _parse_retry_after(value: Optional[str]) -> Optional[int]:
    """Lit le header Retry-After (secondes), None si absent ou non numerique."""
    if not value:
        return None
    try:
        return int(value)
    except ValueError:
        return None


def request_with_retry(
    client: httpx.Client,
    method: str,
    url: str,
    max_attempts: int = 5,
    max_wait: int = 60,
    **kwargs,
) -> httpx.Response:
    """
    Execute une requete HTTP avec retry automatique sur 429.

    Convertit les reponses 429 en RateLimitError et relance avec
    backoff exponentiel. Les autres erreurs HTTP (4xx, 5xx) sont
    propagees immediatement sans retry.

    Args:
        client: Client httpx a utiliser
        method: Methode HTTP (GET, POST, etc.)
        url: URL a appeler
        max_attempts: Nombre maximum de tentatives (defaut: 5)
        max_wait: Delai maximum entre les tentatives en secondes (defaut: 60)
        **kwargs: Arguments supplementaires passes a client.request()

    Returns:
        httpx.Response en cas de succes

    Raises:
        RateLimitError: Si 429 apres epuisement des tentatives
        httpx.HTTPStatusError: Pour les autres erreurs HTTP
    """

    @with_retry(max_attempts=max_attempts, max_wait=max_wait)
    def _do_request() -> httpx.Response:
        response = client.request(method, url, **kwargs)
        if response.status_code == 429:
            raise RateLimitError(_parse_retry_after(response.headers.get("Retry-After")))
        response.raise_for_status()
        return response

    return _do_request()
