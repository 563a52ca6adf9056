"""
Service de resolution des metadonnees d'un code.

Protocole en deux etapes contre le service externe :
1. Recherche du code en texte libre (candidats partiels)
2. Verification du premier candidat puis recuperation de sa fiche complete

Seul le premier candidat est considere et son code doit etre strictement
egal au code recherche : un premier resultat sans rapport ne doit jamais
conduire a ranger un fichier sous un mauvais titre.

Le resultat est un variant etiquete (Resolved, Skipped, Failed) afin que
le pipeline traite chaque cas explicitement.
"""

from dataclasses import dataclass
from typing import Union

from loguru import logger

from javorg.core.exceptions import (
    CodeAbsent,
    MetadataServiceError,
    Mismatch,
    NotFound,
)
from javorg.core.ports.metadata_service import DetailRecord, IMetadataService


@dataclass(frozen=True)
class Resolved:
    """La fiche complete a ete recuperee."""

    record: DetailRecord


@dataclass(frozen=True)
class Skipped:
    """L'element est ignore (pas de code, aucun resultat, code different)."""

    reason: Union[CodeAbsent, NotFound, Mismatch]


@dataclass(frozen=True)
class Failed:
    """Le service a echoue (transport ou parsing)."""

    error: MetadataServiceError


ResolveOutcome = Union[Resolved, Skipped, Failed]


class MetadataResolver:
    """
    Resout un code en DetailRecord via un IMetadataService.

    Utilisation:
        resolver = MetadataResolver(service)
        outcome = resolver.resolve("MIDA-180")
        if isinstance(outcome, Resolved):
            print(outcome.record.title)
    """

    def __init__(self, service: IMetadataService) -> None:
        """
        Initialise le resolveur.

        Args:
            service: Service de metadonnees (JavDB ou double de test)
        """
        self._service = service

    def resolve_or_raise(self, code: str) -> DetailRecord:
        """
        Resout un code, en levant une exception en cas d'echec.

        Args:
            code: Code en majuscules

        Returns:
            DetailRecord du premier candidat

        Raises:
            NotFound: Aucun candidat
            Mismatch: Le premier candidat porte un autre code
            MetadataServiceError: Erreur du service
        """
        candidates = self._service.search(code)
        if not candidates:
            raise NotFound(code)

        first = candidates[0]
        if first.code != code:
            raise Mismatch(code, first.code)

        logger.debug("Candidat retenu", code=code, path=first.path)
        return self._service.fetch_detail(first.path)

    def resolve(self, code: str) -> ResolveOutcome:
        """
        Resout un code sans jamais lever d'exception du domaine.

        Args:
            code: Code en majuscules ("" si absent du nom de fichier)

        Returns:
            Resolved, Skipped ou Failed
        """
        if not code:
            return Skipped(CodeAbsent(""))

        try:
            return Resolved(self.resolve_or_raise(code))
        except (NotFound, Mismatch) as e:
            logger.info("Pas de metadonnees: {}", e, code=code)
            return Skipped(e)
        except MetadataServiceError as e:
            if e.code is None:
                e.code = code
            logger.error("Echec du service de metadonnees: {}", e, code=code)
            return Failed(e)
