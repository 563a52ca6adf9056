"""
Interface port pour le service de metadonnees.

Interface abstraite (port) definissant le contrat du service externe
interroge pour chaque code. L'implementation concrete (JavDB) est fournie
par adapters/api/javdb_client.py, les tests utilisent un double.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import date
from typing import Any, Optional


@dataclass(frozen=True)
class Candidate:
    """
    Resultat de recherche leger retourne par le service.

    La recherche ne fournit que des enregistrements partiels : seul
    l'acces direct par `path` retourne la fiche complete.

    Attributs :
        code : Code de l'element (ex: "MIDA-180")
        path : Chemin de reference sur le service (ex: "/v/abc12")
        title : Titre affiche dans la liste de resultats
    """

    code: str
    path: str
    title: str = ""


@dataclass(frozen=True)
class DetailRecord:
    """
    Fiche complete d'un element.

    Attributs :
        path : Chemin de reference sur le service
        code : Code de l'element
        title : Titre
        tags : Genres, dans l'ordre du service
        cast : Noms des actrices, dans l'ordre du service
        score : Note moyenne
        score_count : Nombre de votes
        pub_date : Date de publication (None si inconnue)
        cover_url : URL de l'image de couverture (None si absente)
    """

    path: str
    code: str
    title: str
    tags: tuple[str, ...] = ()
    cast: tuple[str, ...] = ()
    score: float = 0.0
    score_count: int = 0
    pub_date: Optional[date] = None
    cover_url: Optional[str] = None

    def to_dict(self) -> dict[str, Any]:
        """Representation serialisable en JSON."""
        return {
            "path": self.path,
            "code": self.code,
            "title": self.title,
            "tags": list(self.tags),
            "cast": list(self.cast),
            "score": self.score,
            "score_count": self.score_count,
            "pub_date": self.pub_date.isoformat() if self.pub_date else None,
            "cover_url": self.cover_url,
        }


class IMetadataService(ABC):
    """
    Interface du service de metadonnees.

    Deux operations : une recherche plein texte retournant des candidats
    partiels, et la recuperation de la fiche complete d'un candidat.
    Les deux levent MetadataServiceError en cas d'echec de transport ou
    de parsing.
    """

    @abstractmethod
    def search(self, query: str) -> list[Candidate]:
        """
        Recherche des candidats pour une requete libre.

        Args :
            query : Requete (typiquement un code)

        Retourne :
            Candidats dans l'ordre du service (liste vide si aucun)
        """
        ...

    @abstractmethod
    def fetch_detail(self, path: str) -> DetailRecord:
        """
        Recupere la fiche complete a partir du chemin d'un candidat.

        Args :
            path : Chemin de reference du candidat

        Retourne :
            DetailRecord complet
        """
        ...

    @property
    @abstractmethod
    def source(self) -> str:
        """Retourne l'identifiant de la source (ex: 'javdb')."""
        ...
