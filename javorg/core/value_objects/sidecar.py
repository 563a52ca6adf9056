"""
Objet valeur pour le fichier NFO (sidecar).

Le contenu du NFO est derive de facon deterministe d'un DetailRecord et
d'un code. Les champs que la source ne fournit pas (duree, studio,
realisateur) recoivent des valeurs fixes.
"""

from dataclasses import dataclass

from javorg.core.ports.metadata_service import DetailRecord
from javorg.utils.constants import (
    ACTOR_ROLE,
    DEFAULT_DIRECTOR,
    DEFAULT_RUNTIME,
    DEFAULT_STUDIO,
    FANART_FILENAME,
    POSTER_FILENAME,
)


@dataclass(frozen=True)
class SidecarActor:
    """Entree <actor> : nom et role."""

    name: str
    role: str = ACTOR_ROLE


@dataclass(frozen=True)
class MetadataSidecar:
    """
    Contenu du fichier NFO d'un element.

    Attributs :
        title : Titre
        original_title : Titre original (identique au titre)
        plot : Synopsis genere a partir du code, de la note et des votes
        runtime : Duree en minutes (valeur par defaut)
        year : Annee de publication ("" si inconnue)
        studio : Studio (valeur par defaut)
        director : Realisateur (valeur par defaut)
        genres : Genres, dans l'ordre des tags
        actors : Acteurs, dans l'ordre du casting
        poster : Reference de l'affiche
        fanart : Reference du fond d'ecran
        unique_id : Identifiant unique (le code)
    """

    title: str
    original_title: str
    plot: str
    runtime: str
    year: str
    studio: str
    director: str
    genres: tuple[str, ...]
    actors: tuple[SidecarActor, ...]
    poster: str
    fanart: str
    unique_id: str

    @staticmethod
    def synopsis(code: str, score: float, score_count: int) -> str:
        """Synopsis synthetique (ex: 'MIDA-180 - score 4.50 (10 votes)')."""
        return f"{code} - score {score:.2f} ({score_count} votes)"

    @classmethod
    def from_record(cls, record: DetailRecord, code: str) -> "MetadataSidecar":
        """
        Construit le sidecar d'un element.

        Args :
            record : Fiche complete retournee par le service
            code : Code de l'element (nom du dossier)

        Retourne :
            MetadataSidecar pret a etre serialise
        """
        year = str(record.pub_date.year) if record.pub_date else ""
        return cls(
            title=record.title,
            original_title=record.title,
            plot=cls.synopsis(code, record.score, record.score_count),
            runtime=DEFAULT_RUNTIME,
            year=year,
            studio=DEFAULT_STUDIO,
            director=DEFAULT_DIRECTOR,
            genres=tuple(record.tags),
            actors=tuple(SidecarActor(name=name) for name in record.cast),
            poster=POSTER_FILENAME,
            fanart=FANART_FILENAME,
            unique_id=code,
        )
