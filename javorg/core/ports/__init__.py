"""
Ports (interfaces abstraites) definissant les contrats pour les adaptateurs.

Les ports sont les frontieres de l'architecture hexagonale. Ils definissent
ce dont le domaine a besoin du monde exterieur sans specifier comment.

Ports service de metadonnees :
- IMetadataService : recherche + fiche complete
- Candidate : resultat de recherche partiel
- DetailRecord : fiche complete

Ports systeme de fichiers :
- IFileSystem : parcours et deplacement
- IImageDownloader : telechargement d'images
"""

from javorg.core.ports.file_system import IFileSystem, IImageDownloader
from javorg.core.ports.metadata_service import (
    Candidate,
    DetailRecord,
    IMetadataService,
)

__all__ = [
    # Service de metadonnees
    "IMetadataService",
    "Candidate",
    "DetailRecord",
    # Systeme de fichiers
    "IFileSystem",
    "IImageDownloader",
]
