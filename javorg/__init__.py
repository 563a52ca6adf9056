"""
JavOrg - Organisation d'une videotheque a partir des codes de fichiers.

Ce package scanne un repertoire de videos, extrait le code identifiant de
chaque nom de fichier, recupere les metadonnees correspondantes (JavDB) et
range chaque fichier dans un dossier dedie avec un fichier NFO et ses images.

Architecture : Hexagonale (Ports et Adaptateurs)
- core/ : Couche domaine (entites, ports, objets valeur, exceptions)
- services/ : Couche application (extraction, scan, resolution, artefacts, pipeline)
- adapters/ : Couche infrastructure (CLI, client JavDB, telechargement, fichiers)
"""

__version__ = "0.1.0"
