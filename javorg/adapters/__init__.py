"""
Couche adaptateurs (infrastructure).

Les adaptateurs implementent les ports definis dans core/ports/ :
- api/ : client JavDB, telechargement d'images, retry HTTP
- cli/ : interface ligne de commande (Typer + Rich)
- file_system : parcours et deplacement de fichiers

Chaque adaptateur depend de core/ mais core/ ne depend jamais des adaptateurs.
"""

from javorg.adapters.file_system import FileSystemAdapter

__all__ = [
    "FileSystemAdapter",
]
