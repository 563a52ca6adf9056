"""
Extraction du code identifiant depuis un nom de fichier.

Le code est la premiere sous-chaine de la forme lettres-tiret-chiffres
(ex: "mida-180" dans "mida-180_hd.mp4"), retournee en majuscules.
"""

import re
from typing import Optional

from javorg.core.value_objects.scan_rules import compile_code_pattern
from javorg.utils.constants import CODE_PATTERN

_DEFAULT_PATTERN = compile_code_pattern(CODE_PATTERN)


def extract_code(filename: str, pattern: Optional[re.Pattern] = None) -> str:
    """
    Extrait le code d'un nom de fichier.

    Fonction pure et totale : ne leve jamais d'exception, l'absence de code
    est representee par une chaine vide.

    Args:
        filename: Nom du fichier (sans le chemin)
        pattern: Motif compile (defaut: CODE_PATTERN, insensible a la casse)

    Returns:
        Le code en majuscules, ou "" si aucun code n'est trouve

    Example:
        >>> extract_code("[site] abc-123 1080p.mkv")
        'ABC-123'
    """
    match = (pattern or _DEFAULT_PATTERN).search(filename)
    if match is None:
        return ""
    return match.group(0).upper()
