"""
Objets valeur immutables du domaine.

Exports :
- ScanRules : extensions acceptees et motif de code
- MetadataSidecar, SidecarActor : contenu du fichier NFO
"""

from javorg.core.value_objects.scan_rules import ScanRules
from javorg.core.value_objects.sidecar import MetadataSidecar, SidecarActor

__all__ = [
    "ScanRules",
    "MetadataSidecar",
    "SidecarActor",
]
