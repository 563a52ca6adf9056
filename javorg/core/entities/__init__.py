"""
Entites metier.

- DiscoveredItem : fichier video decouvert par le scanner
"""

from javorg.core.entities.item import DiscoveredItem

__all__ = ["DiscoveredItem"]
