"""Interface en ligne de commande (typer + rich)."""

from .commands import organize

__all__ = ["organize"]
