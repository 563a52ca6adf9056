"""
Point d'entree CLI de javorg.

Monte la commande d'organisation sur l'application typer.
"""

import typer

from .adapters.cli.commands import organize

app = typer.Typer(
    name="javorg",
    help="Rangement de videos identifiees par un code JavDB",
    add_completion=False,
)

app.command()(organize)


def main() -> None:
    """Point d'entree du script javorg."""
    app()


if __name__ == "__main__":
    main()
