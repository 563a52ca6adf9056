"""
Commande CLI principale : organisation des videos du repertoire d'entree.

Deux modes :
- par defaut, scanne le repertoire d'entree et range chaque video dans
  <sortie>/<CODE>/ avec son NFO et ses images
- avec --lookup, interroge JavDB pour un seul code et affiche la fiche en JSON
"""

import json
from pathlib import Path
from typing import Annotated, Optional

import typer
from loguru import logger

from javorg.adapters.cli.display import console, print_report, print_summary
from javorg.container import Container
from javorg.core.exceptions import MetadataError, ScanError
from javorg.logging_config import configure_logging, console_level
from javorg.services.pipeline import PipelineConfig


def organize(
    input_dir: Annotated[
        Optional[Path],
        typer.Option(
            "--input", "-i",
            help="Repertoire a scanner (defaut: input_dir de la config)",
        ),
    ] = None,
    output_dir: Annotated[
        Optional[Path],
        typer.Option(
            "--output", "-o",
            help="Repertoire de sortie (defaut: output_dir de la config)",
        ),
    ] = None,
    lookup: Annotated[
        Optional[str],
        typer.Option(
            "--lookup",
            help="Affiche la fiche JavDB d'un code puis quitte",
        ),
    ] = None,
    verbose: Annotated[
        int,
        typer.Option("--verbose", "-v", count=True, help="Augmenter la verbosite"),
    ] = 0,
    quiet: Annotated[
        bool,
        typer.Option("--quiet", "-q", help="Mode silencieux (erreurs uniquement)"),
    ] = False,
) -> None:
    """
    Range les videos identifiees par un code (ex: MIDA-180) dans un dossier par code.

    Exemples:
      javorg                          # Range ./ vers ./output
      javorg -i ~/Telechargements -o ~/Videos
      javorg --lookup MIDA-180        # Fiche JavDB en JSON
    """
    container = Container()
    config = container.config()

    configure_logging(
        log_level=console_level(verbose, quiet, default=config.log_level),
        log_file=Path(config.log_file),
        rotation_size=config.log_rotation_size,
        retention_count=config.log_retention_count,
    )

    try:
        if lookup is not None:
            _lookup(container, lookup)
            return
        _organize(
            container,
            input_dir if input_dir is not None else Path(config.input_dir),
            output_dir if output_dir is not None else Path(config.output_dir),
            quiet,
        )
    finally:
        container.metadata_service().close()
        container.image_downloader().close()


def _lookup(container: Container, code: str) -> None:
    """Affiche la fiche d'un code, code de sortie 1 si introuvable."""
    resolver = container.resolver()
    try:
        record = resolver.resolve_or_raise(code.strip().upper())
    except MetadataError as e:
        console.print(f"[red]Erreur:[/red] {e}", highlight=False)
        raise typer.Exit(1)

    typer.echo(json.dumps(record.to_dict(), ensure_ascii=False, indent=2))


def _organize(container: Container, input_dir: Path, output_dir: Path, quiet: bool) -> None:
    """Execute le pipeline et affiche la progression puis le resume."""
    pipeline = container.pipeline_service()
    config = PipelineConfig(input_dir=input_dir, output_dir=output_dir)

    logger.info("Demarrage", input_dir=str(input_dir), output_dir=str(output_dir))
    try:
        result = pipeline.run(config, on_item=None if quiet else print_report)
    except ScanError as e:
        console.print(f"[red]Erreur:[/red] {e}", highlight=False)
        raise typer.Exit(1)

    if not quiet:
        print_summary(result)
    console.print(f"{result.processed} element(s) traite(s)")
