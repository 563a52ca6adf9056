"""
Affichage Rich de la progression et du resume du pipeline.
"""

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from javorg.services.pipeline import (
    ItemReport,
    ItemStatus,
    PipelineResult,
    Stage,
    StageOutcome,
)

console = Console()

_STATUS_STYLE = {
    ItemStatus.ORGANIZED: ("green", "OK"),
    ItemStatus.PARTIAL: ("yellow", "PARTIEL"),
    ItemStatus.SKIPPED: ("dim", "IGNORE"),
    ItemStatus.FAILED: ("red", "ECHEC"),
}

_OUTCOME_MARK = {
    StageOutcome.SUCCEEDED: "[green]✓[/green]",
    StageOutcome.FAILED: "[red]✗[/red]",
    StageOutcome.SKIPPED: "[dim]-[/dim]",
}


def format_report(report: ItemReport) -> str:
    """
    Ligne de progression d'un element.

    Exemple: "OK      MIDA-180  resolve ✓ folder ✓ sidecar ✓ images ✓ relocate ✓"
    """
    color, label = _STATUS_STYLE[report.status]
    name = escape(report.code or report.item.filename)
    stages = " ".join(
        f"{stage.value} {_OUTCOME_MARK[report.stages[stage]]}"
        for stage in Stage
        if stage in report.stages
    )
    line = f"[{color}]{label:<8}[/{color}] [bold]{name}[/bold]  {stages}"
    if report.status == ItemStatus.SKIPPED and report.errors:
        line += f"  [dim]({escape(next(iter(report.errors.values())))})[/dim]"
    return line


def print_report(report: ItemReport) -> None:
    """Affiche la ligne de progression d'un element."""
    console.print(format_report(report), highlight=False)


def build_summary(result: PipelineResult) -> Table:
    """Tableau recapitulatif du pipeline."""
    table = Table(title="Resume", show_header=False)
    table.add_column("Statut")
    table.add_column("Nombre", justify="right")
    table.add_row("Traites", str(result.processed))
    table.add_row("[green]Ranges[/green]", str(result.organized))
    table.add_row("[yellow]Partiels[/yellow]", str(result.partial))
    table.add_row("[dim]Ignores[/dim]", str(result.skipped))
    table.add_row("[red]Echecs[/red]", str(result.failed))
    return table


def print_summary(result: PipelineResult) -> None:
    """Affiche le resume final, erreurs par element incluses."""
    console.print()
    console.print(build_summary(result))

    failures = [
        report for report in result.reports
        if report.status in (ItemStatus.PARTIAL, ItemStatus.FAILED)
    ]
    for report in failures:
        for stage, message in report.errors.items():
            console.print(
                f"  [red]{escape(report.code or report.item.filename)}[/red] "
                f"[dim]{stage.value}:[/dim] {escape(message)}",
                highlight=False,
            )
