"""
Dataclasses et enums du pipeline d'organisation.
"""

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Optional

from javorg.core.entities.item import DiscoveredItem


class Stage(str, Enum):
    """Etapes du traitement d'un element, dans l'ordre."""

    RESOLVE = "resolve"
    FOLDER = "folder"
    SIDECAR = "sidecar"
    IMAGES = "images"
    RELOCATE = "relocate"


class StageOutcome(str, Enum):
    """Resultat d'une etape."""

    SUCCEEDED = "succeeded"
    FAILED = "failed"
    SKIPPED = "skipped"


class ItemStatus(str, Enum):
    """Statut global d'un element."""

    ORGANIZED = "organized"  # Dossier cree, toutes les etapes reussies
    PARTIAL = "partial"  # Dossier cree, au moins une etape en echec
    SKIPPED = "skipped"  # Pas de code, aucun resultat ou code different
    FAILED = "failed"  # Service en echec ou dossier impossible a creer


@dataclass
class PipelineConfig:
    """Configuration d'une execution du pipeline."""

    input_dir: Path = field(default_factory=lambda: Path("."))
    output_dir: Path = field(default_factory=lambda: Path("./output"))


@dataclass
class ItemReport:
    """
    Rapport de traitement d'un element.

    Attributs:
        item: Element decouvert par le scanner
        status: Statut global
        stages: Resultat de chaque etape atteinte
        errors: Message d'erreur par etape en echec (ou raison de l'abandon)
        destination: Dossier de l'element (si cree)
    """

    item: DiscoveredItem
    status: ItemStatus = ItemStatus.SKIPPED
    stages: dict[Stage, StageOutcome] = field(default_factory=dict)
    errors: dict[Stage, str] = field(default_factory=dict)
    destination: Optional[Path] = None

    @property
    def code(self) -> str:
        """Code de l'element."""
        return self.item.code

    def succeeded(self, stage: Stage) -> bool:
        """Indique si une etape a reussi."""
        return self.stages.get(stage) == StageOutcome.SUCCEEDED

    def record(self, stage: Stage, outcome: StageOutcome, error: Optional[str] = None) -> None:
        """Enregistre le resultat d'une etape."""
        self.stages[stage] = outcome
        if error is not None:
            self.errors[stage] = error


@dataclass
class PipelineResult:
    """Resultat final du pipeline."""

    reports: list[ItemReport] = field(default_factory=list)

    @property
    def processed(self) -> int:
        """Nombre total d'elements traites."""
        return len(self.reports)

    def _count(self, status: ItemStatus) -> int:
        return sum(1 for report in self.reports if report.status == status)

    @property
    def organized(self) -> int:
        """Nombre d'elements ranges sans erreur."""
        return self._count(ItemStatus.ORGANIZED)

    @property
    def partial(self) -> int:
        """Nombre d'elements ranges avec au moins une etape en echec."""
        return self._count(ItemStatus.PARTIAL)

    @property
    def skipped(self) -> int:
        """Nombre d'elements ignores."""
        return self._count(ItemStatus.SKIPPED)

    @property
    def failed(self) -> int:
        """Nombre d'elements en echec."""
        return self._count(ItemStatus.FAILED)
