"""
Service d'orchestration du pipeline d'organisation.

Ce service coordonne, pour chaque fichier decouvert, strictement l'un
apres l'autre :
- La resolution des metadonnees (recherche, verification, fiche)
- La creation du dossier de l'element
- L'ecriture du NFO
- Le telechargement des images
- Le deplacement du fichier video

L'echec d'une etape est consigne dans le rapport de l'element et le
traitement continue avec l'etape suivante, puis avec l'element suivant.
Seule une erreur de scan interrompt le lot.
"""

from pathlib import Path
from typing import Callable, Optional

from loguru import logger

from javorg.core.entities.item import DiscoveredItem
from javorg.core.exceptions import (
    CodeAbsent,
    DownloadFailed,
    NoCoverAvailable,
    RelocationFailed,
    ScanError,
    SidecarWriteError,
)
from javorg.core.ports.metadata_service import DetailRecord
from javorg.services.artifacts import ArtifactGenerator
from javorg.services.relocator import RelocatorService
from javorg.services.resolver import Failed, MetadataResolver, Resolved, Skipped
from javorg.services.scanner import ScannerService

from .dataclasses import (
    ItemReport,
    ItemStatus,
    PipelineConfig,
    PipelineResult,
    Stage,
    StageOutcome,
)

ItemCallback = Callable[[ItemReport], None]


class PipelineService:
    """
    Service d'orchestration du pipeline.

    Utilisation typique:
        pipeline = PipelineService(scanner, resolver, artifacts, relocator)
        result = pipeline.run(PipelineConfig(input_dir=Path("."), output_dir=Path("out")))
        print(f"{result.processed} element(s) traite(s)")
    """

    def __init__(
        self,
        scanner: ScannerService,
        resolver: MetadataResolver,
        artifacts: ArtifactGenerator,
        relocator: RelocatorService,
    ) -> None:
        """
        Initialise le pipeline.

        Args:
            scanner: Service de scan du repertoire d'entree
            resolver: Resolveur de metadonnees
            artifacts: Generateur du NFO et des images
            relocator: Service de deplacement des videos
        """
        self._scanner = scanner
        self._resolver = resolver
        self._artifacts = artifacts
        self._relocator = relocator

    def run(
        self,
        config: PipelineConfig,
        on_item: Optional[ItemCallback] = None,
    ) -> PipelineResult:
        """
        Execute le pipeline sur le repertoire d'entree.

        Args:
            config: Repertoires d'entree et de sortie
            on_item: Appele avec le rapport de chaque element des qu'il est traite

        Returns:
            PipelineResult avec un rapport par fichier video decouvert

        Raises:
            ScanError: Si le repertoire de sortie ne peut pas etre cree ou si
                le repertoire d'entree ne peut pas etre parcouru
        """
        output_dir = Path(config.output_dir)
        try:
            output_dir.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise ScanError(output_dir, f"creation du repertoire de sortie impossible: {e}") from e

        items = self._scanner.scan_all(config.input_dir, exclude=[output_dir])

        result = PipelineResult()
        for item in items:
            report = self._process_safely(item, output_dir)
            result.reports.append(report)
            if on_item is not None:
                on_item(report)

        logger.info(
            "Pipeline termine",
            processed=result.processed,
            organized=result.organized,
            partial=result.partial,
            skipped=result.skipped,
            failed=result.failed,
        )
        return result

    def _process_safely(self, item: DiscoveredItem, output_dir: Path) -> ItemReport:
        """
        Traite un element sans jamais interrompre le lot.

        Une erreur inattendue est consignee sur la premiere etape non
        atteinte, les etapes deja enregistrees sont conservees.
        """
        report = ItemReport(item=item)
        try:
            return self.process_item(item, output_dir, report)
        except Exception as e:
            logger.exception(f"Erreur inattendue sur {item.filename}")
            stage = next((s for s in Stage if s not in report.stages), Stage.RELOCATE)
            report.record(stage, StageOutcome.FAILED, str(e))
            report.status = ItemStatus.FAILED
            return report

    def process_item(
        self,
        item: DiscoveredItem,
        output_dir: Path,
        report: Optional[ItemReport] = None,
    ) -> ItemReport:
        """
        Traite un element : resolution, dossier, NFO, images, deplacement.

        Args:
            item: Element decouvert par le scanner
            output_dir: Repertoire de sortie (deja cree)
            report: Rapport a completer (un nouveau rapport par defaut)

        Returns:
            ItemReport de l'element
        """
        if report is None:
            report = ItemReport(item=item)

        record = self._resolve(item, report)
        if record is None:
            return report

        folder = Path(output_dir) / item.code
        try:
            folder.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            logger.error("Creation du dossier impossible: {}", e, code=item.code)
            report.record(Stage.FOLDER, StageOutcome.FAILED, str(e))
            report.status = ItemStatus.FAILED
            return report
        report.record(Stage.FOLDER, StageOutcome.SUCCEEDED)
        report.destination = folder

        self._write_sidecar(item, record, folder, report)
        self._write_images(item, record, folder, report)
        self._relocate(item, folder, report)

        all_ok = all(
            outcome == StageOutcome.SUCCEEDED for outcome in report.stages.values()
        )
        report.status = ItemStatus.ORGANIZED if all_ok else ItemStatus.PARTIAL
        return report

    def _resolve(self, item: DiscoveredItem, report: ItemReport) -> Optional[DetailRecord]:
        """Resout les metadonnees, ou consigne l'abandon dans le rapport."""
        if not item.has_code:
            logger.debug("Element ignore, pas de code", filename=item.filename)
            report.record(Stage.RESOLVE, StageOutcome.SKIPPED, str(CodeAbsent(item.filename)))
            report.status = ItemStatus.SKIPPED
            return None

        outcome = self._resolver.resolve(item.code)

        if isinstance(outcome, Resolved):
            report.record(Stage.RESOLVE, StageOutcome.SUCCEEDED)
            return outcome.record

        if isinstance(outcome, Skipped):
            report.record(Stage.RESOLVE, StageOutcome.SKIPPED, str(outcome.reason))
            report.status = ItemStatus.SKIPPED
            return None

        if isinstance(outcome, Failed):
            report.record(Stage.RESOLVE, StageOutcome.FAILED, str(outcome.error))
            report.status = ItemStatus.FAILED
            return None

        raise TypeError(f"Resultat de resolution inattendu: {outcome!r}")

    def _write_sidecar(
        self,
        item: DiscoveredItem,
        record: DetailRecord,
        folder: Path,
        report: ItemReport,
    ) -> None:
        """Ecrit le NFO, l'echec est consigne sans interrompre l'element."""
        try:
            self._artifacts.write_sidecar(record, item.code, folder)
        except SidecarWriteError as e:
            logger.error("NFO non ecrit: {}", e, code=item.code, stage=Stage.SIDECAR.value)
            report.record(Stage.SIDECAR, StageOutcome.FAILED, str(e))
            return
        except Exception as e:
            logger.exception(f"Erreur inattendue (NFO) sur {item.code}")
            report.record(Stage.SIDECAR, StageOutcome.FAILED, str(e))
            return
        report.record(Stage.SIDECAR, StageOutcome.SUCCEEDED)

    def _write_images(
        self,
        item: DiscoveredItem,
        record: DetailRecord,
        folder: Path,
        report: ItemReport,
    ) -> None:
        """Telecharge les images, l'echec est consigne sans interrompre l'element."""
        try:
            self._artifacts.write_images(record, folder)
        except NoCoverAvailable as e:
            logger.warning("Images absentes: {}", e, code=item.code, stage=Stage.IMAGES.value)
            report.record(Stage.IMAGES, StageOutcome.FAILED, str(e))
            return
        except DownloadFailed as e:
            logger.error("Images non ecrites: {}", e, code=item.code, stage=Stage.IMAGES.value)
            report.record(Stage.IMAGES, StageOutcome.FAILED, str(e))
            return
        except Exception as e:
            logger.exception(f"Erreur inattendue (images) sur {item.code}")
            report.record(Stage.IMAGES, StageOutcome.FAILED, str(e))
            return
        report.record(Stage.IMAGES, StageOutcome.SUCCEEDED)

    def _relocate(self, item: DiscoveredItem, folder: Path, report: ItemReport) -> None:
        """Deplace la video, l'echec est consigne (la source reste en place)."""
        try:
            self._relocator.relocate_item(item, folder)
        except RelocationFailed as e:
            logger.error("Video non deplacee: {}", e, code=item.code, stage=Stage.RELOCATE.value)
            report.record(Stage.RELOCATE, StageOutcome.FAILED, str(e))
            return
        except Exception as e:
            logger.exception(f"Erreur inattendue (deplacement) sur {item.code}")
            report.record(Stage.RELOCATE, StageOutcome.FAILED, str(e))
            return
        report.record(Stage.RELOCATE, StageOutcome.SUCCEEDED)
