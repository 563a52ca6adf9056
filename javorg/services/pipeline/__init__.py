"""
Pipeline d'organisation : scan -> resolution -> artefacts -> deplacement.

Exports :
- PipelineService : orchestrateur
- PipelineConfig, PipelineResult, ItemReport : configuration et rapports
- Stage, StageOutcome, ItemStatus : etapes et statuts
"""

from .dataclasses import (
    ItemReport,
    ItemStatus,
    PipelineConfig,
    PipelineResult,
    Stage,
    StageOutcome,
)
from .pipeline_service import PipelineService

__all__ = [
    "PipelineService",
    "PipelineConfig",
    "PipelineResult",
    "ItemReport",
    "ItemStatus",
    "Stage",
    "StageOutcome",
]
