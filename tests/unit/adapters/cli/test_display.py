"""
Tests unitaires pour l'affichage de la progression et du resume.
"""

from pathlib import Path

from javorg.adapters.cli.display import build_summary, format_report
from javorg.core.entities.item import DiscoveredItem
from javorg.services.pipeline import (
    ItemReport,
    ItemStatus,
    PipelineResult,
    Stage,
    StageOutcome,
)


def _report(code: str, status: ItemStatus, filename: str = "video.mp4") -> ItemReport:
    item = DiscoveredItem(path=Path("/in") / filename, filename=filename, code=code)
    return ItemReport(item=item, status=status)


class TestFormatReport:
    """Tests pour format_report."""

    def test_organized_line_lists_stages(self) -> None:
        report = _report("MIDA-180", ItemStatus.ORGANIZED)
        for stage in Stage:
            report.record(stage, StageOutcome.SUCCEEDED)

        line = format_report(report)

        assert "OK" in line
        assert "MIDA-180" in line
        assert "relocate" in line

    def test_skipped_line_uses_filename_and_reason(self) -> None:
        report = _report("", ItemStatus.SKIPPED, filename="[site] holiday.mp4")
        report.record(Stage.RESOLVE, StageOutcome.SKIPPED, "Aucun code dans '[site] holiday.mp4'")

        line = format_report(report)

        assert "IGNORE" in line
        assert "\\[site] holiday.mp4" in line


class TestBuildSummary:
    """Tests pour build_summary."""

    def test_summary_counts(self) -> None:
        result = PipelineResult(reports=[
            _report("A-1", ItemStatus.ORGANIZED),
            _report("A-2", ItemStatus.PARTIAL),
            _report("", ItemStatus.SKIPPED),
            _report("A-4", ItemStatus.FAILED),
            _report("A-5", ItemStatus.ORGANIZED),
        ])

        table = build_summary(result)

        counts = list(table.columns[1].cells)
        assert counts == ["5", "2", "1", "1", "1"]
