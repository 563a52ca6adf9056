"""
Tests unitaires pour ScannerService.

Le parcours est simule par un mock de IFileSystem ; seuls la racine et
les exclusions reposent sur de vrais repertoires temporaires.
"""

from pathlib import Path
from unittest.mock import MagicMock

import pytest

from javorg.adapters.file_system import FileSystemAdapter
from javorg.core.exceptions import ScanError
from javorg.core.value_objects.scan_rules import ScanRules
from javorg.services.scanner import ScannerService


class TestScannerFiltering:
    """Tests pour le filtrage des fichiers par le scanner."""

    def test_scan_keeps_only_video_extensions(
        self, tmp_path: Path, mock_file_system: MagicMock
    ) -> None:
        """Les fichiers dont l'extension n'est pas video sont ignores."""
        mock_file_system.walk_files.return_value = iter([
            tmp_path / "MIDA-180.mp4",
            tmp_path / "MIDA-180.nfo",
            tmp_path / "cover.jpg",
            tmp_path / "ABC-123.MKV",
        ])
        scanner = ScannerService(mock_file_system)

        items = scanner.scan_all(tmp_path)

        assert [item.filename for item in items] == ["MIDA-180.mp4", "ABC-123.MKV"]

    def test_scan_extracts_codes(self, tmp_path: Path, mock_file_system: MagicMock) -> None:
        """Chaque element porte le code extrait de son nom, en majuscules."""
        mock_file_system.walk_files.return_value = iter([
            tmp_path / "mida-180_hd.mp4",
            tmp_path / "holiday.mp4",
        ])
        scanner = ScannerService(mock_file_system)

        items = scanner.scan_all(tmp_path)

        assert items[0].code == "MIDA-180"
        assert items[0].has_code
        assert items[1].code == ""
        assert not items[1].has_code

    def test_scan_keeps_walk_order(self, tmp_path: Path, mock_file_system: MagicMock) -> None:
        """L'ordre du parcours est conserve."""
        paths = [tmp_path / name for name in ("b-2.mp4", "a-1.mp4", "c-3.mp4")]
        mock_file_system.walk_files.return_value = iter(paths)

        items = ScannerService(mock_file_system).scan_all(tmp_path)

        assert [item.path for item in items] == [p.absolute() for p in paths]

    def test_scan_uses_injected_rules(self, tmp_path: Path, mock_file_system: MagicMock) -> None:
        """Les regles injectees remplacent extensions et motif par defaut."""
        mock_file_system.walk_files.return_value = iter([
            tmp_path / "fc2-ppv-1234.ts",
            tmp_path / "MIDA-180.mp4",
        ])
        rules = ScanRules.build([".ts"], r"FC2-PPV-\d+")

        items = ScannerService(mock_file_system, rules=rules).scan_all(tmp_path)

        assert len(items) == 1
        assert items[0].code == "FC2-PPV-1234"

    def test_scan_excludes_output_directory(
        self, tmp_path: Path, mock_file_system: MagicMock
    ) -> None:
        """Les fichiers situes sous un repertoire exclu sont ignores."""
        output_dir = tmp_path / "output"
        mock_file_system.walk_files.return_value = iter([
            tmp_path / "MIDA-180.mp4",
            output_dir / "ABC-123" / "ABC-123.mp4",
        ])

        items = ScannerService(mock_file_system).scan_all(tmp_path, exclude=[output_dir])

        assert [item.code for item in items] == ["MIDA-180"]


class TestScannerWithFileSystem:
    """Tests du scanner sur une vraie arborescence."""

    def test_directory_with_video_name_is_not_an_item(self, tmp_path: Path) -> None:
        """Seuls les fichiers reguliers deviennent des elements."""
        folder = tmp_path / "ABC-123.mp4"
        folder.mkdir()
        (folder / "inner.mkv").write_bytes(b"video")

        items = ScannerService(FileSystemAdapter()).scan_all(tmp_path)

        assert [item.path for item in items] == [(folder / "inner.mkv").absolute()]
        assert items[0].filename == "inner.mkv"
        assert not items[0].has_code


class TestScannerErrors:
    """Tests pour les erreurs de scan."""

    def test_missing_root_raises_scan_error(
        self, tmp_path: Path, mock_file_system: MagicMock
    ) -> None:
        scanner = ScannerService(mock_file_system)

        with pytest.raises(ScanError) as exc_info:
            scanner.scan_all(tmp_path / "absent")

        assert exc_info.value.path == tmp_path / "absent"
        mock_file_system.walk_files.assert_not_called()

    def test_file_root_raises_scan_error(
        self, tmp_path: Path, mock_file_system: MagicMock
    ) -> None:
        file_root = tmp_path / "video.mp4"
        file_root.touch()

        with pytest.raises(ScanError):
            ScannerService(mock_file_system).scan_all(file_root)

    def test_walk_error_becomes_scan_error(
        self, tmp_path: Path, mock_file_system: MagicMock
    ) -> None:
        """Une erreur pendant le parcours interrompt le scan."""

        def failing_walk(root: Path):
            yield tmp_path / "MIDA-180.mp4"
            raise PermissionError("acces refuse")

        mock_file_system.walk_files.side_effect = failing_walk

        with pytest.raises(ScanError) as exc_info:
            ScannerService(mock_file_system).scan_all(tmp_path)

        assert "acces refuse" in str(exc_info.value)
