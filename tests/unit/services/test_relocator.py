"""
Tests unitaires pour RelocatorService.
"""

import errno
from pathlib import Path
from unittest.mock import MagicMock

import pytest

from javorg.core.entities.item import DiscoveredItem
from javorg.core.exceptions import RelocationFailed
from javorg.services.relocator import RelocatorService


@pytest.fixture
def item(tmp_path: Path) -> DiscoveredItem:
    return DiscoveredItem(
        path=tmp_path / "input" / "[site] mida-180 hd.MP4",
        filename="[site] mida-180 hd.MP4",
        code="MIDA-180",
    )


class TestDestination:
    """Tests pour le calcul du chemin final."""

    def test_destination_uses_code_and_original_extension(
        self, tmp_path: Path, item: DiscoveredItem
    ) -> None:
        folder = tmp_path / "output" / "MIDA-180"
        assert RelocatorService.destination_for(item, folder) == folder / "MIDA-180.MP4"


class TestRelocate:
    """Tests pour relocate et relocate_item."""

    def test_relocate_item_delegates_to_atomic_move(
        self, tmp_path: Path, item: DiscoveredItem, mock_file_system: MagicMock
    ) -> None:
        folder = tmp_path / "output" / "MIDA-180"

        result = RelocatorService(mock_file_system).relocate_item(item, folder)

        assert result == folder / "MIDA-180.MP4"
        mock_file_system.atomic_move.assert_called_once_with(item.path, folder / "MIDA-180.MP4")

    def test_os_error_becomes_relocation_failed(
        self, tmp_path: Path, item: DiscoveredItem, mock_file_system: MagicMock
    ) -> None:
        mock_file_system.atomic_move.side_effect = OSError(errno.ENOSPC, "No space left")

        with pytest.raises(RelocationFailed) as exc_info:
            RelocatorService(mock_file_system).relocate_item(item, tmp_path / "MIDA-180")

        error = exc_info.value
        assert error.code == "MIDA-180"
        assert error.source == item.path
        assert error.destination == tmp_path / "MIDA-180" / "MIDA-180.MP4"
        assert isinstance(error.__cause__, OSError)
