"""
Fixtures pytest partagees pour les tests javorg.

Ce module contient les fixtures communes utilisees dans les tests:
- Double du service de metadonnees (FakeMetadataService)
- Mocks des interfaces (IFileSystem, IImageDownloader)
- Settings de test avec chemins temporaires
"""

from pathlib import Path
from unittest.mock import MagicMock

import pytest

from javorg.config import Settings
from javorg.core.ports.file_system import IFileSystem, IImageDownloader
from javorg.core.ports.metadata_service import DetailRecord
from tests.fixtures.metadata import FakeMetadataService, make_record


@pytest.fixture
def fake_service() -> FakeMetadataService:
    """Service de metadonnees vide, a alimenter dans chaque test."""
    return FakeMetadataService()


@pytest.fixture
def sample_record() -> DetailRecord:
    """Fiche complete pour MIDA-180."""
    return make_record()


@pytest.fixture
def mock_file_system() -> MagicMock:
    """
    Mock de IFileSystem pour les tests.

    walk_files ne retourne rien par defaut, atomic_move reussit.
    """
    mock = MagicMock(spec=IFileSystem)
    mock.walk_files.return_value = iter(())
    mock.atomic_move.return_value = None
    return mock


@pytest.fixture
def mock_downloader() -> MagicMock:
    """
    Mock de IImageDownloader qui ecrit un contenu factice.

    Le fichier destination est reellement cree pour que les tests puissent
    verifier sa presence.
    """
    mock = MagicMock(spec=IImageDownloader)

    def fake_download(url: str, destination: Path) -> Path:
        Path(destination).write_bytes(b"\xff\xd8\xff image")
        return Path(destination)

    mock.download.side_effect = fake_download
    return mock


@pytest.fixture
def test_settings(tmp_path: Path) -> Settings:
    """
    Settings de test avec chemins temporaires.

    Utilise tmp_path de pytest pour isoler chaque test.
    """
    input_dir = tmp_path / "input"
    input_dir.mkdir()
    return Settings(
        input_dir=input_dir,
        output_dir=tmp_path / "output",
        log_file=tmp_path / "logs" / "javorg.log",
    )
