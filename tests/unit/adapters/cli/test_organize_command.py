"""
Tests unitaires pour la commande CLI d'organisation.

Tests couvrant:
- Execution du pipeline avec les options --input/--output
- Code de sortie 1 sur erreur de scan
- Mode --lookup (fiche JSON, code de sortie sur erreur)
"""

import json
from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest
from dependency_injector import providers
from loguru import logger
from typer.testing import CliRunner

from javorg.adapters.api.image_downloader import HttpImageDownloader
from javorg.container import Container
from javorg.main import app
from tests.fixtures.metadata import FakeMetadataService, make_record

runner = CliRunner()


@pytest.fixture(autouse=True)
def isolated_env(tmp_path: Path, monkeypatch):
    """Logs dans tmp_path et handlers loguru retires apres chaque test."""
    monkeypatch.setenv("JAVORG_LOG_FILE", str(tmp_path / "logs" / "javorg.log"))
    yield
    logger.remove()


@pytest.fixture
def downloader() -> MagicMock:
    mock = MagicMock(spec=HttpImageDownloader)

    def fake_download(url: str, destination: Path) -> Path:
        Path(destination).write_bytes(b"image")
        return Path(destination)

    mock.download.side_effect = fake_download
    return mock


@pytest.fixture
def container(fake_service: FakeMetadataService, downloader: MagicMock):
    """Container reel avec le service de metadonnees et les images substitues."""
    instance = Container()
    instance.metadata_service.override(providers.Object(fake_service))
    instance.image_downloader.override(providers.Object(downloader))
    with patch("javorg.adapters.cli.commands.Container", return_value=instance):
        yield instance


class TestOrganizeCommand:
    """Tests pour l'execution du pipeline."""

    def test_organizes_input_directory(
        self,
        container: Container,
        fake_service: FakeMetadataService,
        tmp_path: Path,
    ) -> None:
        fake_service.add(make_record())
        input_dir = tmp_path / "in"
        input_dir.mkdir()
        (input_dir / "mida-180.mp4").write_bytes(b"video")
        (input_dir / "holiday.mp4").write_bytes(b"video")
        output_dir = tmp_path / "out"

        result = runner.invoke(app, ["-i", str(input_dir), "-o", str(output_dir)])

        assert result.exit_code == 0, result.output
        assert (output_dir / "MIDA-180" / "MIDA-180.mp4").exists()
        assert (output_dir / "MIDA-180" / "MIDA-180.nfo").exists()
        assert (input_dir / "holiday.mp4").exists()
        assert "2 element(s) traite(s)" in result.output
        assert fake_service.closed

    def test_per_item_failures_keep_exit_code_zero(
        self,
        container: Container,
        fake_service: FakeMetadataService,
        tmp_path: Path,
    ) -> None:
        fake_service.failing.add("MIDA-180")
        input_dir = tmp_path / "in"
        input_dir.mkdir()
        (input_dir / "MIDA-180.mp4").write_bytes(b"video")

        result = runner.invoke(app, ["-i", str(input_dir), "-o", str(tmp_path / "out")])

        assert result.exit_code == 0
        assert "ECHEC" in result.output

    def test_missing_input_exits_with_error(self, container: Container, tmp_path: Path) -> None:
        result = runner.invoke(
            app, ["-i", str(tmp_path / "absent"), "-o", str(tmp_path / "out")]
        )

        assert result.exit_code == 1
        assert "Erreur" in result.output

    def test_defaults_come_from_settings(
        self,
        fake_service: FakeMetadataService,
        downloader: MagicMock,
        tmp_path: Path,
        monkeypatch,
    ) -> None:
        """Sans options, les repertoires configures sont utilises."""
        input_dir = tmp_path / "configured"
        input_dir.mkdir()
        (input_dir / "MIDA-180.mkv").write_bytes(b"video")
        fake_service.add(make_record())
        monkeypatch.setenv("JAVORG_INPUT_DIR", str(input_dir))
        monkeypatch.setenv("JAVORG_OUTPUT_DIR", str(input_dir / "output"))

        instance = Container()
        instance.metadata_service.override(providers.Object(fake_service))
        instance.image_downloader.override(providers.Object(downloader))
        with patch("javorg.adapters.cli.commands.Container", return_value=instance):
            result = runner.invoke(app, [])

        assert result.exit_code == 0, result.output
        assert (input_dir / "output" / "MIDA-180" / "MIDA-180.mkv").exists()


class TestLookupOption:
    """Tests pour --lookup."""

    def test_lookup_prints_json(
        self, container: Container, fake_service: FakeMetadataService
    ) -> None:
        fake_service.add(make_record())

        result = runner.invoke(app, ["--lookup", "mida-180"])

        assert result.exit_code == 0, result.output
        payload = json.loads(result.stdout)
        assert payload["code"] == "MIDA-180"
        assert payload["pub_date"] == "2024-05-17"
        assert payload["cast"] == ["Actrice Une", "Actrice Deux"]

    def test_lookup_not_found_exits_with_error(self, container: Container) -> None:
        result = runner.invoke(app, ["--lookup", "ZZZ-000"])

        assert result.exit_code == 1
        assert "ZZZ-000" in result.output

    def test_lookup_mismatch_exits_with_error(
        self, container: Container, fake_service: FakeMetadataService
    ) -> None:
        fake_service.add(make_record(code="MIDA-18"), query="MIDA-181")

        result = runner.invoke(app, ["--lookup", "MIDA-181"])

        assert result.exit_code == 1
