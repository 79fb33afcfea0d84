# ABOUTME: End-to-end tests for the shelfscan scan and models CLI commands.
# ABOUTME: Patches the vision and catalog factories so no model server or network is needed.

from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest
from click.testing import CliRunner

from shelfscan.cli import cli
from shelfscan.identify.types import CandidateRecord, ExtractedRecord
from shelfscan.vision.ollama import VisionError

ORWELL = CandidateRecord(title="1984", author="George Orwell", isbn="9780451524935")


@pytest.fixture
def photo(tmp_path: Path) -> Path:
    path = tmp_path / "cover.jpg"
    path.write_bytes(b"\xff\xd8\xff fake jpeg")
    return path


def _vision_client(
    extracted: ExtractedRecord | None = None, error: Exception | None = None
) -> MagicMock:
    client = MagicMock()
    client.enabled = True
    if error is not None:
        client.analyze_image.side_effect = error
    else:
        client.analyze_image.return_value = extracted
    return client


class TestScanCli:
    """End-to-end tests for `shelfscan scan`."""

    def test_scan_identifies_and_adds(self, photo: Path, db_path: Path, fake_search) -> None:
        vision = _vision_client(ExtractedRecord(title="1984", author="George Orwell"))
        search = fake_search({'"1984" "George Orwell"': [ORWELL]})

        with (
            patch("shelfscan.cli.commands.scan_cmd._create_vision_client", return_value=vision),
            patch(
                "shelfscan.cli.commands.identify_cmd._create_catalog_search",
                return_value=search,
            ),
        ):
            result = CliRunner().invoke(
                cli,
                ["scan", str(photo), "-m", "llava:13b", "--ollama", "--db", str(db_path)],
                input="1\n",
            )

        assert result.exit_code == 0, result.output
        assert "Read from image" in result.output
        assert "Added to library" in result.output
        vision.analyze_image.assert_called_once_with(photo.read_bytes(), "llava:13b")

    def test_vision_error_exits_nonzero(self, photo: Path, db_path: Path) -> None:
        vision = _vision_client(error=VisionError("Could not parse book information"))
        with patch("shelfscan.cli.commands.scan_cmd._create_vision_client", return_value=vision):
            result = CliRunner().invoke(
                cli, ["scan", str(photo), "-m", "llava:13b", "--db", str(db_path)]
            )

        assert result.exit_code == 1
        assert "Could not parse book information" in result.output

    def test_disabled_vision_exits_nonzero(self, photo: Path, db_path: Path) -> None:
        vision = _vision_client()
        vision.enabled = False
        with patch("shelfscan.cli.commands.scan_cmd._create_vision_client", return_value=vision):
            result = CliRunner().invoke(
                cli, ["scan", str(photo), "-m", "llava:13b", "--db", str(db_path)]
            )

        assert result.exit_code == 1
        assert "disabled" in result.output
        vision.analyze_image.assert_not_called()

    def test_rejects_non_image_file(self, tmp_path: Path, db_path: Path) -> None:
        notes = tmp_path / "notes.txt"
        notes.write_text("not a photo")
        result = CliRunner().invoke(
            cli, ["scan", str(notes), "-m", "llava:13b", "--ollama", "--db", str(db_path)]
        )
        assert result.exit_code == 1
        assert "not an image file" in result.output

    def test_enabled_from_environment(self, photo: Path, db_path: Path) -> None:
        with patch("shelfscan.cli.commands.scan_cmd._create_vision_client") as factory:
            factory.return_value = _vision_client(error=VisionError("boom"))
            CliRunner().invoke(
                cli,
                ["scan", str(photo), "-m", "llava:13b", "--db", str(db_path)],
                env={"OLLAMA_ENABLED": "true", "OLLAMA_API_URL": "http://gpu-box:11434"},
            )

        factory.assert_called_once()
        assert factory.call_args.args[1:] == ("http://gpu-box:11434", True)


class TestModelsCli:
    """End-to-end tests for `shelfscan models`."""

    def test_lists_vision_models(self) -> None:
        client = MagicMock()
        client.is_available.return_value = True
        client.list_models.return_value = ["llava:13b", "qwen2.5vl:7b"]
        with patch("shelfscan.cli.commands.models_cmd._create_vision_client", return_value=client):
            result = CliRunner().invoke(cli, ["models", "--ollama"])

        assert result.exit_code == 0
        assert "llava:13b" in result.output
        assert "qwen2.5vl:7b" in result.output

    def test_unavailable_server(self) -> None:
        client = MagicMock()
        client.is_available.return_value = False
        with patch("shelfscan.cli.commands.models_cmd._create_vision_client", return_value=client):
            result = CliRunner().invoke(cli, ["models"])

        assert result.exit_code == 1
        assert "not available" in result.output


class TestHttpClientLifecycle:
    """The commands close the HTTP clients they create."""

    def test_scan_closes_vision_http_client(self, photo: Path, db_path: Path) -> None:
        vision = _vision_client(error=VisionError("boom"))
        with (
            patch("shelfscan.cli.commands.scan_cmd._create_vision_http_client") as http_factory,
            patch("shelfscan.cli.commands.scan_cmd._create_vision_client", return_value=vision),
        ):
            result = CliRunner().invoke(
                cli, ["scan", str(photo), "-m", "llava:13b", "--db", str(db_path)]
            )

        assert result.exit_code == 1
        http_factory.return_value.close.assert_called_once()

    def test_models_closes_vision_http_client(self) -> None:
        client = MagicMock()
        client.is_available.return_value = False
        with (
            patch("shelfscan.cli.commands.models_cmd._create_vision_http_client") as http_factory,
            patch("shelfscan.cli.commands.models_cmd._create_vision_client", return_value=client),
        ):
            CliRunner().invoke(cli, ["models"])

        http_factory.return_value.close.assert_called_once()
