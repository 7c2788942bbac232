"""Tests for the Typer-based titles CLI."""
from __future__ import annotations

import importlib
import json
import sys
from pathlib import Path
from typing import Any, Iterator

import pytest
from fastapi.testclient import TestClient
from typer.testing import CliRunner

PROJECT_ROOT = Path(__file__).resolve().parents[2]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from backend.xtitles_api import create_app  # noqa: E402
from backend.xtitles_api.models import PictureRecord, TitleRecord  # noqa: E402
from backend.xtitles_api.schemas import IngestionReport  # noqa: E402
from backend.xtitles_api.services import IngestionError  # noqa: E402
from backend.xtitles_api.settings import TitlesSettings  # noqa: E402
from backend.xtitles_api.state import AppState  # noqa: E402
from backend.xtitles_cli import app as cli_app  # noqa: E402
from backend.xtitles_cli import client as client_module  # noqa: E402

cli_app_module = importlib.import_module("backend.xtitles_cli.app")


@pytest.fixture()
def runner() -> CliRunner:
    return CliRunner()


@pytest.fixture()
def cli_client(tmp_path: Path) -> Iterator[TestClient]:
    """Provide a TestClient and patch the CLI HTTP client factory."""

    settings = TitlesSettings(
        data_dir=str(tmp_path / "data"),
        pictures_folder=str(tmp_path / "titles"),
    )
    test_client = TestClient(create_app(settings=settings))

    original_factory = client_module.create_client
    original_app_factory = cli_app_module.create_client

    def _factory(base_url: str, *, timeout: float = 10.0, transport: Any = None):  # type: ignore[override]
        return test_client

    client_module.create_client = _factory  # type: ignore[assignment]
    cli_app_module.create_client = _factory  # type: ignore[assignment]

    yield test_client

    client_module.create_client = original_factory  # type: ignore[assignment]
    cli_app_module.create_client = original_app_factory  # type: ignore[assignment]


def _seed_titles(cli_client: TestClient) -> None:
    store = cli_client.app.state.app_state.title_store
    store.insert_batches(
        [
            TitleRecord(title_id="413607d9", name="Halo 3", systems=["XBOX360"]),
            TitleRecord(title_id="4d5307e6", name="Halo: Reach", systems=["XBOX360"]),
            TitleRecord(title_id="4d530877", name="Gears of War 3", systems=["XBOX360"]),
        ]
    )
    store.insert_batches([PictureRecord(title_id="413607d9", name="20452")])


def test_cli_health_command_outputs_status(runner: CliRunner, cli_client: TestClient) -> None:
    """The health command should display OK status."""

    result = runner.invoke(cli_app, ["health"])

    assert result.exit_code == 0
    assert "\"status\": \"ok\"" in result.output


def test_cli_titles_list_forwards_filters(runner: CliRunner, cli_client: TestClient) -> None:
    """titles list should pass paging and filter flags through to the API."""

    _seed_titles(cli_client)

    result = runner.invoke(
        cli_app, ["titles", "list", "--limit", "2", "--reverse"]
    )
    assert result.exit_code == 0
    payload = json.loads(result.output)
    assert payload["total"] == 3
    assert payload["pages"] == 2
    assert [item["title_id"] for item in payload["items"]] == ["4d530877", "4d5307e6"]

    filtered = runner.invoke(cli_app, ["titles", "list", "--only-with-pictures"])
    assert filtered.exit_code == 0
    filtered_payload = json.loads(filtered.output)
    assert filtered_payload["total"] == 1
    assert filtered_payload["items"][0]["pictures"][0]["name"] == "20452"


def test_cli_titles_show_outputs_title(runner: CliRunner, cli_client: TestClient) -> None:
    _seed_titles(cli_client)

    result = runner.invoke(cli_app, ["titles", "show", "413607D9"])

    assert result.exit_code == 0
    assert json.loads(result.output)["name"] == "Halo 3"


def test_cli_titles_show_fails_for_missing_title(runner: CliRunner, cli_client: TestClient) -> None:
    result = runner.invoke(cli_app, ["titles", "show", "deadbeef"])

    assert result.exit_code != 0


def test_cli_search_outputs_ranked_results(runner: CliRunner, cli_client: TestClient) -> None:
    _seed_titles(cli_client)

    result = runner.invoke(cli_app, ["search", "halo"])

    assert result.exit_code == 0
    payload = json.loads(result.output)
    assert [item["name"] for item in payload["items"]] == ["Halo 3", "Halo: Reach"]


def test_cli_stats_outputs_counts(runner: CliRunner, cli_client: TestClient) -> None:
    _seed_titles(cli_client)

    result = runner.invoke(cli_app, ["stats"])

    assert result.exit_code == 0
    assert json.loads(result.output) == {"titles": 3, "pictures": 1, "titles_with_pictures": 1}


def test_cli_ingest_prints_report(
    runner: CliRunner, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    """ingest should run against the configured store and print the report."""

    monkeypatch.setenv("XTITLES_DATA_DIR", str(tmp_path / "data"))
    monkeypatch.setattr(
        AppState, "ingest", lambda self: IngestionReport(titles=5, pictures=2)
    )

    result = runner.invoke(cli_app, ["ingest"])

    assert result.exit_code == 0
    assert json.loads(result.output) == {"titles": 5, "pictures": 2, "skipped": False}
    assert (tmp_path / "data" / "titles.db").exists()


def test_cli_ingest_exits_non_zero_on_failure(
    runner: CliRunner, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    monkeypatch.setenv("XTITLES_DATA_DIR", str(tmp_path / "data"))

    def _fail(self: AppState) -> IngestionReport:
        raise IngestionError("fetching titles failed: unexpected status 500")

    monkeypatch.setattr(AppState, "ingest", _fail)

    result = runner.invoke(cli_app, ["ingest"])

    assert result.exit_code == 1
    assert "Ingestion failed" in result.output
