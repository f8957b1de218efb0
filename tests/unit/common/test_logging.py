from __future__ import annotations

import json
from collections.abc import Iterator
from pathlib import Path

import pytest
from loguru import logger

from pawfetch.common import (
    AppDirectories,
    AppInfo,
    LoggingConfig,
    create_logger,
    disable_library_logging,
    setup_cli_logging,
)


@pytest.fixture
def data_home(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Iterator[Path]:
    monkeypatch.setenv("XDG_DATA_HOME", str(tmp_path / "xdg-data"))
    yield tmp_path / "xdg-data"
    logger.remove()
    disable_library_logging()


def test_cli_logging_writes_scoped_text_lines(data_home: Path) -> None:
    handler_id = setup_cli_logging(AppInfo(environment="test"), LoggingConfig(log_level="DEBUG"), AppDirectories())

    create_logger("fetching").info("No data found", location="cats.json")
    logger.remove(handler_id)

    lines = (data_home / "pawfetch" / "logs" / "pawfetch.log").read_text().splitlines()
    assert any("| fetching |" in line and "No data found" in line for line in lines)


def test_cli_logging_respects_level(data_home: Path) -> None:
    handler_id = setup_cli_logging(AppInfo(environment="test"), LoggingConfig(log_level="WARNING"), AppDirectories())

    create_logger("pets.service").info("Favorite saved", key="favorite-cats-c1")
    logger.remove(handler_id)

    log_file = data_home / "pawfetch" / "logs" / "pawfetch.log"
    assert "Favorite saved" not in log_file.read_text()


def test_cli_logging_json_format_to_custom_file(data_home: Path, tmp_path: Path) -> None:
    log_file = tmp_path / "custom" / "pawfetch.jsonl"
    config = LoggingConfig(log_level="INFO", format="json", log_file=str(log_file))
    handler_id = setup_cli_logging(AppInfo(environment="test"), config, AppDirectories())

    create_logger("datastore.file").info("Preference saved", key="favorite-dogs-1")
    logger.remove(handler_id)

    records = [json.loads(line)["record"] for line in log_file.read_text().splitlines()]
    saved = [record for record in records if record["message"] == "Preference saved"]
    assert saved[0]["extra"]["scope"] == "datastore.file"
    assert saved[0]["extra"]["key"] == "favorite-dogs-1"
