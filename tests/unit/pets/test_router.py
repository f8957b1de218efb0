from __future__ import annotations

import json
from pathlib import Path

import httpx
import pytest

from pawfetch.common import AppDirectories
from pawfetch.decoding import KeyDecodingStrategy
from pawfetch.pets import BIRDS, CATS, DOGS, build_pets_controller
from pawfetch.sources import LocalSourceConfig, RemoteSourceConfig

CATS_PAYLOAD = [
    {
        "identifier": "c1",
        "breed": "Persian",
        "size": {"height_in_centimeters": 30, "weight_in_kilograms": 5, "description": "Medium"},
    },
    {
        "identifier": "c2",
        "breed": "Sphynx",
        "size": {"height_in_centimeters": 25, "weight_in_kilograms": 4, "description": "Small"},
    },
]


@pytest.fixture
def directories(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> AppDirectories:
    monkeypatch.setenv("XDG_DATA_HOME", str(tmp_path / "xdg-data"))
    return AppDirectories()


def _preferences(tmp_path: Path) -> dict:
    return json.loads((tmp_path / "xdg-data" / "pawfetch" / "favorites" / "preferences.json").read_text())


def test_local_source_renders_pets_and_saves_favorite(tmp_path: Path, directories: AppDirectories) -> None:
    (tmp_path / "cats.json").write_text(json.dumps(CATS_PAYLOAD))
    lines: list[str] = []

    controller = build_pets_controller(
        CATS,
        LocalSourceConfig(path=tmp_path / "cats.json"),
        directories=directories,
        render=lines.append,
    )
    controller.add_favorite(1)

    assert lines == ["0. Persian (Medium)", "1. Sphynx (Small)"]
    assert _preferences(tmp_path) == {"favorite-cats-c2": CATS_PAYLOAD[1]}


def test_remote_source_decodes_camel_case_keys(tmp_path: Path, directories: AppDirectories) -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        assert str(request.url) == "https://pets.example.com/api/birds"
        return httpx.Response(200, json=[{"id": "b1", "breed": "Kiwi", "size": "small", "canFly": False}])

    lines: list[str] = []
    with httpx.Client(transport=httpx.MockTransport(handler)) as client:
        controller = build_pets_controller(
            BIRDS,
            RemoteSourceConfig(host="https://pets.example.com/api"),
            directories=directories,
            key_strategy=KeyDecodingStrategy.CONVERT_FROM_CAMEL_CASE,
            client=client,
            render=lines.append,
        )
    controller.add_favorite(0)

    assert lines == ["0. Kiwi (small, flightless)"]
    assert _preferences(tmp_path) == {"favorite-birds-b1": {"id": "b1", "breed": "Kiwi", "size": "small", "can_fly": False}}


def test_missing_data_renders_same_error_for_every_source(tmp_path: Path, directories: AppDirectories) -> None:
    errors: list[str] = []
    with httpx.Client(transport=httpx.MockTransport(lambda _: httpx.Response(204))) as client:
        remote = build_pets_controller(
            DOGS,
            RemoteSourceConfig(host="https://pets.example.com"),
            directories=directories,
            client=client,
            render=lambda _: None,
            render_error=errors.append,
        )
    local = build_pets_controller(
        DOGS,
        LocalSourceConfig(path=tmp_path / "missing.json"),
        directories=directories,
        render=lambda _: None,
        render_error=errors.append,
    )

    assert type(remote.error) is type(local.error)
    assert errors == ["An error occurred while fetching the data."] * 2


def test_remote_source_without_client_is_rejected(directories: AppDirectories) -> None:
    with pytest.raises(ValueError, match="needs an httpx.Client"):
        build_pets_controller(DOGS, RemoteSourceConfig(host="https://pets.example.com"), directories=directories)
