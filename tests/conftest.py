from __future__ import annotations

import json
from collections.abc import Callable, Iterator
from pathlib import Path

import pytest

from fred_api_client.client import FredClient
from fred_api_client.config import FredClientConfig
from tests.shared.client_fakes import RecordingTransport

FIXTURE_DIR = Path(__file__).resolve().parent / "fixtures" / "fred_api"

FixtureLoader = Callable[[str], dict[str, object]]


@pytest.fixture(scope="session")
def fixture_dir() -> Path:
    return FIXTURE_DIR


@pytest.fixture(scope="session")
def fixture_loader(fixture_dir: Path) -> FixtureLoader:
    """Load a recorded FRED response by file name, with or without ``.json``."""

    def _load(name: str) -> dict[str, object]:
        path = fixture_dir / (name if name.endswith(".json") else f"{name}.json")
        if not path.is_file():
            known = sorted(p.name for p in fixture_dir.glob("*.json"))
            pytest.fail(f"unknown fixture {name!r}; recorded: {known}")
        payload = json.loads(path.read_text(encoding="utf-8"))
        assert isinstance(payload, dict), f"{path.name} is not a JSON object"
        return payload

    return _load


@pytest.fixture
def no_api_key_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("FRED_API_KEY", raising=False)


@pytest.fixture
def recording_transport() -> RecordingTransport:
    return RecordingTransport()


@pytest.fixture
def offline_client(recording_transport: RecordingTransport) -> Iterator[FredClient]:
    """Client over ``recording_transport`` with the startup request disabled."""

    client = FredClient(
        FredClientConfig(probe_on_init=False),
        api_key="k",
        transport=recording_transport,
    )
    yield client
    client.close()
