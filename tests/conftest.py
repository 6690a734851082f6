from collections.abc import Generator
from datetime import UTC, datetime, timedelta
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from src.adapters.memory_store import InMemorySubmissionStore
from src.api.deps import Settings, get_rules, get_settings, get_store
from src.api.main import app
from src.rules.loader import load_rules
from src.rules.models import Rules

PROJECT_ROOT = Path(__file__).resolve().parents[1]


class FixedClock:
    """Deterministic clock; advance() moves it forward."""

    def __init__(self, at: datetime | None = None) -> None:
        self._at = at or datetime(2025, 1, 1, 12, 0, 0, tzinfo=UTC)

    def now(self) -> datetime:
        return self._at

    def advance(self, seconds: float) -> None:
        self._at = self._at + timedelta(seconds=seconds)


@pytest.fixture
def rules() -> Rules:
    """The project's real rules file."""
    return load_rules(PROJECT_ROOT / "rules.yaml")


@pytest.fixture
def clock() -> FixedClock:
    return FixedClock()


@pytest.fixture
def store(clock: FixedClock) -> InMemorySubmissionStore:
    """A fresh, isolated submission store."""
    return InMemorySubmissionStore(clock=clock)


@pytest.fixture
def build_dir(tmp_path: Path) -> Path:
    """A minimal front-end build."""
    build = tmp_path / "public"
    (build / "assets").mkdir(parents=True)
    (build / "index.html").write_text(
        '<!DOCTYPE html><html><body><div id="root"></div></body></html>',
        encoding="utf-8",
    )
    (build / "assets" / "app.js").write_text("console.log('app');", encoding="utf-8")
    return build


@pytest.fixture
def settings(build_dir: Path, monkeypatch: pytest.MonkeyPatch) -> Settings:
    monkeypatch.setenv("SECUREMDM_BUILD_DIR", str(build_dir))
    monkeypatch.setenv("SECUREMDM_RULES_PATH", str(PROJECT_ROOT / "rules.yaml"))
    return Settings()


@pytest.fixture
def client(
    store: InMemorySubmissionStore,
    rules: Rules,
    settings: Settings,
) -> Generator[TestClient, None, None]:
    """Create test client with dependency overrides."""
    app.dependency_overrides[get_store] = lambda: store
    app.dependency_overrides[get_rules] = lambda: rules
    app.dependency_overrides[get_settings] = lambda: settings

    yield TestClient(app)

    # Clean up overrides
    app.dependency_overrides.clear()


@pytest.fixture
def valid_contact() -> dict:
    return {
        "firstName": "Al",
        "lastName": "Lee",
        "email": "a@b.com",
        "company": "Ab",
        "subject": "General",
        "message": "1234567890",
        "privacyPolicy": True,
    }
