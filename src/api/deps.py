import os
from functools import lru_cache
from pathlib import Path

from src.adapters.clock import SystemClock
from src.adapters.memory_store import InMemorySubmissionStore
from src.adapters.render.shell_renderer import NoScriptShellRenderer
from src.components.submissions.ports import SubmissionStorePort
from src.ports.clock import ClockPort
from src.ports.renderer import ShellRendererPort
from src.rules.loader import load_rules
from src.rules.models import Rules

PROJECT_ROOT = Path(__file__).resolve().parents[2]


# --- Settings ---
class Settings:
    def __init__(self) -> None:
        self.base_dir = Path(os.getcwd())
        self.env = os.environ.get("SECUREMDM_ENV", "development")
        self.rules_path = Path(
            os.environ.get("SECUREMDM_RULES_PATH", str(PROJECT_ROOT / "rules.yaml"))
        )
        self.build_dir = Path(
            os.environ.get("SECUREMDM_BUILD_DIR", str(self.base_dir / "dist" / "public"))
        )
        self.host = os.environ.get("HOST", "0.0.0.0")
        self.port = int(os.environ.get("PORT", "3000"))

    @property
    def is_production(self) -> bool:
        return self.env == "production"


@lru_cache
def get_settings() -> Settings:
    return Settings()


# --- Rules ---
@lru_cache
def get_rules() -> Rules:
    return load_rules(get_settings().rules_path)


# --- Adapters ---
@lru_cache
def get_clock() -> ClockPort:
    return SystemClock()


@lru_cache
def get_store() -> SubmissionStorePort:
    """The process-wide submission store."""
    return InMemorySubmissionStore(clock=get_clock())


def get_shell_renderer() -> ShellRendererPort:
    return NoScriptShellRenderer()
