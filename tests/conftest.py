from __future__ import annotations

import sys
from pathlib import Path

import pytest
import respx
from typer.testing import CliRunner


# Ensure the repository-local ``src`` directory is importable when the project is
# not installed as a package. Pytest executes from the repository root where the
# ``src`` layout is not on ``sys.path`` by default.
SRC_PATH = Path(__file__).resolve().parents[1] / "src"
if str(SRC_PATH) not in sys.path:
    sys.path.insert(0, str(SRC_PATH))

API_ROOT = "https://one.digicert.com/mpki/api/v1"


@pytest.fixture
def api_key() -> str:
    return "test-api-key"


@pytest.fixture
def api_root() -> str:
    return API_ROOT


@pytest.fixture
def respx_mock():
    with respx.mock(assert_all_called=False) as respx_mgr:
        yield respx_mgr


@pytest.fixture
def tlm(api_key):
    from digicert_tlm import TrustLifecycleClient

    with TrustLifecycleClient(api_key) as client:
        yield client


@pytest.fixture(autouse=True)
def isolated_home(tmp_path, monkeypatch):
    """Keep every test away from the real ``~/.tlm`` and ambient credentials."""

    monkeypatch.setenv("TLM_HOME", str(tmp_path / "tlm-home"))
    for name in ("DIGICERT_API_KEY", "DIGICERT_BASE_URL", "TLM_CONFIG_ENCRYPTION_KEY", "TLM_DEBUG"):
        monkeypatch.delenv(name, raising=False)
    return tmp_path / "tlm-home"


@pytest.fixture
def cli_runner(monkeypatch):
    """Provide a CLI runner with a dummy API key."""

    monkeypatch.setenv("DIGICERT_API_KEY", "cli-key")
    return CliRunner()
