import importlib.util
from pathlib import Path

import pytest
import uvicorn

import libindex_api.db.migrations as migrations

LAUNCHER = Path(__file__).resolve().parents[1] / "scripts" / "run_libindex_api.py"


@pytest.fixture
def launcher():
    loader_spec = importlib.util.spec_from_file_location("run_libindex_api", LAUNCHER)
    module = importlib.util.module_from_spec(loader_spec)
    loader_spec.loader.exec_module(module)
    return module


@pytest.fixture
def served(monkeypatch) -> dict:
    captured: dict = {}
    monkeypatch.setattr(uvicorn, "run", lambda app, **kwargs: captured.update(app=app, **kwargs))
    return captured


def test_cli_overrides_settings(launcher, served):
    assert launcher.main(["--port", "9100", "--workers", "3", "--log-level", "warning"]) == 0

    assert served["app"] == "libindex_api.app:app"
    assert served["port"] == 9100
    assert served["workers"] == 3
    assert served["reload"] is False
    assert served["log_level"] == "warning"


def test_reload_forces_single_worker(launcher, served):
    launcher.main(["--reload", "--workers", "4"])

    assert served["reload"] is True
    assert served["workers"] == 1


def test_migrate_only_upgrades_without_serving(launcher, served, monkeypatch):
    upgrades: list[bool] = []
    monkeypatch.setattr(migrations, "upgrade_database", lambda: upgrades.append(True))

    assert launcher.main(["--migrate-only"]) == 0

    assert upgrades == [True]
    assert served == {}
