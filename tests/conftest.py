from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from services.config_manager import ConfigManager
from services.diff_renderer import DiffRenderer
from services.diff_service import DiffService, set_diff_service
from services.diff_store import InMemoryDiffStore


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    monkeypatch.setenv("DIFF_VIEWER_CONFIG_DIR", str(tmp_path / "config"))
    for var in ("DIFF_VIEWER_STORE_BACKEND", "DIFF_VIEWER_STORE_PATH", "DIFF_VIEWER_SEGMENT_POLICY"):
        monkeypatch.delenv(var, raising=False)
    ConfigManager.reset_instance()
    set_diff_service(None)
    yield
    ConfigManager.reset_instance()
    set_diff_service(None)


@pytest.fixture
def store() -> InMemoryDiffStore:
    return InMemoryDiffStore()


@pytest.fixture
def service(store) -> DiffService:
    svc = DiffService(store=store, renderer=DiffRenderer())
    set_diff_service(svc)
    return svc


@pytest.fixture
def client(service) -> TestClient:
    from main import app

    return TestClient(app)
