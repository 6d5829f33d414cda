from __future__ import annotations

import json

from services.config_manager import ConfigManager


def test_defaults(tmp_path):
    config = ConfigManager.get_instance().get_config()
    assert config["store"] == {"backend": "memory", "path": str(tmp_path / "config" / "diffs")}
    assert config["render"] == {"segmentPolicy": "legacy"}
    assert config["server"]["port"] == 8000


def test_singleton():
    assert ConfigManager.get_instance() is ConfigManager.get_instance()


def test_config_file_merges_over_defaults(tmp_path):
    config_dir = tmp_path / "config"
    config_dir.mkdir()
    (config_dir / "config.json").write_text(json.dumps({"store": {"backend": "file"}, "extra": 1}))

    config = ConfigManager.get_instance().get_config()
    assert config["store"]["backend"] == "file"
    assert config["store"]["path"] == str(config_dir / "diffs")
    assert config["extra"] == 1


def test_broken_config_file_falls_back_to_defaults(tmp_path):
    config_dir = tmp_path / "config"
    config_dir.mkdir()
    (config_dir / "config.json").write_text("{broken")

    assert ConfigManager.get_instance().get("render") == {"segmentPolicy": "legacy"}


def test_env_overrides_file(tmp_path, monkeypatch):
    config_dir = tmp_path / "config"
    config_dir.mkdir()
    (config_dir / "config.json").write_text(json.dumps({"render": {"segmentPolicy": "legacy"}}))
    monkeypatch.setenv("DIFF_VIEWER_SEGMENT_POLICY", "corrected")
    monkeypatch.setenv("DIFF_VIEWER_STORE_PATH", str(tmp_path / "elsewhere"))

    config = ConfigManager.get_instance().get_config()
    assert config["render"]["segmentPolicy"] == "corrected"
    assert config["store"]["path"] == str(tmp_path / "elsewhere")


def test_get_config_returns_copy():
    manager = ConfigManager.get_instance()
    manager.get_config()["store"]["backend"] = "file"
    assert manager.get("store")["backend"] == "memory"
