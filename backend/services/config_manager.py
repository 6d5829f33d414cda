"""
Configuration Manager - Resolve backend settings from env, config file and defaults
"""

from __future__ import annotations

import copy
import json
import os
import tempfile
from pathlib import Path
from typing import Any

# Environment overrides: variable -> (section, key)
ENV_OVERRIDES = {
    "DIFF_VIEWER_STORE_BACKEND": ("store", "backend"),
    "DIFF_VIEWER_STORE_PATH": ("store", "path"),
    "DIFF_VIEWER_SEGMENT_POLICY": ("render", "segmentPolicy"),
}


class ConfigManager:
    """Read-only layered configuration"""

    _instance = None
    _config_dir = None

    def __init__(self):
        # 1st: environment variable
        config_dir = os.environ.get("DIFF_VIEWER_CONFIG_DIR")

        # 2nd: ~/.diff_viewer
        if not config_dir:
            config_dir = os.path.expanduser("~/.diff_viewer")

        config_path = Path(config_dir)
        try:
            config_path.mkdir(parents=True, exist_ok=True)
            self._config_dir = config_path
        except OSError as e:
            # 3rd: temp dir when the preferred location is not writable
            print(f"[ConfigManager] Warning: Cannot write to {config_dir}: {e}")
            self._config_dir = Path(tempfile.gettempdir()) / "diff_viewer"
            self._config_dir.mkdir(parents=True, exist_ok=True)
            print(f"[ConfigManager] Using temporary config path: {self._config_dir}")

        self._config = self._load_config()

    @classmethod
    def get_instance(cls) -> "ConfigManager":
        """Get singleton instance"""
        if cls._instance is None:
            cls._instance = ConfigManager()
        return cls._instance

    @classmethod
    def reset_instance(cls):
        """Drop the singleton so the next get_instance() re-reads everything"""
        cls._instance = None

    @property
    def config_file(self) -> Path:
        return self._config_dir / "config.json"

    def _default_config(self) -> dict[str, Any]:
        """Get default configuration"""
        return {
            "store": {"backend": "memory", "path": str(self._config_dir / "diffs")},
            "render": {"segmentPolicy": "legacy"},
            "server": {"host": "0.0.0.0", "port": 8000},
        }

    def _load_config(self) -> dict[str, Any]:
        """Merge config file and environment overrides over the defaults"""
        config = self._default_config()

        if self.config_file.exists():
            try:
                with open(self.config_file) as f:
                    file_config = json.load(f)
            except (json.JSONDecodeError, OSError) as e:
                print(f"[ConfigManager] Error loading config: {e}")
                file_config = {}
            for section, values in file_config.items():
                if isinstance(values, dict) and isinstance(config.get(section), dict):
                    config[section].update(values)
                else:
                    config[section] = values

        for env_var, (section, key) in ENV_OVERRIDES.items():
            value = os.environ.get(env_var)
            if value:
                config.setdefault(section, {})[key] = value

        return config

    def get_config(self) -> dict[str, Any]:
        """Get a copy of the current configuration"""
        return copy.deepcopy(self._config)

    def get(self, key: str, default=None):
        """Get specific config section"""
        return copy.deepcopy(self._config.get(key, default))
