import os

import yaml
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[2]
CONFIG_PATH = PROJECT_ROOT / "config" / "gedcom_compare.yml"
CONFIG_ENV_VAR = "GEDCOM_COMPARE_CONFIG"

DEFAULTS = {
    "paths": {
        "sessions_file": "data/sessions.json",
        "logs_dir": "logs",
        "outputs_dir": "outputs",
    },
    "logging": {"level": "INFO", "file": "gedcom_compare.log", "rotate": False},
    "debug": False,
}


class GCConfig:
    def __init__(self, data):
        self.paths = {**DEFAULTS["paths"], **(data.get("paths") or {})}
        self.logging = {**DEFAULTS["logging"], **(data.get("logging") or {})}
        self.debug = bool(data.get("debug", False))

    def resolve_path(self, key: str) -> Path:
        """Return ``paths.<key>`` as an absolute path (relative to the project root)."""
        path = Path(self.paths[key])
        if not path.is_absolute():
            path = PROJECT_ROOT / path
        return path


def config_path() -> Path:
    override = os.environ.get(CONFIG_ENV_VAR)
    return Path(override) if override else CONFIG_PATH


def load_config() -> 'GCConfig':
    path = config_path()
    if not path.exists():
        # Installed without the project tree; run on built-in defaults.
        return GCConfig({})

    with open(path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}

    return GCConfig(data)

_config_cache = None

def get_config() -> 'GCConfig':
    global _config_cache
    if _config_cache is None:
        _config_cache = load_config()
    return _config_cache


def reset_config() -> None:
    global _config_cache
    _config_cache = None
