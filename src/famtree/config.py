import os
from pathlib import Path

import yaml

CONFIG_PATH = Path(__file__).resolve().parents[2] / "config" / "famtree.yml"

DEFAULTS = {
    "source": {
        "location": "stammbaum.json",
        "timeout": 10.0,
        "wrapper_keys": ["data", "records"],
    },
    "tree": {"root_anchor_id": "0"},
    "search": {"min_length": 2, "limit": 20},
    "logging": {"level": "INFO", "dir": "logs", "file": "famtree.log", "rotate": False},
    "debug": False,
}


class FTConfig:
    def __init__(self, data):
        self.source = {**DEFAULTS["source"], **(data.get("source") or {})}
        self.tree = {**DEFAULTS["tree"], **(data.get("tree") or {})}
        self.search = {**DEFAULTS["search"], **(data.get("search") or {})}
        self.logging = {**DEFAULTS["logging"], **(data.get("logging") or {})}
        self.debug = bool(data.get("debug", False))

    @property
    def root_anchor_id(self) -> str:
        return str(self.tree["root_anchor_id"])

    @property
    def wrapper_keys(self) -> tuple:
        return tuple(self.source.get("wrapper_keys") or ())


def config_path() -> Path:
    override = os.environ.get("FAMTREE_CONFIG")
    return Path(override) if override else CONFIG_PATH


def load_config(path: Path | None = None) -> 'FTConfig':
    path = path or config_path()
    if not path.exists():
        # Installed without the repo checkout: run on built-in defaults
        return FTConfig({})

    with open(path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}

    return FTConfig(data)

_config_cache = None

def get_config() -> 'FTConfig':
    global _config_cache
    if _config_cache is None:
        _config_cache = load_config()
    return _config_cache


def reset_config() -> None:
    """Drop the cached config (tests point FAMTREE_CONFIG elsewhere)."""
    global _config_cache
    _config_cache = None
