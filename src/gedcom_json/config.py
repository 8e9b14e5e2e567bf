import yaml
from pathlib import Path

CONFIG_PATH = Path(__file__).resolve().parents[2] / "config" / "gedcom_json.yml"

DEFAULTS = {
    "paths": {"logs_dir": "logs"},
    "logging": {"level": "INFO", "file": "gedcom_json.log", "rotate": False, "to_file": False},
    "output": {"indent": 2},
    "debug": False,
}


class GPConfig:
    def __init__(self, data):
        self.paths = {**DEFAULTS["paths"], **(data.get("paths") or {})}
        self.logging = {**DEFAULTS["logging"], **(data.get("logging") or {})}
        self.output = {**DEFAULTS["output"], **(data.get("output") or {})}
        self.debug = bool(data.get("debug", DEFAULTS["debug"]))

    @property
    def indent(self) -> int:
        indent = self.output.get("indent")
        return DEFAULTS["output"]["indent"] if indent is None else int(indent)


def load_config(path: Path = CONFIG_PATH) -> 'GPConfig':
    # Installed copies have no project-level config directory; run on defaults.
    if not path.exists():
        return GPConfig({})

    with open(path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}

    return GPConfig(data)

_config_cache = None

def get_config() -> 'GPConfig':
    global _config_cache
    if _config_cache is None:
        _config_cache = load_config()
    return _config_cache


def reset_config() -> None:
    """Drop the cached config so the next get_config() re-reads the file."""
    global _config_cache
    _config_cache = None
