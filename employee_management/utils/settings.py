import os

import yaml

# ----------------------------
# Configuration
# ----------------------------
CONFIG_DIR = os.path.join(os.path.dirname(os.path.dirname(__file__)), "..", "config")
SET_FILE = os.path.abspath(os.getenv("SETTINGS_FILE", os.path.join(CONFIG_DIR, "settings.yaml")))

def _load_yaml(path: str) -> dict:
    if not os.path.exists(path):
        return {}
    with open(path, "r", encoding="utf-8") as f:
        return yaml.safe_load(f) or {}

def _merge(defaults: dict, overrides: dict) -> dict:
    merged = dict(defaults)
    for key, value in overrides.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _merge(merged[key], value)
        else:
            merged[key] = value
    return merged

# Safe defaults if the YAML file is missing
SETTINGS = _merge(
    {
        "api": {"prefix": "/api"},
        "pagination": {"default_size": 20, "max_size": 100},
        "logging": {"level": "INFO"},
        "database": {"echo": False, "pool_pre_ping": True},
    },
    _load_yaml(SET_FILE),
)

API_PREFIX: str = SETTINGS["api"]["prefix"]
DEFAULT_PAGE_SIZE: int = int(SETTINGS["pagination"]["default_size"])
MAX_PAGE_SIZE: int = int(SETTINGS["pagination"]["max_size"])
LOG_LEVEL: str = str(SETTINGS["logging"]["level"]).upper()
DB_ECHO: bool = bool(SETTINGS["database"]["echo"])
DB_POOL_PRE_PING: bool = bool(SETTINGS["database"]["pool_pre_ping"])
