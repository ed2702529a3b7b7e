from __future__ import annotations

# resume_backend/config.py
import os
from typing import Any

import yaml

# 配置来源：项目根 config.yaml（可选）+ 环境变量覆盖
PROJECT_ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
CONFIG_PATH = os.path.join(PROJECT_ROOT, "config.yaml")


class ConfigError(ValueError):
    """config.yaml is unreadable or holds a value of the wrong shape."""


DEFAULTS: dict[str, Any] = {
    "db_path": os.path.join(PROJECT_ROOT, "resume.db"),
    "test_db_path": None,
    "cors_origins": [
        "http://localhost:3000",
        "http://127.0.0.1:3000",
        "http://localhost:5173",
        "http://127.0.0.1:5173",
    ],
    "min_year": 1900,
}


def _read_config_yaml(path: str | None = None) -> dict:
    cfg_path = path or os.environ.get("RESUME_CONFIG_PATH") or CONFIG_PATH
    if not os.path.exists(cfg_path):
        return {}
    try:
        with open(cfg_path, "r", encoding="utf-8") as f:
            cfg = yaml.safe_load(f) or {}
    except (OSError, yaml.YAMLError) as e:
        raise ConfigError(f"cannot read config file {cfg_path}: {e}") from e
    if not isinstance(cfg, dict):
        raise ConfigError(f"config file must be a mapping: {cfg_path}")
    return cfg


def load_config(path: str | None = None) -> dict[str, Any]:
    """
    Merge config.yaml over DEFAULTS. Blank strings in the file are ignored so
    a half-filled template does not wipe out a default.
    """
    out = dict(DEFAULTS)
    for k, v in _read_config_yaml(path).items():
        if k not in DEFAULTS:
            continue
        if isinstance(v, str):
            v = v.strip()
            if not v:
                continue
        out[k] = v

    try:
        out["min_year"] = int(out["min_year"])
    except (TypeError, ValueError) as e:
        raise ConfigError(f"min_year must be an integer: {out['min_year']!r}") from e
    origins = out["cors_origins"]
    if isinstance(origins, str):
        origins = [o.strip() for o in origins.split(",") if o.strip()]
    out["cors_origins"] = list(origins)
    return out


def is_test_env() -> bool:
    return (os.environ.get("APP_ENV") == "test") or (os.environ.get("PYTEST_CURRENT_TEST") is not None)
