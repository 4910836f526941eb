from __future__ import annotations

import os
from dataclasses import dataclass, fields
from pathlib import Path

import yaml

ENV_PREFIX = "WR_"
DEFAULT_MODEL = "Qwen/Qwen2.5-1.5B-Instruct"


@dataclass
class Settings:
    model: str | None = None
    host: str = "0.0.0.0"
    port: int = 8000
    log_level: str = "INFO"
    log_prefix: str = "whiterabbit"
    hf_dataset: str | None = None
    hf_column: str | None = None
    hf_file: str | None = None
    corpus_max_rows: int = 10000
    generator: str = "markov"
    strict_budget: bool = True
    embedding_dim: int = 384
    max_model_len: int = 32768
    preload: bool = False

    def served_model(self, requested: str | None = None) -> str:
        return self.model or requested or DEFAULT_MODEL


def load_run_config(path: str | None) -> dict:
    cfg = {}
    if path:
        cfg = yaml.safe_load(Path(path).read_text(encoding="utf-8")) or {}
    if not isinstance(cfg, dict):
        raise ValueError(f"top-level config must be a yaml mapping: {path}")
    return cfg


def get_env_or_cfg(cfg: dict, key: str, default=None):
    env_key = ENV_PREFIX + key.upper()
    if env_key in os.environ:
        return os.environ[env_key]
    return cfg.get(key, default)


def _coerce(raw, default):
    if raw is None or isinstance(default, str) or default is None:
        return raw if raw != "" else None
    if isinstance(default, bool):
        if isinstance(raw, bool):
            return raw
        return str(raw).strip().lower() in {"1", "true", "yes", "on"}
    if isinstance(default, int):
        return int(raw)
    return raw


def load_settings(path: str | None = None) -> Settings:
    path = path or os.getenv("WR_CONFIG")
    cfg = load_run_config(path if path and Path(path).exists() else None)
    values = {}
    for f in fields(Settings):
        raw = get_env_or_cfg(cfg, f.name, f.default)
        value = _coerce(raw, f.default)
        values[f.name] = f.default if value is None and f.default is not None else value
    return Settings(**values)
