#!/usr/bin/env python3
"""
Application Settings
====================
CLI defaults from configs/app.yaml.

Usage:
    from namekit.settings import get_setting, generate_defaults

    get_setting('scripts.sample')        # 'ka-lin-mo'
    generate_defaults().min_length       # 4
"""

from __future__ import annotations

from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import Any, Optional

import yaml

APP_CONFIG_PATH = Path(__file__).resolve().parent / "configs" / "app.yaml"


@dataclass(frozen=True)
class GenerateDefaults:
    """Defaults for `namekit generate`, from the `generate` section."""
    count: int
    min_length: int
    max_length: Optional[int]
    script: str
    separator: str


@lru_cache(maxsize=1)
def load_app_config() -> dict:
    if not APP_CONFIG_PATH.exists():
        raise FileNotFoundError(f"Missing app config: {APP_CONFIG_PATH}")
    data = yaml.safe_load(APP_CONFIG_PATH.read_text(encoding='utf-8'))
    return data or {}


def get_setting(path: str, default: Any = None) -> Any:
    """Get nested setting by dotted path."""
    current: Any = load_app_config()
    for part in path.split('.'):
        if not isinstance(current, dict) or part not in current:
            return default
        current = current[part]
    return current


def _require_int(section: dict, key: str, optional: bool = False) -> Optional[int]:
    value = section.get(key)
    if value is None and optional:
        return None
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"generate.{key} must be set in app.yaml as an integer, got {value!r}")
    return value


@lru_cache(maxsize=1)
def generate_defaults() -> GenerateDefaults:
    """Typed view of the `generate` section."""
    section = get_setting('generate', {}) or {}
    script = section.get('script')
    if not script:
        raise ValueError("generate.script must be set in app.yaml")
    return GenerateDefaults(
        count=_require_int(section, 'count'),
        min_length=_require_int(section, 'min_length'),
        max_length=_require_int(section, 'max_length', optional=True),
        script=str(script),
        separator=str(section.get('separator', '\n')),
    )


__all__ = [
    "GenerateDefaults",
    "load_app_config",
    "get_setting",
    "generate_defaults",
    "APP_CONFIG_PATH",
]
