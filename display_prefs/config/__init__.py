"""Configuration layer for the preference store.

Merge order (later wins)
------------------------
1. Built-in defaults (``config.defaults``)
2. Optional external config file (JSON or YAML) pointed to by
   ``DISPLAY_PREFS_CONFIG_FILE``
3. Environment variables (``DISPLAY_PREFS_DATA_DIR``, ``DISPLAY_PREFS_DB_FILE``,
   ``DISPLAY_PREFS_BUSY_TIMEOUT_MS``)
4. In-code overrides passed to ``get_store_config``

External config file example::

    store:
      data_dir: /var/lib/myapp
      busy_timeout_ms: 10000

Public API
----------
* get_store_config(overrides: dict | None = None) -> StoreConfig
"""
from __future__ import annotations

import json
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from .defaults import (
    ENV_BUSY_TIMEOUT_MS,
    ENV_CONFIG_FILE,
    ENV_DATA_DIR,
    ENV_DB_FILE,
    SQLITE_BUSY_TIMEOUT_MS,
    SQLITE_JOURNAL_MODE,
    SQLITE_SYNCHRONOUS,
    STORE_DB_FILE_NAME,
    STORE_DEFAULT_DATA_DIR,
)


DEFAULTS: Dict[str, Any] = {
    "data_dir": STORE_DEFAULT_DATA_DIR,
    "file_name": STORE_DB_FILE_NAME,
    "busy_timeout_ms": SQLITE_BUSY_TIMEOUT_MS,
    "journal_mode": SQLITE_JOURNAL_MODE,
    "synchronous": SQLITE_SYNCHRONOUS,
}

ENV_FIELD_MAP = {
    "data_dir": ENV_DATA_DIR,
    "file_name": ENV_DB_FILE,
    "busy_timeout_ms": ENV_BUSY_TIMEOUT_MS,
}


@dataclass(frozen=True)
class StoreConfig:
    """Resolved store settings.

    Attributes
    ----------
    data_dir: Directory holding the backing file (``~`` expanded).
    file_name: Backing file name.
    busy_timeout_ms: SQLite busy timeout in milliseconds.
    journal_mode: SQLite journal mode PRAGMA value.
    synchronous: SQLite synchronous PRAGMA value.
    """

    data_dir: Path
    file_name: str
    busy_timeout_ms: int
    journal_mode: str
    synchronous: str

    @property
    def db_path(self) -> Path:
        return self.data_dir / self.file_name


def _load_external_config() -> Dict[str, Any]:
    """Read the ``store`` section of the external config file, if any.

    JSON is tried first, then YAML. A missing file yields ``{}``; a file that
    is present but unparseable is an error.
    """
    path = os.getenv(ENV_CONFIG_FILE)
    if not path:
        return {}
    p = Path(path).expanduser()
    if not p.exists():
        return {}
    text = p.read_text(encoding="utf-8")
    try:
        data = json.loads(text)
    except ValueError:
        data = yaml.safe_load(text) or {}
    if not isinstance(data, dict):
        raise ValueError(f"config file {p} must contain a mapping")
    section = data.get("store", {})
    return section if isinstance(section, dict) else {}


def _env_overrides() -> Dict[str, Any]:
    out: Dict[str, Any] = {}
    for field, env_name in ENV_FIELD_MAP.items():
        val = os.getenv(env_name)
        if val:
            out[field] = val
    return out


def get_store_config(overrides: Optional[Dict[str, Any]] = None) -> StoreConfig:
    """Return merged store configuration.

    Merge order (later wins): defaults -> external config -> env vars -> overrides
    """
    cfg: Dict[str, Any] = dict(DEFAULTS)
    cfg |= {k: v for k, v in _load_external_config().items() if k in DEFAULTS}
    cfg |= _env_overrides()
    if overrides:
        cfg |= {k: v for k, v in overrides.items() if v is not None and k in DEFAULTS}

    return StoreConfig(
        data_dir=Path(str(cfg["data_dir"])).expanduser(),
        file_name=str(cfg["file_name"]),
        busy_timeout_ms=int(cfg["busy_timeout_ms"]),
        journal_mode=str(cfg["journal_mode"]).upper(),
        synchronous=str(cfg["synchronous"]).upper(),
    )


__all__ = [
    "StoreConfig",
    "get_store_config",
    "DEFAULTS",
]
