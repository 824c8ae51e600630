"""display_prefs.config.defaults
=============================

Central place for small, stable default values used by the preference store.
These can be overridden via environment variables, an external config file,
or explicit overrides, but provide sensible fallbacks for local use and tests.

This module intentionally avoids importing from other package modules to
prevent circular dependencies. Only plain constants live here.
"""

from __future__ import annotations

# ---- Backing file ----

# Directory holding the store file when nothing else is configured.
STORE_DEFAULT_DATA_DIR = "~/.local/share/display_prefs"
# Fixed file name of the single backing store.
STORE_DB_FILE_NAME = "displaypreferences.db"

# ---- SQLite ----

# Busy timeout in milliseconds to mitigate lock contention between writers.
SQLITE_BUSY_TIMEOUT_MS = 5000
# WAL lets readers proceed while a writer holds the write lock.
SQLITE_JOURNAL_MODE = "WAL"
SQLITE_SYNCHRONOUS = "NORMAL"

# ---- Environment variable names ----

ENV_CONFIG_FILE = "DISPLAY_PREFS_CONFIG_FILE"
ENV_DATA_DIR = "DISPLAY_PREFS_DATA_DIR"
ENV_DB_FILE = "DISPLAY_PREFS_DB_FILE"
ENV_BUSY_TIMEOUT_MS = "DISPLAY_PREFS_BUSY_TIMEOUT_MS"


__all__ = [
    "STORE_DEFAULT_DATA_DIR",
    "STORE_DB_FILE_NAME",
    "SQLITE_BUSY_TIMEOUT_MS",
    "SQLITE_JOURNAL_MODE",
    "SQLITE_SYNCHRONOUS",
    "ENV_CONFIG_FILE",
    "ENV_DATA_DIR",
    "ENV_DB_FILE",
    "ENV_BUSY_TIMEOUT_MS",
]
