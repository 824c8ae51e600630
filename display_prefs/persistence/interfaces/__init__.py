"""Persistence interfaces package.

Defines the repository, codec and file-system protocols. Concrete
implementations live under persistence adapters such as SQLite.
"""

from .repos import (  # noqa: F401
    IDisplayPreferencesRepo,
    IFileSystem,
    IPreferenceCodec,
)
