"""Structured logging context object for store events.

:class:`LogContext` carries the fields shared by most repository events (store
path, user id, client) plus an ``extra`` mapping. ``to_dict`` merges
``extra`` and prunes ``None`` values for clean structured output.
"""
from __future__ import annotations

from dataclasses import dataclass, asdict, field
from typing import Any, Dict, Optional


@dataclass
class LogContext:
    """Structured context for store logging events."""

    store_path: Optional[str] = None
    user_id: Optional[str] = None
    client: Optional[str] = None
    extra: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        extra = data.pop("extra", {}) or {}
        data.update({k: v for k, v in extra.items() if v is not None})
        return {k: v for k, v in data.items() if v is not None}


__all__ = ["LogContext"]
