"""Local file-system adapter used to discard a damaged store file."""

from __future__ import annotations

from pathlib import Path


class LocalFileSystem:
    """``IFileSystem`` implementation over the local disk."""

    def delete_file(self, path: Path) -> None:
        Path(path).unlink(missing_ok=True)


__all__ = ["LocalFileSystem"]
