"""
Pydantic document model for per-user, per-client display preferences.

Purpose
-------
Give the preference blob an explicit shape: a handful of well-known view
settings with defaults, plus any additional fields a client chooses to store.
Unknown fields are kept (``extra="allow"``) and survive a save/load cycle.

External dependencies: Pydantic only.

Failure semantics: construction from untrusted input raises
``pydantic.ValidationError``; the codec translates that into a corruption
error when it happens on a stored blob.
"""

from __future__ import annotations

from typing import Any, Dict, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field

ScrollDirection = Literal["Horizontal", "Vertical"]
SortOrder = Literal["Ascending", "Descending"]


class DisplayPreferences(BaseModel):
    """Display preferences for one item view of one user on one client.

    Attributes:
        id: Identifier text. Normally the 32-char hex form of a 128-bit
            identifier; any other string is hashed into one by the repository.
        client: Client application name; part of the storage key.
        view_type: Selected view layout, if any.
        sort_by: Field the view is sorted on.
        index_by: Field the view is grouped on, if any.
        remember_indexing: Whether ``index_by`` persists across sessions.
        primary_image_height: Poster height in pixels.
        primary_image_width: Poster width in pixels.
        custom_prefs: Free-form string settings owned by the client.
        scroll_direction: Scroll axis for the view.
        show_backdrop: Whether backdrops are shown.
        remember_sorting: Whether ``sort_by``/``sort_order`` persist.
        sort_order: Sort direction.
        show_sidebar: Whether the sidebar is visible.
    """

    model_config = ConfigDict(extra="allow")

    id: str = ""
    client: Optional[str] = None
    view_type: Optional[str] = None
    sort_by: str = "SortName"
    index_by: Optional[str] = None
    remember_indexing: bool = False
    primary_image_height: int = Field(default=250, ge=0)
    primary_image_width: int = Field(default=250, ge=0)
    custom_prefs: Dict[str, Optional[str]] = Field(default_factory=dict)
    scroll_direction: ScrollDirection = "Horizontal"
    show_backdrop: bool = True
    remember_sorting: bool = False
    sort_order: SortOrder = "Ascending"
    show_sidebar: bool = False

    @property
    def extra_fields(self) -> Dict[str, Any]:
        """Fields stored on the document beyond the well-known ones."""
        return dict(self.model_extra or {})


__all__ = ["DisplayPreferences", "ScrollDirection", "SortOrder"]
