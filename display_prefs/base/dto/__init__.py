"""Document models for the preference store."""

from .display_preferences import DisplayPreferences, ScrollDirection, SortOrder

__all__ = ["DisplayPreferences", "ScrollDirection", "SortOrder"]
