"""Viewer settings shared by filesystem access operations."""

from __future__ import annotations

from dataclasses import dataclass

from .types import FilterType


@dataclass
class Settings:
    """Current options of a filesystem viewer."""

    current_filter_type: FilterType = FilterType.VISIBLE

    def change_filter_mode(self, filter_type: FilterType | int) -> None:
        """Switch the filter used when listing directories."""
        self.current_filter_type = FilterType(filter_type)