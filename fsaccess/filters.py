"""Name filters deciding which directory entries a listing keeps."""

from __future__ import annotations

from typing import Callable

from .types import FilterType

NameFilter = Callable[[str], bool]


def filter_all(name: str) -> bool:
    """Keep every entry."""
    return True


def filter_visible(name: str) -> bool:
    """Keep entries whose names do not start with a dot."""
    return not name.startswith(".")


def filter_local(name: str) -> bool:
    """Keep everything except the ``.`` and ``..`` entries."""
    return name not in (".", "..")


_FILTERS: dict[FilterType, NameFilter] = {
    FilterType.ALL: filter_all,
    FilterType.VISIBLE: filter_visible,
    FilterType.NON_UTILITY: filter_local,
}


def resolve_filter(filter_type: FilterType | int) -> NameFilter:
    """Return the name filter for a filter type; unknown types keep everything."""
    return _FILTERS.get(filter_type, filter_all)