"""Pure helpers for laying out and navigating the lists."""

from __future__ import annotations

from typing import Iterable, Sequence, TypeVar

from skilltui.models import CENTRAL, Platform

T = TypeVar("T")

LIST_OVERHEAD = 8

_ABBREVIATIONS = {
    "claude-code": "claude",
    "codex-cli": "codex",
    "gemini-cli": "gemini",
}


def abbreviate_platform(name: str) -> str:
    """Return a column header of at most eight characters for a platform."""
    short = _ABBREVIATIONS.get(name)
    if short is not None:
        return short
    if len(name) > 8:
        return name[:7] + "."
    return name


def cycle_option(options: Sequence[str], current: str) -> str:
    """Return the option after current, wrapping; the first if current is unknown."""
    if not options:
        raise ValueError("no options to cycle through")
    try:
        index = options.index(current)
    except ValueError:
        return options[0]
    return options[(index + 1) % len(options)]


def count_by_category(platforms: Iterable[Platform], category: str) -> int:
    return sum(1 for p in platforms if p.category == category)


def filter_by_query(items: Iterable[T], query: str) -> list[T]:
    """Keep items whose name or description contains the query, ignoring case."""
    items = list(items)
    if not query:
        return items
    needle = query.lower()
    return [
        item
        for item in items
        if needle in item.name.lower() or needle in item.description.lower()
    ]


def truncate(text: str, limit: int, keep: int) -> str:
    """Cut text longer than limit down to keep characters followed by an ellipsis."""
    if len(text) > limit:
        return text[:keep] + "..."
    return text


def visible_rows(height: int) -> int:
    """Return how many list rows fit in a window of the given height."""
    return max(height - LIST_OVERHEAD, 1)


def clamp_scroll(cursor: int, scroll: int, visible: int, total: int) -> int:
    """Return a scroll offset that keeps the cursor on screen and the list filled."""
    if cursor < scroll:
        scroll = cursor
    if cursor >= scroll + visible:
        scroll = cursor - visible + 1
    return min(scroll, max(total - visible, 0))


def platform_columns(platforms: Iterable[Platform]) -> list[str]:
    """Return the sorted names of installed target platforms."""
    return sorted(p.name for p in platforms if p.category != CENTRAL and p.installed)


def scroll_window(scroll: int, visible: int, total: int) -> range:
    """Return the indices of rows shown from the scroll offset."""
    return range(scroll, min(scroll + visible, total))