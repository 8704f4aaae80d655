"""Entry ordering for directory listings."""

from __future__ import annotations

from typing import Any, Callable, Iterable

from shs.schemas.index import Entry, SortDirection, SortField, SortSpec


def _by_name(entry: Entry) -> Any:
    return entry.name


def _by_modified(entry: Entry) -> Any:
    return entry.modified_ns


def _by_size(entry: Entry) -> Any:
    # Directories always ahead of files; sizes only compared within a kind.
    return (not entry.is_directory, entry.size_bytes)


SORT_KEYS: dict[SortField, Callable[[Entry], Any]] = {
    SortField.NAME: _by_name,
    SortField.MODIFIED: _by_modified,
    SortField.SIZE: _by_size,
}


def sort_entries(entries: Iterable[Entry], spec: SortSpec | None = None) -> list[Entry]:
    """Return entries ordered by ``spec`` (default: name ascending).

    Ascending order is stable; descending is the exact reverse of it.
    """
    spec = spec or SortSpec()
    key = SORT_KEYS.get(spec.field, _by_name)
    ordered = sorted(entries, key=key)
    if spec.direction == SortDirection.DESC:
        ordered.reverse()
    return ordered
