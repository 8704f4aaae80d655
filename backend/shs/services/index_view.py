"""Directory index view-model assembly.

Pipeline: raw path -> segments -> resolved directory -> entries -> sorted
entries -> IndexViewModel. Everything here is synchronous and request-scoped;
callers on an event loop should run it in a worker thread.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, Sequence

from shs.schemas.index import (
    Entry,
    IndexViewModel,
    RowItem,
    SortDirection,
    SortField,
    SortSpec,
    SortToggleLinks,
)
from shs.services.breadcrumb import build_breadcrumb
from shs.services.scanner import resolve_path, scan
from shs.services.sorter import sort_entries
from shs.utils.formatting import format_mtime, format_size
from shs.utils.pathcodec import decode, encode

logger = logging.getLogger(__name__)


def build_row(segments: Sequence[str], entry: Entry) -> RowItem:
    """Display fields for one entry of the directory at ``segments``."""
    kind = "directory" if entry.is_directory else "file"
    link_parts = [*segments, entry.name]
    if entry.is_directory:
        link_parts.append("")  # encoded link ends in "/"
    return RowItem(
        kind=kind,
        filename=entry.name,
        link=encode(link_parts, trailing_slash=False, leading_slash=True),
        link_class=f"link-{kind}",
        modified_display=format_mtime(entry.modified_ns),
        size_display="-" if entry.is_directory else format_size(entry.size_bytes),
    )


def sort_toggle_links(spec: SortSpec) -> SortToggleLinks:
    """Active column flips direction; inactive columns propose ascending."""
    directions = {field: SortDirection.ASC for field in SortField}
    directions[spec.field] = spec.direction.opposite
    return SortToggleLinks(**{field.value: direction for field, direction in directions.items()})


def build_view_model(
    segments: Sequence[str],
    sorted_entries: Iterable[Entry],
    sort_spec: SortSpec | None = None,
    sort_enabled: bool = True,
) -> IndexViewModel:
    sort_spec = sort_spec or SortSpec()
    segments = tuple(segments)
    current_link = encode(segments, trailing_slash=True, leading_slash=True)
    parent_link = (
        encode(segments[:-1], trailing_slash=True, leading_slash=True) if segments else None
    )
    return IndexViewModel(
        directory="/" + "".join(f"{s}/" for s in segments),
        current_directory_link=current_link,
        parent_link=parent_link,
        breadcrumb=build_breadcrumb(segments),
        rows=[build_row(segments, entry) for entry in sorted_entries],
        sort=sort_spec,
        sort_toggle_links=sort_toggle_links(sort_spec),
        sort_enabled=sort_enabled,
    )


def build_listing(
    fs_path: str | Path,
    segments: Sequence[str],
    sort_spec: SortSpec | None = None,
    sort_enabled: bool = True,
) -> IndexViewModel:
    """Scan an already-resolved directory and build its view model."""
    if not sort_enabled:
        sort_spec = SortSpec()
    entries = sort_entries(scan(fs_path), sort_spec)
    return build_view_model(segments, entries, sort_spec, sort_enabled=sort_enabled)


def build_index(
    root: str | Path,
    raw_path: str,
    sort: str | None = None,
    order: str | None = None,
    sort_enabled: bool = True,
) -> IndexViewModel:
    """Full pipeline from a raw request path and query values.

    Raises DecodingError, PathEscape, NotFound, NotADirectory or
    PermissionDenied.
    """
    segments = decode(raw_path)
    target = resolve_path(root, segments)
    spec = SortSpec.from_query(sort, order)
    logger.debug("Building index for /%s (sort=%s)", "/".join(segments), spec)
    return build_listing(target, segments, spec, sort_enabled=sort_enabled)
