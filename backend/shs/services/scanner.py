"""Directory scanning — safe root resolution and one-pass child enumeration."""

from __future__ import annotations

import logging
import os
import stat
from pathlib import Path
from typing import Iterable

from shs.errors import NotADirectory, NotFound, PathEscape, PermissionDenied
from shs.schemas.index import Entry

logger = logging.getLogger(__name__)

_FORBIDDEN_SEGMENTS = {".", ".."}
_FORBIDDEN_CHARS = ("/", "\\", "\x00")


def resolve_path(root: str | Path, segments: Iterable[str]) -> Path:
    """Map decoded segments onto ``root``, refusing anything that leaves it.

    Symlinks are followed; a link pointing outside the root is treated the
    same as a ``..`` segment.
    """
    segments = tuple(segments)
    for segment in segments:
        if segment in _FORBIDDEN_SEGMENTS or any(c in segment for c in _FORBIDDEN_CHARS):
            raise PathEscape(f"Illegal path segment {segment!r}", path="/".join(segments))

    root_path = Path(root).resolve()
    target = root_path.joinpath(*segments).resolve()
    if target != root_path and root_path not in target.parents:
        logger.warning("Blocked path escaping root: %s -> %s", "/".join(segments), target)
        raise PathEscape("Path resolves outside root", path="/".join(segments))
    return target


def scan(fs_path: str | Path) -> list[Entry]:
    """List immediate children of ``fs_path`` with their metadata.

    Children that disappear or become unreadable between listing and stat are
    skipped; the rest of the listing is still returned.
    """
    fs_path = Path(fs_path)
    entries: list[Entry] = []
    try:
        with os.scandir(fs_path) as it:
            for child in it:
                try:
                    st = child.stat()
                except OSError as exc:
                    logger.debug("Skipping unreadable entry %s: %s", child.path, exc)
                    continue
                is_dir = stat.S_ISDIR(st.st_mode)
                entries.append(
                    Entry(
                        name=child.name,
                        is_directory=is_dir,
                        size_bytes=st.st_size,
                        modified_ns=st.st_mtime_ns,
                    )
                )
    except FileNotFoundError as exc:
        raise NotFound(f"No such directory: {fs_path}", path=str(fs_path)) from exc
    except NotADirectoryError as exc:
        raise NotADirectory(f"Not a directory: {fs_path}", path=str(fs_path)) from exc
    except PermissionError as exc:
        raise PermissionDenied(f"Permission denied: {fs_path}", path=str(fs_path)) from exc

    logger.debug("Scanned %s: %d entries", fs_path, len(entries))
    return entries
