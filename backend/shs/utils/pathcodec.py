"""URL path <-> segment tuple conversion."""

from __future__ import annotations

import re
from typing import Iterable
from urllib.parse import quote, unquote_to_bytes

from shs.errors import DecodingError

# RFC 3986 pchar minus unreserved (always kept by quote)
SEGMENT_SAFE = "!$&'()*+,;=:@"

_BAD_PERCENT = re.compile(r"%(?![0-9A-Fa-f]{2})")


def decode(raw_path: str) -> tuple[str, ...]:
    """Split a percent-encoded URL path into decoded segments.

    Empty segments (repeated or trailing slashes) are dropped. ``.`` and
    ``..`` are returned untouched; rejecting them is up to whoever maps the
    segments onto a filesystem.
    """
    segments = []
    for part in raw_path.split("/"):
        if not part:
            continue
        if _BAD_PERCENT.search(part):
            raise DecodingError(f"Malformed percent-encoding in {part!r}", path=raw_path)
        try:
            segments.append(unquote_to_bytes(part).decode("utf-8"))
        except UnicodeDecodeError as exc:
            raise DecodingError(f"Segment {part!r} is not valid UTF-8", path=raw_path) from exc
    return tuple(segments)


def encode(
    segments: Iterable[str],
    trailing_slash: bool = False,
    leading_slash: bool = False,
) -> str:
    """Percent-encode segments and join them into a URL path."""
    path = "/".join(quote(s, safe=SEGMENT_SAFE) for s in segments)
    if leading_slash:
        path = "/" + path
    if trailing_slash and not path.endswith("/"):
        path += "/"
    return path
