"""Breadcrumb trail for the current directory."""

from __future__ import annotations

from typing import Sequence

from shs.schemas.index import BreadcrumbItem
from shs.utils.pathcodec import encode


def build_breadcrumb(segments: Sequence[str]) -> list[BreadcrumbItem]:
    """One item per directory level, outermost first.

    The last item is the current directory and carries no link. The root
    itself has no breadcrumb.
    """
    items = [
        BreadcrumbItem(
            label=segment,
            link=encode(segments[: depth + 1], trailing_slash=True, leading_slash=True),
        )
        for depth, segment in enumerate(segments[:-1])
    ]
    if segments:
        items.append(BreadcrumbItem(label=segments[-1], link=""))
    return items
