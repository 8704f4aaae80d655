"""Directory index schemas — scan results and the page view model."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class SortField(str, Enum):
    NAME = "name"
    MODIFIED = "modified"
    SIZE = "size"


class SortDirection(str, Enum):
    ASC = "asc"
    DESC = "desc"

    @property
    def opposite(self) -> "SortDirection":
        return SortDirection.DESC if self is SortDirection.ASC else SortDirection.ASC


class Entry(BaseModel):
    """One directory child: name plus filesystem metadata."""
    model_config = ConfigDict(frozen=True)

    name: str
    is_directory: bool
    size_bytes: int = Field(ge=0)
    modified_ns: int  # signed nanoseconds since the Unix epoch


class SortSpec(BaseModel):
    """Requested ordering of a listing."""
    model_config = ConfigDict(frozen=True)

    field: SortField = SortField.NAME
    direction: SortDirection = SortDirection.ASC

    @classmethod
    def from_query(cls, sort: str | None = None, order: str | None = None) -> "SortSpec":
        """Build from raw query values; unknown or missing values fall back to defaults."""
        try:
            field = SortField(sort)
        except ValueError:
            field = SortField.NAME
        try:
            direction = SortDirection(order)
        except ValueError:
            direction = SortDirection.ASC
        return cls(field=field, direction=direction)


class RowItem(BaseModel):
    """Display-ready listing row."""
    model_config = ConfigDict(frozen=True)

    kind: str  # "directory" | "file"
    filename: str
    link: str
    link_class: str
    modified_display: str
    size_display: str


class BreadcrumbItem(BaseModel):
    """Ancestor directory link; the innermost item has an empty link."""
    model_config = ConfigDict(frozen=True)

    label: str
    link: str = ""


class SortToggleLinks(BaseModel):
    """Direction each column header should request next."""
    model_config = ConfigDict(frozen=True)

    name: SortDirection = SortDirection.ASC
    modified: SortDirection = SortDirection.ASC
    size: SortDirection = SortDirection.ASC


class IndexViewModel(BaseModel):
    """Everything the index template needs, as plain data."""
    model_config = ConfigDict(frozen=True)

    directory: str
    current_directory_link: str
    parent_link: str | None = None
    breadcrumb: list[BreadcrumbItem] = []
    rows: list[RowItem] = []
    sort: SortSpec = SortSpec()
    sort_toggle_links: SortToggleLinks = SortToggleLinks()
    sort_enabled: bool = True
