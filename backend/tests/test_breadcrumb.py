"""Tests for breadcrumb construction."""

from shs.schemas.index import BreadcrumbItem
from shs.services.breadcrumb import build_breadcrumb


def test_root_has_no_breadcrumb():
    assert build_breadcrumb(()) == []


def test_single_level():
    assert build_breadcrumb(("docs",)) == [BreadcrumbItem(label="docs", link="")]


def test_three_levels():
    assert build_breadcrumb(("a", "b", "c")) == [
        BreadcrumbItem(label="a", link="/a/"),
        BreadcrumbItem(label="b", link="/a/b/"),
        BreadcrumbItem(label="c", link=""),
    ]


def test_links_are_encoded_labels_are_not():
    trail = build_breadcrumb(("my docs", "100%", "here"))
    assert [item.label for item in trail] == ["my docs", "100%", "here"]
    assert [item.link for item in trail] == ["/my%20docs/", "/my%20docs/100%25/", ""]
