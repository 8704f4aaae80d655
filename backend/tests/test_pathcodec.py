"""Tests for URL path decoding / encoding."""

import pytest

from shs.errors import DecodingError
from shs.utils.pathcodec import decode, encode


class TestDecode:
    def test_root(self):
        assert decode("/") == ()
        assert decode("") == ()

    def test_collapses_empty_segments(self):
        assert decode("//docs///img/") == ("docs", "img")

    def test_percent_decoding(self):
        assert decode("/my%20files/r%C3%A9sum%C3%A9.pdf") == ("my files", "résumé.pdf")

    def test_encoded_slash_stays_in_segment(self):
        assert decode("/a%2Fb") == ("a/b",)

    def test_dot_segments_are_returned(self):
        assert decode("/../etc/passwd") == ("..", "etc", "passwd")

    def test_invalid_utf8(self):
        with pytest.raises(DecodingError):
            decode("/%FF%FE")

    @pytest.mark.parametrize("raw", ["/100%", "/a%2", "/%zz"])
    def test_malformed_percent(self, raw):
        with pytest.raises(DecodingError):
            decode(raw)


class TestEncode:
    def test_root_link(self):
        assert encode((), trailing_slash=True, leading_slash=True) == "/"

    def test_plain(self):
        assert encode(["docs", "img"]) == "docs/img"
        assert encode(["docs", "img"], trailing_slash=True, leading_slash=True) == "/docs/img/"

    def test_unsafe_characters(self):
        assert encode(["a b", "c?d", "e#f", "100%"]) == "a%20b/c%3Fd/e%23f/100%25"

    def test_slash_inside_segment_is_encoded(self):
        assert encode(["a/b"]) == "a%2Fb"

    def test_unicode(self):
        assert encode(["日本"]) == "%E6%97%A5%E6%9C%AC"

    def test_sub_delims_kept(self):
        assert encode(["a+b=c&d@e"]) == "a+b=c&d@e"

    def test_empty_trailing_segment_gives_slash(self):
        assert encode(["docs", "img", ""], leading_slash=True) == "/docs/img/"


@pytest.mark.parametrize(
    "segments",
    [
        (),
        ("docs",),
        ("my files", "résumé.pdf"),
        ("100%", "a?b#c", "tab\there"),
        ("日本語", "emoji 🎉"),
        ("..", "."),
    ],
)
def test_round_trip(segments):
    assert decode(encode(segments)) == segments
