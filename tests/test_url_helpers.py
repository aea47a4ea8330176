from types import SimpleNamespace

import pytest

from factcheck.services.common.url_helpers import dedup_by_url, is_redirect_wrapper, normalize_href


@pytest.mark.parametrize("raw", [None, "", "   "])
def test_normalize_href_rejects_empty(raw):
    assert normalize_href(raw) is None


def test_normalize_href_fixes_protocol_relative():
    assert normalize_href("//example.com/page") == "https://example.com/page"


def test_normalize_href_adds_missing_scheme():
    assert normalize_href("example.com/page") == "https://example.com/page"


def test_normalize_href_keeps_http_urls():
    assert normalize_href("http://example.com/a?b=1") == "http://example.com/a?b=1"


def test_normalize_href_unwraps_duckduckgo_redirect():
    raw = "//duckduckgo.com/l/?uddg=https%3A%2F%2Fwww.nasa.gov%2Fgreat-wall%3Fx%3D1&rut=abc123"
    assert normalize_href(raw) == "https://www.nasa.gov/great-wall?x=1"


def test_normalize_href_falls_back_when_wrapper_cannot_be_decoded():
    raw = "https://duckduckgo.com/l/?uddg=%FF%FE%FD"
    assert normalize_href(raw) == raw


def test_normalize_href_falls_back_when_wrapper_target_is_blank():
    raw = "https://duckduckgo.com/l/?uddg=&rut=abc"
    assert is_redirect_wrapper(raw)
    assert normalize_href(raw) == raw


@pytest.mark.parametrize(
    "raw",
    [
        "example.com",
        "//cdn.example.com/x",
        "www.example.org/path?q=1",
        "duckduckgo.com/l/?uddg=example.net%2Fpage",
    ],
)
def test_normalize_href_never_returns_relative_url(raw):
    assert normalize_href(raw).startswith(("http://", "https://"))


def test_dedup_by_url_keeps_first_occurrence_and_drops_missing_urls():
    items = [
        SimpleNamespace(url="https://a.com", tag="first"),
        SimpleNamespace(url="", tag="empty"),
        SimpleNamespace(url="https://b.com", tag="b"),
        SimpleNamespace(url="https://a.com", tag="second"),
        SimpleNamespace(url=None, tag="none"),
    ]

    result = dedup_by_url(items)

    assert [item.tag for item in result] == ["first", "b"]


@pytest.mark.parametrize(
    "raw",
    [
        "/search?q=great+wall&tbm=isch",
        "/",
        "///no-host/path",
        "https://duckduckgo.com/l/?uddg=%2Flocal%2Fpath",
    ],
)
def test_normalize_href_rejects_links_without_host(raw):
    assert normalize_href(raw) is None
