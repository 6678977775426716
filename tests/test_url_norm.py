import pytest

from feedstore.utils.url_norm import normalize_url


def test_lowercases_scheme_and_host_and_drops_default_port() -> None:
    assert normalize_url("HTTPS://Blog.Example.COM:443/Feed") == "https://blog.example.com/Feed"
    assert normalize_url("http://example.com:80/rss") == "http://example.com/rss"


def test_keeps_non_default_port() -> None:
    assert normalize_url("http://example.com:8080/rss") == "http://example.com:8080/rss"


def test_trailing_slash_and_query_order_are_canonical() -> None:
    a = normalize_url("https://example.com/feed/?b=2&a=1")
    b = normalize_url("https://example.com/feed?a=1&b=2")
    assert a == b == "https://example.com/feed?a=1&b=2"


def test_strips_www_tracking_params_and_duplicate_slashes() -> None:
    assert normalize_url("https://www.example.com//blog//feed?utm_source=x&page=2") == "https://example.com/blog/feed?page=2"


def test_bare_host_defaults_to_http() -> None:
    assert normalize_url("example.com/feed") == "http://example.com/feed"
    assert normalize_url("  http://example.com/  ") == "http://example.com"


def test_unescapes_html_entities() -> None:
    assert normalize_url("https://example.com/rss?a=1&amp;b=2") == "https://example.com/rss?a=1&b=2"


@pytest.mark.parametrize("bad", ["", "   ", "http://", "http://example.com:notaport/feed", None])
def test_rejects_unusable_input(bad) -> None:
    with pytest.raises(ValueError):
        normalize_url(bad)


def test_repeated_query_keys_are_kept() -> None:
    assert normalize_url("https://example.com/rss?tag=b&tag=a") == "https://example.com/rss?tag=a&tag=b"
    assert normalize_url("https://example.com/rss?tag=a&tag=b") != normalize_url("https://example.com/rss?tag=b")


def test_ipv6_host_keeps_brackets() -> None:
    assert normalize_url("http://[::1]:8080/feed") == "http://[::1]:8080/feed"
    assert normalize_url("http://[::1]:80/feed") == "http://[::1]/feed"
    assert normalize_url("http://[::1]:8080/feed") != normalize_url("http://[::1:8080]/feed")
