import pytest

from emlanalyzer.extractor.urls import (
    FRAGMENT_PROTOCOL,
    extract_urls,
    is_fragment,
    is_valid_url,
    url_format,
    url_protocol,
)


@pytest.mark.parametrize(
    "value, expected",
    [
        ("https://example.com/logo.png", True),
        ("http://example.com", True),
        ("mailto:someone@example.com", True),
        ("tel:+123456", True),
        ("cid:logo123", True),
        ("https://", False),
        ("http://[::1", False),
        ("http://a..b/x.gif", False),
        ("http://exa mple.com/a.png", False),
        ("https://b\u00fccher.example/logo.png", True),
        ("/relative/path.png", False),
        ("logo.png", False),
        ("#section", False),
        ("", False),
        (None, False),
    ],
)
def test_is_valid_url(value, expected) -> None:
    assert is_valid_url(value) is expected


def test_url_protocol_records_scheme_with_colon() -> None:
    assert url_protocol("HTTPS://Example.com/a") == "https:"
    assert url_protocol("mailto:a@example.com") == "mailto:"


def test_url_protocol_tags_fragments() -> None:
    assert is_fragment("#top")
    assert url_protocol("#top") == FRAGMENT_PROTOCOL


@pytest.mark.parametrize(
    "value, expected",
    [
        ("https://cdn.example.com/img/logo.png", ".png"),
        ("https://cdn.example.com/img/logo.JPG?w=200&h=100", ".JPG"),
        ("https://cdn.example.com/style.css#v2", ".css"),
        ("https://cdn.example.com/pixel?id=1.2", None),
        ("https://example.com", None),
        ("https://example.com/images/", None),
    ],
)
def test_url_format_uses_path_extension(value, expected) -> None:
    assert url_format(value) == expected


def test_extract_urls_tokenizes_srcset() -> None:
    srcset = "https://cdn.example.com/a.png 1x, https://cdn.example.com/b.png 2x, local.png 3x"

    assert extract_urls(srcset) == [
        "https://cdn.example.com/a.png",
        "https://cdn.example.com/b.png",
    ]


def test_extract_urls_from_css_url_values() -> None:
    value = 'url("https://cdn.example.com/bg.gif") no-repeat, url(https://cdn.example.com/x.png)'

    assert extract_urls(value) == [
        "https://cdn.example.com/bg.gif",
        "https://cdn.example.com/x.png",
    ]


def test_extract_urls_handles_empty_input() -> None:
    assert extract_urls(None) == []
    assert extract_urls("no links here") == []
