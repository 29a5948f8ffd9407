import pytest

from cvmattest.errors import AttestationError, ErrorCode
from cvmattest.url import UrlInfo, parse_url, split_url


def test_split_full_url():
    info = split_url("https://example.com:443/attest/path?api-version=1")
    assert info == UrlInfo(
        protocol="https",
        domain="example.com",
        port="443",
        path="/attest/path",
        query="api-version=1",
    )


def test_split_http_without_path():
    info = split_url("http://example.com")
    assert info.protocol == "http"
    assert info.domain == "example.com"
    assert info.path == ""
    assert info.port == ""
    assert info.query == ""


def test_split_without_scheme():
    info = split_url("example.com/a/b")
    assert info.protocol == ""
    assert info.domain == "example.com"
    assert info.path == "/a/b"


def test_parse_url_trims_whitespace():
    assert parse_url("   https://example.com/x  ") == "example.com"


def test_parse_url_with_port():
    assert parse_url("example.com:8080") == "example.com"


def test_empty_url_is_invalid_input():
    with pytest.raises(AttestationError) as info:
        parse_url("")
    assert info.value.code is ErrorCode.ERROR_INVALID_INPUT_PARAMETER


@pytest.mark.parametrize("url", ["https://", "   ", "http://:443/path"])
def test_url_without_domain(url):
    with pytest.raises(AttestationError) as info:
        split_url(url)
    assert info.value.code is ErrorCode.ERROR_PARSING_DNS_INFO


def test_domain_is_substring_of_url():
    url = "https://example.com:1234/p?q=1"
    info = split_url(url)
    assert info.domain in url
    assert url.startswith(info.protocol + "://" + info.domain + ":" + info.port)