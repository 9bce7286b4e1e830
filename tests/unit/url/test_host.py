from __future__ import annotations

import pytest

from url_builder.url.host import HostParts, parse_host


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        pytest.param("api.example.com", HostParts("api.example.com"), id="bare_host"),
        pytest.param("example.com/", HostParts("example.com"), id="trailing_slash"),
        pytest.param("localhost:8080", HostParts("localhost", port=8080), id="host_port"),
        pytest.param("192.168.0.10:9000", HostParts("192.168.0.10", port=9000), id="ip_port"),
        pytest.param("localhost:abc", HostParts("localhost"), id="non_numeric_port"),
        pytest.param(
            "https://example.com:1500/api/users",
            HostParts("example.com", scheme="https", port=1500, path="/api/users"),
            id="full_url",
        ),
        pytest.param("http://example.com:80", HostParts("example.com", scheme="http"), id="http_default_port"),
        pytest.param("https://example.com:443/", HostParts("example.com", scheme="https"), id="https_default_port"),
        pytest.param("https://example.com:80", HostParts("example.com", scheme="https", port=80), id="https_on_80"),
        pytest.param(
            "ftp://files.example.com:21/pub",
            HostParts("files.example.com", port=21, path="/pub"),
            id="unsupported_scheme",
        ),
        pytest.param("https://user:pw@example.com", HostParts("example.com", scheme="https"), id="userinfo_dropped"),
        pytest.param("HTTPS://Example.com", HostParts("Example.com", scheme="https"), id="host_case_kept"),
        pytest.param('https://example.com"api', HostParts("example.com", scheme="https", path="/api"), id="quote_as_slash"),
        pytest.param("https://example.com/search?q=1#top", HostParts("example.com", scheme="https", path="/search"), id="query_ignored"),
    ],
)
def test_parse_host(value: str, expected: HostParts) -> None:
    assert parse_host(value) == expected


def test_parse_host_tolerates_unparseable_url() -> None:
    result = parse_host("https://[::1")

    assert result.port == 0
    assert result.path == ""
