from collections import Counter

import pytest

from otelkit.httpconv import Request
from otelkit.httpserver import method_metric, server_request, server_request_metrics
from otelkit.netconv import KeyValue

SERVER_HOST = "127.0.0.1"
SERVER_PORT = 45678
PEER_HOST = "127.0.0.1"
PEER_PORT = 51234


def _served_request(**extra):
    return Request(
        method="GET",
        url="/",
        host=f"{SERVER_HOST}:{SERVER_PORT}",
        remote_addr=f"{PEER_HOST}:{PEER_PORT}",
        proto="HTTP/1.1",
        headers={"User-Agent": "Go-http-client/1.1", **extra},
    )


def test_server_request():
    req = _served_request(**{"X-Forwarded-For": "127.0.0.5"})
    want = [
        KeyValue("http.method", "GET"),
        KeyValue("http.scheme", "http"),
        KeyValue("net.host.name", SERVER_HOST),
        KeyValue("net.host.port", SERVER_PORT),
        KeyValue("net.sock.peer.addr", PEER_HOST),
        KeyValue("net.sock.peer.port", PEER_PORT),
        KeyValue("user_agent.original", "Go-http-client/1.1"),
        KeyValue("http.client_ip", "127.0.0.5"),
        KeyValue("net.protocol.version", "1.1"),
        KeyValue("http.target", "/"),
    ]
    assert Counter(server_request("", req)) == Counter(want)


def test_server_request_metrics():
    req = _served_request()
    want = [
        KeyValue("http.method", "GET"),
        KeyValue("http.scheme", "http"),
        KeyValue("net.host.name", SERVER_HOST),
        KeyValue("net.host.port", SERVER_PORT),
        KeyValue("net.protocol.name", "http"),
        KeyValue("net.protocol.version", "1.1"),
    ]
    assert Counter(server_request_metrics("", req)) == Counter(want)


def test_server_name_with_port():
    got = server_request("test.semconv.server:8080", Request())
    assert KeyValue("net.host.name", "test.semconv.server") in got
    assert KeyValue("net.host.port", 8080) in got


def test_server_name_takes_port_from_request_host():
    req = Request(host="alt.host.name:8080")
    got = server_request("test.semconv.server", req)
    assert KeyValue("net.host.name", "test.semconv.server") in got
    assert KeyValue("net.host.port", 8080) in got


def test_server_request_fails_gracefully():
    want = [
        KeyValue("http.method", "GET"),
        KeyValue("http.scheme", "http"),
        KeyValue("net.host.name", ""),
    ]
    assert Counter(server_request("", Request())) == Counter(want)


def test_server_request_metrics_empty_request():
    want = [
        KeyValue("http.method", "_OTHER"),
        KeyValue("http.scheme", "http"),
        KeyValue("net.host.name", ""),
    ]
    assert server_request_metrics("", Request()) == want


def test_server_request_tls_default_port_omitted():
    req = Request(method="POST", host="example.com:443", tls=True, proto="HTTP/2")
    got = server_request("", req)
    assert KeyValue("http.scheme", "https") in got
    assert KeyValue("net.host.name", "example.com") in got
    assert [kv for kv in got if kv.key == "net.host.port"] == []
    assert KeyValue("net.protocol.version", "2") in got


def test_server_request_non_http_protocol_name():
    req = Request(proto="SPDY/3")
    got = server_request("", req)
    assert KeyValue("net.protocol.name", "spdy") in got
    assert KeyValue("net.protocol.version", "3") in got


def test_server_request_omits_http_protocol_name():
    got = server_request("", Request(proto="HTTP/1.0"))
    assert [kv for kv in got if kv.key == "net.protocol.name"] == []
    assert KeyValue("net.protocol.version", "1.0") in got


def test_server_request_target_excludes_query():
    got = server_request("", Request(url="/path/to?x=1"))
    assert KeyValue("http.target", "/path/to") in got


@pytest.mark.parametrize(
    ("method", "want"),
    [
        ("GET", "GET"),
        ("get", "GET"),
        ("post", "POST"),
        ("PATCH", "PATCH"),
        ("trace", "TRACE"),
        ("garbage", "_OTHER"),
        ("", "_OTHER"),
    ],
)
def test_method_metric(method, want):
    assert method_metric(method) == KeyValue("http.method", want)