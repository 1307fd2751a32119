"""HTTP semantic-convention attributes for requests received by a server."""

from __future__ import annotations

from urllib.parse import urlsplit

from otelkit.httpconv import (
    HTTP_CLIENT_IP_KEY,
    HTTP_METHOD_KEY,
    HTTP_TARGET_KEY,
    USER_AGENT_ORIGINAL_KEY,
    Request,
    method_attribute,
    required_http_port,
    scheme_attribute,
    server_client_ip,
)
from otelkit.netconv import NC, KeyValue, net_protocol, split_host_port

_KNOWN_METHODS = frozenset(
    {"CONNECT", "DELETE", "GET", "HEAD", "OPTIONS", "PATCH", "POST", "PUT", "TRACE"}
)


def _server_host_port(server: str, req: Request) -> tuple[str, int]:
    """Resolve the host name and the port to report for a server request.

    A non-empty server name takes priority; its port falls back to the one
    in the request's Host when the server name carries none.
    """
    if not server:
        host, port = split_host_port(req.host)
    else:
        host, port = split_host_port(server)
        if port < 0:
            _, port = split_host_port(req.host)
    return host, required_http_port(req.tls, port)


def _url_path(url: str | None) -> str:
    if url is None:
        return ""
    return urlsplit(url).path


def server_request(server: str, req: Request) -> list[KeyValue]:
    """Return trace attributes for an HTTP request received by a server.

    ``server`` is the primary server name if known, or an empty string to
    use the request's Host instead.
    """
    host, host_port = _server_host_port(server, req)
    attrs = [
        method_attribute(req.method),
        scheme_attribute(req.tls),
        NC.host_name(host),
    ]
    if host_port > 0:
        attrs.append(NC.host_port(host_port))

    peer, peer_port = split_host_port(req.remote_addr)
    if peer:
        attrs.append(NC.sock_peer_addr(peer))
        if peer_port > 0:
            attrs.append(NC.sock_peer_port(peer_port))

    agent = req.user_agent()
    if agent:
        attrs.append(USER_AGENT_ORIGINAL_KEY.string(agent))

    client_ip = server_client_ip(req.headers.get("x-forwarded-for", ""))
    if client_ip:
        attrs.append(HTTP_CLIENT_IP_KEY.string(client_ip))

    target = _url_path(req.url)
    if target:
        attrs.append(HTTP_TARGET_KEY.string(target))

    proto_name, proto_version = net_protocol(req.proto)
    if proto_name and proto_name != "http":
        attrs.append(NC.protocol_name_key.string(proto_name))
    if proto_version:
        attrs.append(NC.protocol_version_key.string(proto_version))
    return attrs


def server_request_metrics(server: str, req: Request) -> list[KeyValue]:
    """Return metric attributes for an HTTP request received by a server."""
    host, host_port = _server_host_port(server, req)
    attrs = [
        method_metric(req.method),
        scheme_attribute(req.tls),
        NC.host_name(host),
    ]
    if host_port > 0:
        attrs.append(NC.host_port(host_port))

    proto_name, proto_version = net_protocol(req.proto)
    if proto_name:
        attrs.append(NC.protocol_name_key.string(proto_name))
    if proto_version:
        attrs.append(NC.protocol_version_key.string(proto_version))
    return attrs


def method_metric(method: str) -> KeyValue:
    """Return the method attribute for metrics; unknown methods become "_OTHER"."""
    upper = method.upper()
    if upper not in _KNOWN_METHODS:
        upper = "_OTHER"
    return HTTP_METHOD_KEY.string(upper)