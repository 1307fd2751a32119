"""HTTP semantic-convention attributes and span status mapping."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum
from urllib.parse import urlsplit, urlunsplit

from otelkit.netconv import NC, Key, KeyValue, split_host_port

HTTP_CLIENT_IP_KEY = Key("http.client_ip")
HTTP_METHOD_KEY = Key("http.method")
HTTP_REQUEST_CONTENT_LENGTH_KEY = Key("http.request_content_length")
HTTP_RESPONSE_CONTENT_LENGTH_KEY = Key("http.response_content_length")
HTTP_ROUTE_KEY = Key("http.route")
HTTP_STATUS_CODE_KEY = Key("http.status_code")
HTTP_TARGET_KEY = Key("http.target")
HTTP_URL_KEY = Key("http.url")
USER_AGENT_ORIGINAL_KEY = Key("user_agent.original")
HTTP_SCHEME_HTTP = KeyValue("http.scheme", "http")
HTTP_SCHEME_HTTPS = KeyValue("http.scheme", "https")

METHOD_GET = "GET"


class StatusCode(IntEnum):
    """Span status codes."""

    UNSET = 0
    ERROR = 1
    OK = 2


@dataclass
class Request:
    """The parts of an HTTP request that the attribute helpers read.

    Header names are matched case-insensitively; they are stored lower case.
    """

    method: str = ""
    url: str | None = None
    headers: dict[str, str] = field(default_factory=dict)
    host: str = ""
    remote_addr: str = ""
    proto: str = ""
    tls: bool = False
    content_length: int = 0

    def __post_init__(self) -> None:
        self.headers = {name.lower(): value for name, value in self.headers.items()}

    def user_agent(self) -> str:
        """Return the User-Agent header, or an empty string."""
        return self.headers.get("user-agent", "")


@dataclass
class Response:
    """The parts of an HTTP response that the attribute helpers read."""

    status_code: int = 0
    content_length: int = 0


def _url_host(url: str | None) -> str:
    if not url:
        return ""
    return urlsplit(url).netloc.rpartition("@")[2]


def _url_scheme(url: str | None) -> str:
    if not url:
        return ""
    return urlsplit(url).scheme


def _url_without_userinfo(url: str | None) -> str:
    if not url:
        return ""
    parts = urlsplit(url)
    netloc = parts.netloc.rpartition("@")[2]
    return urlunsplit((parts.scheme, netloc, parts.path, parts.query, parts.fragment))


def client_response(resp: Response) -> list[KeyValue]:
    """Return status-code and content-length attributes present in a response."""
    attrs: list[KeyValue] = []
    if resp.status_code > 0:
        attrs.append(HTTP_STATUS_CODE_KEY.int(resp.status_code))
    if resp.content_length > 0:
        attrs.append(HTTP_RESPONSE_CONTENT_LENGTH_KEY.int(resp.content_length))
    return attrs


def _client_peer(req: Request) -> tuple[str, int]:
    peer, p = first_host_port(_url_host(req.url), req.headers.get("host", ""))
    port = required_http_port(_url_scheme(req.url) == "https", p)
    return peer, port


def client_request(req: Request) -> list[KeyValue]:
    """Return trace attributes for an HTTP request made by a client."""
    peer, port = _client_peer(req)
    attrs = [
        method_attribute(req.method),
        HTTP_URL_KEY.string(_url_without_userinfo(req.url)),
        NC.peer_name(peer),
    ]
    if port > 0:
        attrs.append(NC.peer_port(port))
    agent = req.user_agent()
    if agent:
        attrs.append(USER_AGENT_ORIGINAL_KEY.string(agent))
    if req.content_length > 0:
        attrs.append(HTTP_REQUEST_CONTENT_LENGTH_KEY.int(req.content_length))
    return attrs


def client_request_metrics(req: Request) -> list[KeyValue]:
    """Return metric attributes for an HTTP request made by a client."""
    peer, port = _client_peer(req)
    attrs = [method_attribute(req.method), NC.peer_name(peer)]
    if port > 0:
        attrs.append(NC.peer_port(port))
    return attrs


def client_status(code: int) -> tuple[StatusCode, str]:
    """Return the span status for an HTTP status code received by a client."""
    if code < 100 or code >= 600:
        return StatusCode.ERROR, f"Invalid HTTP status code {code}"
    if code >= 400:
        return StatusCode.ERROR, ""
    return StatusCode.UNSET, ""


def server_status(code: int) -> tuple[StatusCode, str]:
    """Return the span status for an HTTP status code sent by a server.

    Codes in the 400-499 range are not errors on the server side.
    """
    if code < 100 or code >= 600:
        return StatusCode.ERROR, f"Invalid HTTP status code {code}"
    if code >= 500:
        return StatusCode.ERROR, ""
    return StatusCode.UNSET, ""


def method_attribute(method: str) -> KeyValue:
    """Return the method attribute, defaulting to GET when empty."""
    return HTTP_METHOD_KEY.string(method or METHOD_GET)


def scheme_attribute(https: bool) -> KeyValue:
    """Return the scheme attribute for a plain or TLS connection."""
    return HTTP_SCHEME_HTTPS if https else HTTP_SCHEME_HTTP


def server_client_ip(x_forwarded_for: str) -> str:
    """Return the first address of an X-Forwarded-For header value."""
    return x_forwarded_for.partition(",")[0]


def required_http_port(https: bool, port: int) -> int:
    """Return the port unless it is missing or the scheme's default, else -1."""
    default = 443 if https else 80
    if port > 0 and port != default:
        return port
    return -1


def first_host_port(*args: str) -> tuple[str, int]:
    """Return the host and port of the first source that yields either."""
    host, port = "", 0
    for hostport in args:
        host, port = split_host_port(hostport)
        if host or port > 0:
            break
    return host, port