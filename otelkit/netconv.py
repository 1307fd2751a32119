"""Network semantic-convention attributes and host/port parsing helpers."""

from __future__ import annotations

import ipaddress
from dataclasses import dataclass, field

_DIGITS = frozenset("0123456789")
_MAX_PORT = 0xFFFF


@dataclass(frozen=True)
class KeyValue:
    """A single attribute: a key paired with a value."""

    key: str
    value: object


@dataclass(frozen=True)
class Key:
    """An attribute key that builds typed key/value pairs."""

    name: str

    def string(self, value: str) -> KeyValue:
        return KeyValue(self.name, str(value))

    def int(self, value: int) -> KeyValue:
        return KeyValue(self.name, int(value))


@dataclass(frozen=True)
class NetConv:
    """Network attribute keys for one version of the semantic conventions."""

    host_name_key: Key = Key("net.host.name")
    host_port_key: Key = Key("net.host.port")
    peer_name_key: Key = Key("net.peer.name")
    peer_port_key: Key = Key("net.peer.port")
    protocol_name_key: Key = Key("net.protocol.name")
    protocol_version_key: Key = Key("net.protocol.version")
    sock_family_key: Key = Key("net.sock.family")
    sock_peer_addr_key: Key = Key("net.sock.peer.addr")
    sock_peer_port_key: Key = Key("net.sock.peer.port")
    sock_host_addr_key: Key = Key("net.sock.host.addr")
    sock_host_port_key: Key = Key("net.sock.host.port")
    transport_other: KeyValue = field(default=KeyValue("net.transport", "other"))
    transport_tcp: KeyValue = field(default=KeyValue("net.transport", "ip_tcp"))
    transport_udp: KeyValue = field(default=KeyValue("net.transport", "ip_udp"))
    transport_inproc: KeyValue = field(default=KeyValue("net.transport", "inproc"))

    def transport(self, network: str) -> KeyValue:
        """Return the transport attribute for a dial-style network name."""
        if network in ("tcp", "tcp4", "tcp6"):
            return self.transport_tcp
        if network in ("udp", "udp4", "udp6"):
            return self.transport_udp
        if network in ("unix", "unixgram", "unixpacket"):
            return self.transport_inproc
        return self.transport_other

    def host(self, address: str) -> list[KeyValue]:
        """Return host name and port attributes for a host address."""
        h, p = split_host_port(address)
        if not h:
            return []
        attrs = [self.host_name(h)]
        if p > 0:
            attrs.append(self.host_port(p))
        return attrs

    def host_name(self, name: str) -> KeyValue:
        return self.host_name_key.string(name)

    def host_port(self, port: int) -> KeyValue:
        return self.host_port_key.int(port)

    def peer(self, address: str) -> list[KeyValue]:
        """Return peer name and port attributes for a peer address."""
        h, p = split_host_port(address)
        if not h:
            return []
        attrs = [self.peer_name(h)]
        if p > 0:
            attrs.append(self.peer_port(p))
        return attrs

    def peer_name(self, name: str) -> KeyValue:
        return self.peer_name_key.string(name)

    def peer_port(self, port: int) -> KeyValue:
        return self.peer_port_key.int(port)

    def sock_peer_addr(self, addr: str) -> KeyValue:
        return self.sock_peer_addr_key.string(addr)

    def sock_peer_port(self, port: int) -> KeyValue:
        return self.sock_peer_port_key.int(port)


NC = NetConv()


def net_transport(network: str) -> KeyValue:
    """Return the transport attribute describing the given network."""
    return NC.transport(network)


def family(network: str, address: str) -> str:
    """Return the socket family ("unix", "inet", "inet6") or an empty string."""
    if network in ("unix", "unixgram", "unixpacket"):
        return "unix"
    if "%" in address:
        return ""
    try:
        ip = ipaddress.ip_address(address)
    except ValueError:
        return ""
    if ip.version == 4:
        return "inet"
    if ip.ipv4_mapped is not None:
        return "inet"
    return "inet6"


class _AddressError(ValueError):
    pass


def _split(hostport: str) -> tuple[str, str]:
    """Split "host:port" strictly, raising _AddressError on malformed input."""
    i = hostport.rfind(":")
    if i < 0:
        raise _AddressError("missing port in address")
    start_host, start_port = 0, 0
    if hostport.startswith("["):
        end = hostport.find("]")
        if end < 0:
            raise _AddressError("missing ']' in address")
        if end + 1 == len(hostport):
            raise _AddressError("missing port in address")
        if end + 1 != i:
            if hostport[end + 1] == ":":
                raise _AddressError("too many colons in address")
            raise _AddressError("missing port in address")
        host = hostport[1:end]
        start_host, start_port = 1, end + 1
    else:
        host = hostport[:i]
        if ":" in host:
            raise _AddressError("too many colons in address")
    if "[" in hostport[start_host:]:
        raise _AddressError("unexpected '[' in address")
    if "]" in hostport[start_port:]:
        raise _AddressError("unexpected ']' in address")
    return host, hostport[i + 1:]


def split_host_port(hostport: str) -> tuple[str, int]:
    """Split an address into host and port.

    The host is empty when missing or unparsable; the port is -1 when
    missing or unparsable.
    """
    host, port = "", -1
    if hostport.startswith("["):
        addr_end = hostport.rfind("]")
        if addr_end < 0:
            return host, port
        if ":" not in hostport[addr_end:]:
            return hostport[1:addr_end], port
    elif ":" not in hostport:
        return hostport, port

    try:
        host, port_text = _split(hostport)
    except _AddressError:
        return "", port

    if not port_text or not set(port_text) <= _DIGITS:
        return host, port
    value = int(port_text)
    if value > _MAX_PORT:
        return host, port
    return host, value


def net_protocol(proto: str) -> tuple[str, str]:
    """Split a protocol string such as "HTTP/1.1" into a lower-case name and version."""
    name, _, version = proto.partition("/")
    return name.lower(), version