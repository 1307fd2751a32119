"""Parsing of gRPC full method names into span names and attributes."""

from __future__ import annotations

from otelkit.netconv import Key, KeyValue

RPC_SERVICE_KEY = Key("rpc.service")
RPC_METHOD_KEY = Key("rpc.method")


def parse_full_method(full_method: str) -> tuple[str, list[KeyValue]]:
    """Return a span name and the RPC attributes for "/package.service/method".

    Names that do not follow that form are returned with no attributes.
    """
    if not full_method.startswith("/"):
        return full_method, []
    name = full_method[1:]
    service, sep, method = name.rpartition("/")
    if not sep:
        return name, []
    attrs: list[KeyValue] = []
    if service:
        attrs.append(RPC_SERVICE_KEY.string(service))
    if method:
        attrs.append(RPC_METHOD_KEY.string(method))
    return name, attrs