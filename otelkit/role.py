"""Instrumentation roles and interceptor descriptions for gRPC."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum


class Role(IntEnum):
    """Whether the instrumentation runs on the server or the client side."""

    SERVER = 0
    CLIENT = 1

    def __str__(self) -> str:
        return self.name.lower()

    def is_server(self) -> bool:
        return self is Role.SERVER


class InterceptorType(IntEnum):
    """The kind of gRPC interceptor an InterceptorInfo describes."""

    UNDEFINED = 0
    UNARY_CLIENT = 1
    STREAM_CLIENT = 2
    UNARY_SERVER = 3
    STREAM_SERVER = 4


@dataclass
class InterceptorInfo:
    """Arguments shared by the four kinds of gRPC interceptors."""

    method: str = ""
    unary_server_info: object | None = None
    stream_server_info: object | None = None
    type: InterceptorType = InterceptorType.UNDEFINED