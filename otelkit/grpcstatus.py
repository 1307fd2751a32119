"""Span status mapping for gRPC status codes seen by a server."""

from __future__ import annotations

from enum import IntEnum

from otelkit.httpconv import StatusCode
from otelkit.netconv import Key

SCOPE_NAME = "otelkit.grpc"
GRPC_STATUS_CODE_KEY = Key("rpc.grpc.status_code")


class GrpcCode(IntEnum):
    """The canonical gRPC status codes."""

    OK = 0
    CANCELLED = 1
    UNKNOWN = 2
    INVALID_ARGUMENT = 3
    DEADLINE_EXCEEDED = 4
    NOT_FOUND = 5
    ALREADY_EXISTS = 6
    PERMISSION_DENIED = 7
    RESOURCE_EXHAUSTED = 8
    FAILED_PRECONDITION = 9
    ABORTED = 10
    OUT_OF_RANGE = 11
    UNIMPLEMENTED = 12
    INTERNAL = 13
    UNAVAILABLE = 14
    DATA_LOSS = 15
    UNAUTHENTICATED = 16


_SERVER_ERROR_CODES = frozenset(
    {
        GrpcCode.UNKNOWN,
        GrpcCode.DEADLINE_EXCEEDED,
        GrpcCode.UNIMPLEMENTED,
        GrpcCode.INTERNAL,
        GrpcCode.UNAVAILABLE,
        GrpcCode.DATA_LOSS,
    }
)


def server_status(code: int, message: str) -> tuple[StatusCode, str]:
    """Return the span status and message for a gRPC status on the server side.

    Unknown, DeadlineExceeded, Unimplemented, Internal, Unavailable and
    DataLoss are errors carrying the status message; every other code
    leaves the span status unset with an empty message.
    """
    if code in _SERVER_ERROR_CODES:
        return StatusCode.ERROR, message
    return StatusCode.UNSET, ""