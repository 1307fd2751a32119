import pytest

from otelkit.grpcstatus import GrpcCode, server_status
from otelkit.httpconv import StatusCode

ERROR_CODES = [
    GrpcCode.UNKNOWN,
    GrpcCode.DEADLINE_EXCEEDED,
    GrpcCode.UNIMPLEMENTED,
    GrpcCode.INTERNAL,
    GrpcCode.UNAVAILABLE,
    GrpcCode.DATA_LOSS,
]


@pytest.mark.parametrize("code", ERROR_CODES)
def test_server_error_codes_carry_message(code):
    assert server_status(code, "boom") == (StatusCode.ERROR, "boom")


@pytest.mark.parametrize("code", [c for c in GrpcCode if c not in ERROR_CODES])
def test_other_codes_are_unset(code):
    assert server_status(code, "ignored") == (StatusCode.UNSET, "")


def test_plain_int_code_is_accepted():
    assert server_status(int(GrpcCode.UNAVAILABLE), "down") == (StatusCode.ERROR, "down")


def test_unrecognised_int_code_is_unset():
    assert server_status(max(GrpcCode) + 1, "odd") == (StatusCode.UNSET, "")


def test_ok_is_zero():
    assert GrpcCode.OK == 0
    assert GrpcCode(0) is GrpcCode.OK