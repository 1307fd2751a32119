import pytest

from otelkit.role import InterceptorInfo, InterceptorType, Role


def test_role_names():
    assert str(Role(0)) == "server"
    assert str(Role(1)) == "client"


def test_role_is_server():
    assert Role.SERVER.is_server() is True
    assert Role.CLIENT.is_server() is False


def test_role_from_value_round_trip():
    for role in Role:
        assert Role(int(role)) is role


def test_role_out_of_range():
    with pytest.raises(ValueError):
        Role(2)


def test_interceptor_type_order():
    assert [t.value for t in InterceptorType] == list(range(len(InterceptorType)))
    assert InterceptorType(0) is InterceptorType.UNDEFINED


def test_interceptor_info_defaults():
    info = InterceptorInfo()
    assert info.type is InterceptorType.UNDEFINED
    assert info.method == ""
    assert info.unary_server_info is None


def test_interceptor_info_holds_values():
    info = InterceptorInfo(method="/pkg.Svc/Method", type=InterceptorType.UNARY_CLIENT)
    assert info.method == "/pkg.Svc/Method"
    assert info.type is InterceptorType.UNARY_CLIENT