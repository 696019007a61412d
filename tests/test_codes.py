import pytest

from echoctl.codes import (
    DevType,
    EccsError,
    ErrorCode,
    EventType,
    VERSION_NUM,
    error_str,
    get_version,
)


@pytest.mark.parametrize(
    "code, text",
    [
        (ErrorCode.SUCCESS, "Success"),
        (ErrorCode.FAILED, "General Failure"),
        (ErrorCode.NOT_INIT, "SDK Not Initialized"),
        (ErrorCode.DEV_NOT_FOUND, "Device Not Found / Invalid Handle"),
        (ErrorCode.DEV_SEND_FAILED, "Send Data Failed"),
        (ErrorCode.CFG_KEY_NOT_FOUND, "Config Key Not Found"),
        (ErrorCode.AUTH_EXPIRED, "License Expired"),
        (ErrorCode.PERMISSION_DENIED, "Permission Denied"),
    ],
)
def test_error_str_known(code, text):
    assert error_str(code) == text


def test_error_str_accepts_plain_int():
    assert error_str(102) == "Device Busy"


@pytest.mark.parametrize("code", [7, 99, 105, 1000, -1])
def test_error_str_unknown(code):
    assert error_str(code) == "Unknown Error"


def test_every_code_has_description():
    descriptions = [error_str(code) for code in ErrorCode]
    assert "Unknown Error" not in descriptions
    assert len(set(descriptions)) == len(list(ErrorCode))


def test_code_values_follow_header():
    assert ErrorCode(100) is ErrorCode.DEV_NOT_FOUND
    assert ErrorCode(200) is ErrorCode.CFG_LOAD_FAILED
    assert ErrorCode(300) is ErrorCode.AUTH_EXPIRED
    assert DevType(5) is DevType.CAMERA
    assert EventType(3) is EventType.SOUND_FINISH


def test_version():
    assert get_version() == "1.0.0"
    assert VERSION_NUM == 10000


def test_error_default_message():
    err = EccsError(ErrorCode.TIMEOUT)
    assert err.code is ErrorCode.TIMEOUT
    assert err.message == "Timeout"
    assert str(err) == "Timeout"


def test_error_custom_message_and_raise():
    err = EccsError(ErrorCode.DEV_OFFLINE, "light is gone")
    assert err.code == ErrorCode.DEV_OFFLINE
    assert err.message == "light is gone"
    assert str(err) == "light is gone"
    with pytest.raises(EccsError) as info:
        raise err
    assert info.value is err


def test_error_unknown_code_kept():
    err = EccsError(4242)
    assert err.code == 4242
    assert err.message == "Unknown Error"