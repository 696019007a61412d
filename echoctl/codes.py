"""Result codes, device and event types, and the SDK version."""

from __future__ import annotations

from enum import IntEnum

VERSION_MAJOR = 1
VERSION_MINOR = 0
VERSION_PATCH = 0
VERSION_STR = f"{VERSION_MAJOR}.{VERSION_MINOR}.{VERSION_PATCH}"
VERSION_NUM = VERSION_MAJOR * 10000 + VERSION_MINOR * 100 + VERSION_PATCH


class ErrorCode(IntEnum):
    """Unified result codes."""

    SUCCESS = 0

    # General (1 - 99)
    FAILED = 1
    INVALID_PARAM = 2
    NOT_INIT = 3
    NOT_SUPPORTED = 4
    TIMEOUT = 5
    MALLOC = 6

    # Device (100 - 199)
    DEV_NOT_FOUND = 100
    DEV_OFFLINE = 101
    DEV_BUSY = 102
    DEV_TYPE_MISMATCH = 103
    DEV_SEND_FAILED = 104

    # Configuration and files (200 - 299)
    CFG_LOAD_FAILED = 200
    CFG_WRITE_FAILED = 201
    CFG_KEY_NOT_FOUND = 202

    # Licensing and system (300 - 399)
    AUTH_EXPIRED = 300
    PERMISSION_DENIED = 301


class DevType(IntEnum):
    """Kinds of controlled devices."""

    UNKNOWN = 0
    LIGHT = 1
    SOUND = 2
    PTZ = 3
    ULTRASONIC = 4
    CAMERA = 5


class EventType(IntEnum):
    """Kinds of events delivered to callbacks."""

    UNKNOWN = 0
    STATUS_CHANGE = 1
    PTZ_ANGLE = 2
    SOUND_FINISH = 3


_DESCRIPTIONS = {
    ErrorCode.SUCCESS: "Success",
    ErrorCode.FAILED: "General Failure",
    ErrorCode.INVALID_PARAM: "Invalid Parameter",
    ErrorCode.NOT_INIT: "SDK Not Initialized",
    ErrorCode.NOT_SUPPORTED: "Operation Not Supported",
    ErrorCode.TIMEOUT: "Timeout",
    ErrorCode.MALLOC: "Memory Allocation Failed",
    ErrorCode.DEV_NOT_FOUND: "Device Not Found / Invalid Handle",
    ErrorCode.DEV_OFFLINE: "Device Offline",
    ErrorCode.DEV_BUSY: "Device Busy",
    ErrorCode.DEV_TYPE_MISMATCH: "Device Type Mismatch",
    ErrorCode.DEV_SEND_FAILED: "Send Data Failed",
    ErrorCode.CFG_LOAD_FAILED: "Config Load Failed",
    ErrorCode.CFG_WRITE_FAILED: "Config Write Failed",
    ErrorCode.CFG_KEY_NOT_FOUND: "Config Key Not Found",
    ErrorCode.AUTH_EXPIRED: "License Expired",
    ErrorCode.PERMISSION_DENIED: "Permission Denied",
}


def error_str(code: int) -> str:
    """Return the human-readable description of a result code."""
    try:
        return _DESCRIPTIONS[ErrorCode(code)]
    except ValueError:
        return "Unknown Error"


def get_version() -> str:
    """Return the SDK version string."""
    return VERSION_STR


class EccsError(Exception):
    """An operation failed with one of the unified result codes."""

    def __init__(self, code: int, message: str | None = None) -> None:
        try:
            self.code: int = ErrorCode(code)
        except ValueError:
            self.code = int(code)
        self.message = message if message is not None else error_str(code)
        super().__init__(self.message)