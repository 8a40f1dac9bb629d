"""
Shared codes used across layers (domain/infrastructure).

This package exposes AcquiringCode at `sberbank_acquiring.shared.codes` and
keeps gateway lookup tables under `currency` and `order_status`.
"""
from enum import IntEnum


class AcquiringCode(IntEnum):
    """Library error codes (single source of truth)."""

    # Success, same sentinel the gateway uses in errorCode
    SUCCESS = 0

    # Configuration errors (1xxxx)
    CONFIGURATION_ERROR = 10000
    UNKNOWN_OPTION = 10001
    CREDENTIALS_CONFLICT = 10002
    MISSING_CREDENTIALS = 10003
    UNSUPPORTED_HTTP_METHOD = 10004
    INVALID_TRANSPORT = 10005
    INVALID_OPTION = 10006

    # Parameter errors (2xxxx)
    INVALID_PARAMETER = 20000

    # Transport/response errors (4xxxx)
    NETWORK_ERROR = 40000
    BAD_RESPONSE = 40001
    RESPONSE_PARSING_ERROR = 40002


__all__ = ["AcquiringCode"]
