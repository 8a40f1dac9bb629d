"""Exception taxonomy raised by the acquiring client.

Configuration errors are raised at construction time. Everything else is raised
per call: transport failures, non-200 responses, unparsable bodies and business
errors reported by the gateway.
"""
from __future__ import annotations

from typing import Iterable, Optional

from sberbank_acquiring.shared.codes import AcquiringCode


class AcquiringException(Exception):
    """Base class for every error raised by the library."""

    def __init__(
        self,
        code: int,
        message: str,
        error_type: str = "AcquiringError",
        details: Optional[dict] = None,
    ) -> None:
        self.code = code
        self.message = message
        self.error_type = error_type
        self.details = details
        super().__init__(self.message)


class ConfigurationError(AcquiringException):
    def __init__(
        self,
        message: str,
        *,
        code: int = AcquiringCode.CONFIGURATION_ERROR,
        error_type: str = "ConfigurationError",
        details: Optional[dict] = None,
    ):
        super().__init__(code=code, message=message, error_type=error_type, details=details)


class UnknownOptionError(ConfigurationError):
    def __init__(self, option: str, allowed: Iterable[str]):
        allowed = list(allowed)
        super().__init__(
            'Unknown option "{}". Allowed options: "{}".'.format(option, '", "'.join(allowed)),
            code=AcquiringCode.UNKNOWN_OPTION,
            error_type="UnknownOption",
            details={"option": option, "allowed": allowed},
        )
        self.option = option


class CredentialsConflictError(ConfigurationError):
    def __init__(self):
        super().__init__(
            'You can use either "user_name" and "password" or "token".',
            code=AcquiringCode.CREDENTIALS_CONFLICT,
            error_type="CredentialsConflict",
        )


class MissingCredentialsError(ConfigurationError):
    def __init__(self):
        super().__init__(
            'You must provide authentication credentials: "user_name" and "password", or "token".',
            code=AcquiringCode.MISSING_CREDENTIALS,
            error_type="MissingCredentials",
        )


class UnsupportedHttpMethodError(ConfigurationError):
    def __init__(self, method: object, supported: Iterable[str]):
        supported = list(supported)
        super().__init__(
            'An HTTP method "{}" is not supported. Use "{}".'.format(method, '" or "'.join(supported)),
            code=AcquiringCode.UNSUPPORTED_HTTP_METHOD,
            error_type="UnsupportedHttpMethod",
            details={"method": method, "supported": supported},
        )
        self.method = method


class InvalidTransportError(ConfigurationError):
    def __init__(self, transport: object):
        super().__init__(
            "An HTTP client must implement the Transport protocol.",
            code=AcquiringCode.INVALID_TRANSPORT,
            error_type="InvalidTransport",
            details={"type": type(transport).__name__},
        )


class InvalidOptionError(ConfigurationError):
    def __init__(self, message: str, *, details: Optional[dict] = None):
        super().__init__(
            message,
            code=AcquiringCode.INVALID_OPTION,
            error_type="InvalidOption",
            details=details,
        )


class InvalidParameterError(AcquiringException):
    """A request parameter has the wrong shape (e.g. jsonParams given as a string)."""

    def __init__(self, parameter: str, expected: str = "a mapping"):
        super().__init__(
            code=AcquiringCode.INVALID_PARAMETER,
            message=f'The "{parameter}" parameter must be {expected}.',
            error_type="InvalidParameter",
            details={"parameter": parameter},
        )
        self.parameter = parameter


class NetworkException(AcquiringException):
    """The transport could not complete the exchange. Safe to retry."""

    def __init__(self, message: str, *, details: Optional[dict] = None):
        super().__init__(
            code=AcquiringCode.NETWORK_ERROR,
            message=message,
            error_type="NetworkError",
            details=details,
        )


class BadResponseException(AcquiringException):
    """The gateway answered with an HTTP status other than 200."""

    def __init__(self, status_code: int, response: str):
        super().__init__(
            code=AcquiringCode.BAD_RESPONSE,
            message=f"Bad HTTP code: {status_code}.",
            error_type="BadResponse",
            details={"status_code": status_code},
        )
        self.status_code = status_code
        self.response = response


class ResponseParsingException(AcquiringException):
    def __init__(self, message: str, response: str):
        super().__init__(
            code=AcquiringCode.RESPONSE_PARSING_ERROR,
            message=message,
            error_type="ResponseParsingError",
        )
        self.response = response


class ActionException(AcquiringException):
    """The gateway rejected the action. `code` is the gateway's own error code."""

    def __init__(self, message: str, code: int, *, action: Optional[str] = None):
        super().__init__(
            code=code,
            message=message,
            error_type="ActionError",
            details={"action": action} if action else None,
        )
        self.action = action
