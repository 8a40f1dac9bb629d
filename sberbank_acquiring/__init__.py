"""
Async client for the Sberbank e-commerce acquiring REST API.
"""
from sberbank_acquiring.application.dtos.options import (
    ClientOptions,
    TokenCredentials,
    UserPasswordCredentials,
)
from sberbank_acquiring.application.ports.transport import METHOD_GET, METHOD_POST, Transport
from sberbank_acquiring.core.settings import API_PREFIX_DEFAULT, API_URI, API_URI_TEST
from sberbank_acquiring.domain.exceptions import (
    AcquiringException,
    ActionException,
    BadResponseException,
    ConfigurationError,
    CredentialsConflictError,
    InvalidOptionError,
    InvalidParameterError,
    InvalidTransportError,
    MissingCredentialsError,
    NetworkException,
    ResponseParsingException,
    UnknownOptionError,
    UnsupportedHttpMethodError,
)
from sberbank_acquiring.infrastructure.external.acquiring import AcquiringClient
from sberbank_acquiring.infrastructure.external.transports import HttpxTransport
from sberbank_acquiring.shared.codes import AcquiringCode
from sberbank_acquiring.shared.codes.currency import Currency
from sberbank_acquiring.shared.codes.order_status import ORDER_STATUS_DESCRIPTIONS, OrderStatus

__all__ = [
    "API_PREFIX_DEFAULT",
    "API_URI",
    "API_URI_TEST",
    "METHOD_GET",
    "METHOD_POST",
    "AcquiringClient",
    "AcquiringCode",
    "AcquiringException",
    "ActionException",
    "BadResponseException",
    "ClientOptions",
    "ConfigurationError",
    "CredentialsConflictError",
    "Currency",
    "HttpxTransport",
    "InvalidOptionError",
    "InvalidParameterError",
    "InvalidTransportError",
    "MissingCredentialsError",
    "NetworkException",
    "ORDER_STATUS_DESCRIPTIONS",
    "OrderStatus",
    "ResponseParsingException",
    "TokenCredentials",
    "Transport",
    "UnknownOptionError",
    "UnsupportedHttpMethodError",
    "UserPasswordCredentials",
]
