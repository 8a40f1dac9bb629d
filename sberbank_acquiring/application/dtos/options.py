"""
Client options DTOs (Pydantic v2). Immutable once built.
"""
from __future__ import annotations

from typing import Any, Literal, Mapping, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from sberbank_acquiring.application.ports.transport import METHOD_GET, METHOD_POST, Transport
from sberbank_acquiring.core.settings import acquiring_settings
from sberbank_acquiring.domain.exceptions import (
    CredentialsConflictError,
    InvalidOptionError,
    InvalidTransportError,
    MissingCredentialsError,
    UnknownOptionError,
    UnsupportedHttpMethodError,
)


ALLOWED_OPTIONS = (
    "api_uri",
    "currency",
    "http_client",
    "http_method",
    "language",
    "password",
    "user_name",
    "token",
    "prefix_default",
)

SUPPORTED_HTTP_METHODS = (METHOD_GET, METHOD_POST)


class UserPasswordCredentials(BaseModel):
    model_config = ConfigDict(frozen=True)

    user_name: str
    password: str

    def as_params(self) -> dict[str, str]:
        return {"userName": self.user_name, "password": self.password}

    def __repr__(self) -> str:
        return f"UserPasswordCredentials(user_name={self.user_name!r}, password='***')"


class TokenCredentials(BaseModel):
    model_config = ConfigDict(frozen=True)

    token: str

    def as_params(self) -> dict[str, str]:
        return {"token": self.token}

    def __repr__(self) -> str:
        return "TokenCredentials(token='***')"


Credentials = Union[UserPasswordCredentials, TokenCredentials]


class ClientOptions(BaseModel):
    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True, coerce_numbers_to_str=True)

    credentials: Credentials
    currency: Optional[str] = None  # ISO 4217 numeric, e.g. "643"
    language: Optional[str] = None  # ISO 639-1, e.g. "ru"
    api_uri: str = Field(default_factory=lambda: acquiring_settings.api_uri)
    prefix_default: str = Field(default_factory=lambda: acquiring_settings.prefix_default)
    http_method: Literal["GET", "POST"] = METHOD_POST
    http_client: Optional[Any] = None

    @classmethod
    def from_mapping(cls, options: Mapping[str, Any]) -> "ClientOptions":
        """Validate raw client options and resolve the credential mode.

        Options set to None are treated as absent.

        Raises:
            UnknownOptionError: a key outside ALLOWED_OPTIONS
            CredentialsConflictError: user_name/password given together with token
            MissingCredentialsError: neither a full user_name+password pair nor a token
            UnsupportedHttpMethodError: http_method other than GET/POST
            InvalidTransportError: http_client not implementing Transport
            InvalidOptionError: a value of the wrong type
        """
        for key in options:
            if key not in ALLOWED_OPTIONS:
                raise UnknownOptionError(key, ALLOWED_OPTIONS)

        values = {key: value for key, value in options.items() if value is not None}

        has_token = "token" in values
        if has_token and ("user_name" in values or "password" in values):
            raise CredentialsConflictError()
        if not has_token and not ("user_name" in values and "password" in values):
            raise MissingCredentialsError()

        method = values.get("http_method")
        if method is not None and method not in SUPPORTED_HTTP_METHODS:
            raise UnsupportedHttpMethodError(method, SUPPORTED_HTTP_METHODS)

        transport = values.get("http_client")
        if transport is not None and not isinstance(transport, Transport):
            raise InvalidTransportError(transport)

        try:
            if has_token:
                credentials: Credentials = TokenCredentials(token=values.pop("token"))
            else:
                credentials = UserPasswordCredentials(
                    user_name=values.pop("user_name"),
                    password=values.pop("password"),
                )
            return cls(credentials=credentials, **values)
        except ValidationError as exc:
            fields = [".".join(str(part) for part in err["loc"]) for err in exc.errors()]
            raise InvalidOptionError(
                f"Invalid value for option(s): {', '.join(fields)}",
                details={"fields": fields},
            ) from exc
