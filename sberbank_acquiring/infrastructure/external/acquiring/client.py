"""
Client for the Sberbank e-commerce acquiring REST API.

Convenience methods assemble action parameters and delegate to execute(),
which authenticates, sends and normalizes the response.

See https://ecomtest.sberbank.ru/doc for the action reference.
"""
from __future__ import annotations

import json
from typing import Any, Mapping, Optional, Union

from sberbank_acquiring.application.dtos.options import ClientOptions
from sberbank_acquiring.application.ports.transport import METHOD_GET, METHOD_POST, Transport
from sberbank_acquiring.core.logging_config import get_logger
from sberbank_acquiring.domain.exceptions import (
    ActionException,
    BadResponseException,
    InvalidParameterError,
)
from sberbank_acquiring.infrastructure.external.acquiring.responses import (
    normalize_response,
    parse_response,
)
from sberbank_acquiring.infrastructure.external.transports.httpx_transport import HttpxTransport


logger = get_logger(__name__)

Identifier = Union[int, str]

# Registration parameters that must be sent as nested JSON objects
STRUCTURED_PARAMS = ("jsonParams", "orderBundle")


class AcquiringClient:
    provider: str = "sberbank"

    def __init__(self, **options: Any) -> None:
        self.options = ClientOptions.from_mapping(options)
        self._transport: Optional[Transport] = self.options.http_client
        self._owns_transport = self._transport is None
        if self.options.http_method == METHOD_GET:
            self._log(
                "acquiring.http_method_ignored",
                configured=METHOD_GET,
                used=METHOD_POST,
                level="warning",
            )

    @property
    def transport(self) -> Transport:
        if self._transport is None:
            self._transport = HttpxTransport()
        return self._transport

    async def aclose(self) -> None:
        """Close the default transport if this client created it."""
        if self._owns_transport and isinstance(self._transport, HttpxTransport):
            try:
                await self._transport.aclose()
            finally:
                self._transport = None

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.aclose()

    def _endpoint(self, action: str) -> str:
        return self.options.prefix_default + action

    # Orders

    async def register_order(
        self,
        order_id: Identifier,
        amount: int,
        return_url: str,
        data: Optional[Mapping[str, Any]] = None,
    ) -> dict[str, Any]:
        """Register a new order (one-step payment)."""
        return await self._register(order_id, amount, return_url, data, "register.do")

    async def register_order_pre_auth(
        self,
        order_id: Identifier,
        amount: int,
        return_url: str,
        data: Optional[Mapping[str, Any]] = None,
    ) -> dict[str, Any]:
        """Register a new order for a two-step payment; complete it with deposit()."""
        return await self._register(order_id, amount, return_url, data, "registerPreAuth.do")

    async def _register(
        self,
        order_id: Identifier,
        amount: int,
        return_url: str,
        data: Optional[Mapping[str, Any]],
        action: str,
    ) -> dict[str, Any]:
        params = dict(data or {})
        params["orderNumber"] = str(order_id)
        params["amount"] = amount
        params["returnUrl"] = return_url

        if params.get("currency") is None and self.options.currency is not None:
            params["currency"] = self.options.currency

        for name in STRUCTURED_PARAMS:
            if params.get(name) is not None and not isinstance(params[name], Mapping):
                raise InvalidParameterError(name)
            if params.get(name) is not None:
                params[name] = dict(params[name])

        return await self.execute(self._endpoint(action), params)

    async def deposit(
        self, order_id: Identifier, amount: int, data: Optional[Mapping[str, Any]] = None
    ) -> dict[str, Any]:
        params = dict(data or {})
        params["orderId"] = str(order_id)
        params["amount"] = amount
        return await self.execute(self._endpoint("deposit.do"), params)

    async def reverse_order(
        self, order_id: Identifier, data: Optional[Mapping[str, Any]] = None
    ) -> dict[str, Any]:
        params = dict(data or {})
        params["orderId"] = str(order_id)
        return await self.execute(self._endpoint("reverse.do"), params)

    async def refund_order(
        self, order_id: Identifier, amount: int, data: Optional[Mapping[str, Any]] = None
    ) -> dict[str, Any]:
        params = dict(data or {})
        params["orderId"] = str(order_id)
        params["amount"] = amount
        return await self.execute(self._endpoint("refund.do"), params)

    async def get_order_status(
        self, order_id: Identifier, data: Optional[Mapping[str, Any]] = None
    ) -> dict[str, Any]:
        """Get an order's extended status by the gateway's order id (``orderId``)."""
        params = dict(data or {})
        params["orderId"] = str(order_id)
        return await self.execute(self._endpoint("getOrderStatusExtended.do"), params)

    # Bindings

    async def payment_order_binding(
        self,
        order_id: Identifier,
        binding_id: Identifier,
        data: Optional[Mapping[str, Any]] = None,
    ) -> dict[str, Any]:
        """Pay a registered order with a stored card binding."""
        params = dict(data or {})
        params["mdOrder"] = str(order_id)
        params["bindingId"] = str(binding_id)
        return await self.execute(self._endpoint("paymentOrderBinding.do"), params)

    async def bind_card(
        self, binding_id: Identifier, data: Optional[Mapping[str, Any]] = None
    ) -> dict[str, Any]:
        params = dict(data or {})
        params["bindingId"] = str(binding_id)
        return await self.execute(self._endpoint("bindCard.do"), params)

    async def unbind_card(
        self, binding_id: Identifier, data: Optional[Mapping[str, Any]] = None
    ) -> dict[str, Any]:
        params = dict(data or {})
        params["bindingId"] = str(binding_id)
        return await self.execute(self._endpoint("unbindCard.do"), params)

    async def get_bindings(
        self, client_id: Identifier, data: Optional[Mapping[str, Any]] = None
    ) -> dict[str, Any]:
        params = dict(data or {})
        params["clientId"] = str(client_id)
        return await self.execute(self._endpoint("getBindings.do"), params)

    # Core

    async def execute(self, action: str, data: Optional[Mapping[str, Any]] = None) -> dict[str, Any]:
        """
        Execute an action.

        Args:
            action: action path, e.g. ``/ecomm/gw/partner/api/v1/register.do``.
                A name without a leading slash (``register.do``) is prefixed
                with the configured default prefix.
            data: action parameters

        Returns:
            The response mapping without error bookkeeping fields.

        Raises:
            NetworkException: the transport failed
            BadResponseException: HTTP status other than 200
            ResponseParsingException: body is not a JSON object
            ActionException: the gateway reported an error code
        """
        if not action.startswith("/"):
            action = self._endpoint(action)
        uri = self.options.api_uri + action

        params = dict(data or {})
        if params.get("language") is None and self.options.language is not None:
            params["language"] = self.options.language
        # Credentials go last so caller parameters cannot shadow them
        params.update(self.options.credentials.as_params())

        # The gateway's JSON API only accepts POST; http_method does not apply here
        method = METHOD_POST
        headers = {"Content-Type": "application/json"}
        body = json.dumps(params)

        self._log("acquiring.request", uri=uri, method=method, params=sorted(data or {}))
        status_code, raw = await self.transport.request(uri, method, headers, body)
        self._log("acquiring.response", uri=uri, status_code=status_code)

        if status_code != 200:
            self._log("acquiring.bad_response", uri=uri, status_code=status_code, level="warning")
            raise BadResponseException(status_code, raw)

        response = parse_response(raw)
        try:
            return normalize_response(response, action=action, raw=raw)
        except ActionException as exc:
            self._log(
                "acquiring.action_failed",
                uri=uri,
                code=exc.code,
                message=exc.message,
                level="info",
            )
            raise

    def _log(self, event: str, level: str = "debug", **kwargs) -> None:
        getattr(logger, level)(event, provider=self.provider, **kwargs)
