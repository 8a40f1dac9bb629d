"""
Transport port exposing a replaceable protocol.

The client depends on this Protocol; infrastructure provides the default adapter.
"""
from __future__ import annotations

from typing import Mapping, Protocol, runtime_checkable


METHOD_GET = "GET"
METHOD_POST = "POST"


@runtime_checkable
class Transport(Protocol):
    """Performs one HTTP exchange.

    Implementations return ``(status_code, body)`` for any response the server
    sends, whatever the status, and raise NetworkException when no response
    was received. Timeouts and cancellation are the implementation's concern.
    """

    async def request(
        self,
        uri: str,
        method: str = METHOD_GET,
        headers: Mapping[str, str] | None = None,
        body: str = "",
    ) -> tuple[int, str]: ...
