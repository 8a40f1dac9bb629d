"""
Default Transport implementation on top of httpx.AsyncClient.

No retries: a failed exchange is reported once as NetworkException and the
caller decides what to do.
"""
from __future__ import annotations

from typing import Mapping, Optional

import httpx

from sberbank_acquiring.application.ports.transport import METHOD_GET
from sberbank_acquiring.core.logging_config import get_logger
from sberbank_acquiring.core.settings import TransportTimeouts, acquiring_settings
from sberbank_acquiring.domain.exceptions import InvalidOptionError, NetworkException


logger = get_logger(__name__)


class HttpxTransport:
    def __init__(
        self,
        *,
        timeouts: Optional[TransportTimeouts] = None,
        verify_ssl: Optional[bool] = None,
        client: Optional[httpx.AsyncClient] = None,
    ) -> None:
        self._timeouts_cfg = timeouts or acquiring_settings.timeouts
        self.verify_ssl = acquiring_settings.verify_ssl if verify_ssl is None else verify_ssl
        self._client = client

    @property
    def timeouts(self) -> httpx.Timeout:
        return httpx.Timeout(
            connect=self._timeouts_cfg.connect,
            read=self._timeouts_cfg.read,
            write=self._timeouts_cfg.write,
            timeout=self._timeouts_cfg.total,
        )

    @property
    def client(self) -> httpx.AsyncClient:
        if self._client is None:
            self._client = httpx.AsyncClient(timeout=self.timeouts, verify=self.verify_ssl)
        return self._client

    async def aclose(self) -> None:
        """Close underlying HTTP client if created."""
        if self._client is not None:
            try:
                await self._client.aclose()
            finally:
                self._client = None

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.aclose()

    async def request(
        self,
        uri: str,
        method: str = METHOD_GET,
        headers: Mapping[str, str] | None = None,
        body: str = "",
    ) -> tuple[int, str]:
        try:
            response = await self.client.request(
                method=method,
                url=uri,
                headers=dict(headers or {}),
                content=body.encode("utf-8") if body else None,
            )
        except httpx.InvalidURL as exc:
            # api_uri or prefix_default produced an unusable URL
            raise InvalidOptionError(f"Invalid request URI: {exc}", details={"uri": uri}) from exc
        except httpx.TimeoutException as exc:
            logger.warning("transport.timeout", uri=uri, method=method)
            raise NetworkException(f"Request timeout: {exc}", details={"uri": uri}) from exc
        except httpx.TransportError as exc:
            logger.warning("transport.network_error", uri=uri, method=method, error=str(exc))
            raise NetworkException(f"Network error: {exc}", details={"uri": uri}) from exc

        return response.status_code, response.text
