"""
Transport
---------

The endpoint clients never talk to the network directly. They hand an
encoded body and a header set to a `Transport` and get back a
`TransportResponse` (status, body bytes, headers) or a `TransportFailure`.

`HttpxTransport` is the default implementation, built on httpx:
- When an `httpx.Client` / `httpx.AsyncClient` is injected it is used
  as-is, so connection pooling, TLS and proxies stay under the caller's
  control. The transport does not close injected clients.
- Otherwise a short-lived client is opened for each call with the
  configured base URL and timeout.

Timeouts, connection errors, redirect loops and undecodable bodies (any
`httpx.RequestError`) surface as `TransportFailure` with the httpx
exception chained. HTTP error statuses are NOT failures at this level;
they are returned like any other response and classified by the endpoint
client.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Dict, Mapping, Optional

import httpx

from llm_client.errors import TransportFailure


@dataclass(frozen=True)
class TransportResponse:
    status_code: int
    body: bytes
    headers: Mapping[str, str] = field(default_factory=dict)

    @property
    def is_success(self) -> bool:
        return 200 <= self.status_code < 300


class Transport(ABC):
    @abstractmethod
    def send(
        self,
        method: str,
        path: str,
        body: Optional[bytes],
        headers: Dict[str, str],
    ) -> TransportResponse: ...

    @abstractmethod
    async def asend(
        self,
        method: str,
        path: str,
        body: Optional[bytes],
        headers: Dict[str, str],
    ) -> TransportResponse: ...


class HttpxTransport(Transport):
    """httpx-backed transport.

    Attributes:
        base_url: API root without a trailing slash, e.g.
                  "https://api.openai.com/v1".
        timeout_seconds: Timeout applied to per-call clients; injected
                         clients keep their own timeout.
    """

    def __init__(
        self,
        base_url: str,
        timeout_seconds: float = 600.0,
        client: Optional[httpx.Client] = None,
        async_client: Optional[httpx.AsyncClient] = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.timeout_seconds = timeout_seconds
        self._client = client
        self._async_client = async_client

    def _url(self, path: str) -> str:
        return f"{self.base_url}/{path.lstrip('/')}"

    @staticmethod
    def _to_response(response: httpx.Response) -> TransportResponse:
        return TransportResponse(
            status_code=response.status_code,
            body=response.content,
            headers=dict(response.headers),
        )

    def send(
        self,
        method: str,
        path: str,
        body: Optional[bytes],
        headers: Dict[str, str],
    ) -> TransportResponse:
        url = self._url(path)
        try:
            if self._client is not None:
                response = self._client.request(
                    method, url, content=body, headers=headers
                )
                return self._to_response(response)
            with httpx.Client(timeout=self.timeout_seconds) as client:
                response = client.request(method, url, content=body, headers=headers)
                return self._to_response(response)
        except httpx.RequestError as exc:
            raise TransportFailure(f"{method} {url} failed: {exc}") from exc

    async def asend(
        self,
        method: str,
        path: str,
        body: Optional[bytes],
        headers: Dict[str, str],
    ) -> TransportResponse:
        url = self._url(path)
        try:
            if self._async_client is not None:
                response = await self._async_client.request(
                    method, url, content=body, headers=headers
                )
                return self._to_response(response)
            async with httpx.AsyncClient(timeout=self.timeout_seconds) as client:
                response = await client.request(
                    method, url, content=body, headers=headers
                )
                return self._to_response(response)
        except httpx.RequestError as exc:
            raise TransportFailure(f"{method} {url} failed: {exc}") from exc
