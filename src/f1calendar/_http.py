"""Low-level HTTP transport layer wrapping httpx."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any

import httpx

from f1calendar._logging import log_upstream_call
from f1calendar.exceptions import UpstreamTransportError, UpstreamUnavailableError

DEFAULT_TIMEOUT = 30.0


class FailureKind(str, Enum):
    STATUS = "status"
    TRANSPORT = "transport"
    PARSE = "parse"


@dataclass(frozen=True)
class UpstreamFailure:
    """Why an upstream call produced no usable JSON."""

    kind: FailureKind
    message: str
    status_code: int | None = None


@dataclass(frozen=True)
class FetchResult:
    """Outcome of a single upstream GET: parsed JSON or a failure, never both."""

    url: str
    data: Any = None
    failure: UpstreamFailure | None = None

    @property
    def ok(self) -> bool:
        return self.failure is None

    def unwrap(self, status_message: str) -> Any:
        """Return the parsed JSON, or raise the exception matching the failure.

        Args:
            status_message: Error text used when the upstream answered non-2xx.
        """
        if self.failure is None:
            return self.data
        if self.failure.status_code is not None:
            raise UpstreamUnavailableError(status_message, self.failure.status_code)
        raise UpstreamTransportError(self.failure.message)


def _handle_response(url: str, response: httpx.Response) -> FetchResult:
    """Classify the response status and parse its JSON body."""
    if not response.is_success:
        return FetchResult(url, failure=UpstreamFailure(
            FailureKind.STATUS,
            f"HTTP {response.status_code}: {response.reason_phrase}",
            status_code=response.status_code,
        ))
    try:
        return FetchResult(url, data=response.json())
    except ValueError as exc:
        return FetchResult(url, failure=UpstreamFailure(
            FailureKind.PARSE, f"Invalid JSON from {url}: {exc}",
        ))


class AsyncTransport:
    """Asynchronous JSON transport for one upstream, using httpx.AsyncClient."""

    def __init__(
        self,
        base_url: str,
        timeout: float = DEFAULT_TIMEOUT,
        headers: dict[str, str] | None = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self._client = httpx.AsyncClient(
            base_url=self.base_url,
            timeout=timeout,
            headers={"Accept": "application/json", **(headers or {})},
            follow_redirects=True,
        )

    def url_for(self, endpoint: str, params: dict[str, Any] | None = None) -> str:
        """Absolute URL a GET of ``endpoint`` would hit."""
        return str(self._client.build_request("GET", endpoint, params=params).url)

    @log_upstream_call
    async def get_json(self, endpoint: str, params: dict[str, Any] | None = None) -> FetchResult:
        """Perform a GET request; upstream problems are returned, not raised."""
        request = self._client.build_request("GET", endpoint, params=params)
        url = str(request.url)
        try:
            response = await self._client.send(request)
        except httpx.TimeoutException as exc:
            return FetchResult(url, failure=UpstreamFailure(
                FailureKind.TRANSPORT, f"Timeout fetching {url}: {exc}",
            ))
        except httpx.RequestError as exc:
            return FetchResult(url, failure=UpstreamFailure(
                FailureKind.TRANSPORT, f"Failed to reach {url}: {exc}",
            ))
        return _handle_response(url, response)

    async def close(self) -> None:
        await self._client.aclose()
