"""Async httpx transport with tenacity retry.

Executes requests against the optimization API with a per-request timeout,
the API key header, and exponential backoff for transient failures.
"""

from __future__ import annotations

import asyncio
import json
import logging
from collections.abc import Awaitable, Callable
from typing import Any

import httpx
import tenacity

from opt_tools.exceptions import AuthError, RateLimitError, ResponseError, TransportError

logger = logging.getLogger(__name__)

_RETRYABLE_STATUS_CODES = {429, 503}
_AUTH_ERROR_STATUS_CODES = {401, 403}
_IDEMPOTENT_METHODS = {"GET", "HEAD", "OPTIONS", "PUT", "DELETE"}
# Failures raised before the request reached the server.
_CONNECT_ERRORS = (httpx.ConnectError, httpx.ConnectTimeout)


def _is_retryable(exc: BaseException) -> bool:
    """Check if a failed attempt should be retried.

    Retryable: 429 and 503 on any method; connection failures on any method;
    other network failures (read timeout, dropped connection) on idempotent
    methods only. Every other status fails immediately.
    """
    if not isinstance(exc, TransportError):
        return False
    if exc.status_code is not None:
        return exc.status_code in _RETRYABLE_STATUS_CODES
    if isinstance(exc.__cause__, _CONNECT_ERRORS):
        return True
    return (exc.method or "").upper() in _IDEMPOTENT_METHODS


def _parse_retry_after(response: httpx.Response) -> float | None:
    raw = response.headers.get("Retry-After")
    if raw is None:
        return None
    try:
        return float(raw)
    except (ValueError, TypeError):
        return None


class HttpTransport:
    """Async HTTP transport for the optimization API.

    Retries 429/503 responses and network failures with exponential backoff
    (``backoff_factor * 2 ** (attempt - 1)`` seconds, capped at the request
    timeout). After ``retries`` retries the last error is raised unchanged.

    Usage::

        async with HttpTransport("https://api.opt-tools.com", "key") as transport:
            data = await transport.post("/api/solve/lp", problem)
    """

    def __init__(
        self,
        server_url: str,
        api_key: str,
        timeout_ms: int = 30000,
        retries: int = 3,
        *,
        backoff_factor: float = 0.1,
        debug: bool = False,
        transport: httpx.AsyncBaseTransport | None = None,
        sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
    ) -> None:
        """Initialize the transport.

        Args:
            server_url: API base URL.
            api_key: Sent as the ``X-API-Key`` header on every request.
            timeout_ms: Per-request timeout in milliseconds.
            retries: Maximum number of retries after the first attempt.
            backoff_factor: Delay in seconds before the first retry.
            debug: Log each request and response at DEBUG level.
            transport: Optional httpx transport (e.g. ``httpx.MockTransport``).
            sleep: Coroutine used for backoff delays.
        """
        self._server_url = server_url.rstrip("/")
        self._timeout = timeout_ms / 1000
        self._retries = retries
        self._backoff_factor = backoff_factor
        self._debug = debug
        self._sleep = sleep
        self._client = httpx.AsyncClient(
            base_url=self._server_url,
            timeout=self._timeout,
            transport=transport,
            headers={
                "Content-Type": "application/json",
                "X-API-Key": api_key,
            },
        )

    async def post(self, path: str, body: Any) -> Any:
        """POST a JSON body and return the parsed response body."""
        response = await self.request("POST", path, json=body)
        return self._parse_body(response)

    async def get(self, path: str, params: dict[str, Any] | None = None) -> Any:
        """GET a resource and return the parsed response body."""
        response = await self.request("GET", path, params=params)
        return self._parse_body(response)

    async def get_text(self, path: str, params: dict[str, Any] | None = None) -> str:
        """GET a resource and return the raw body text."""
        response = await self.request("GET", path, params=params)
        return response.text

    async def request(
        self,
        method: str,
        path: str,
        *,
        json: Any = None,
        params: dict[str, Any] | None = None,
    ) -> httpx.Response:
        """Send a request with retry.

        Uses tenacity.AsyncRetrying programmatically so that the retry count
        and backoff are configurable per instance.

        Raises:
            AuthError: On 401/403 (no retry).
            RateLimitError: On 429 after all retries are exhausted.
            TransportError: On network failure or any other error status.
        """
        retryer = tenacity.AsyncRetrying(
            retry=tenacity.retry_if_exception(_is_retryable),
            wait=tenacity.wait_exponential(
                multiplier=self._backoff_factor, max=self._timeout
            ),
            stop=tenacity.stop_after_attempt(self._retries + 1),
            before_sleep=tenacity.before_sleep_log(logger, logging.WARNING),
            sleep=self._sleep,
            reraise=True,
        )
        return await retryer(self._send, method, path, json=json, params=params)

    async def _send(
        self,
        method: str,
        path: str,
        *,
        json: Any = None,
        params: dict[str, Any] | None = None,
    ) -> httpx.Response:
        """Execute a single request (no retry)."""
        url = f"{self._server_url}{path}"
        if self._debug:
            logger.debug("%s %s params=%s body=%s", method, url, params, json)

        try:
            response = await self._client.request(method, path, json=json, params=params)
        except httpx.TransportError as exc:
            raise TransportError(
                f"{method} {path} failed: {type(exc).__name__}: {exc}",
                method=method,
                url=url,
            ) from exc

        if self._debug:
            logger.debug(
                "%s %s -> HTTP %d (%d bytes)",
                method, url, response.status_code, len(response.content),
            )

        if response.status_code in _AUTH_ERROR_STATUS_CODES:
            raise AuthError(
                f"Authentication failed: HTTP {response.status_code} - {response.text}",
                status_code=response.status_code,
                body=response.text,
                method=method,
                url=url,
            )

        if response.status_code == 429:
            raise RateLimitError(
                f"Rate limited: HTTP 429 - {response.text}",
                retry_after=_parse_retry_after(response),
                body=response.text,
                method=method,
                url=url,
            )

        if response.is_error:
            raise TransportError(
                f"{method} {path} failed: HTTP {response.status_code} - {response.text}",
                status_code=response.status_code,
                body=response.text,
                method=method,
                url=url,
            )
        return response

    @staticmethod
    def _parse_body(response: httpx.Response) -> Any:
        """Decode JSON bodies; return anything else as text."""
        content_type = response.headers.get("Content-Type", "")
        if "json" not in content_type:
            return response.text
        try:
            return response.json()
        except json.JSONDecodeError as exc:
            raise ResponseError(
                f"Invalid JSON from {response.request.method} "
                f"{response.request.url}: {exc}"
            ) from exc

    async def aclose(self) -> None:
        """Close the underlying httpx client."""
        await self._client.aclose()

    async def __aenter__(self) -> HttpTransport:
        return self

    async def __aexit__(self, *args: object) -> None:
        await self.aclose()
