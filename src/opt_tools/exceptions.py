"""Opt-Tools exception hierarchy.

All Opt-Tools exceptions inherit from OptToolsError.
"""

from __future__ import annotations


class OptToolsError(Exception):
    """Base exception for all Opt-Tools errors."""


class ConfigError(OptToolsError):
    """Missing or invalid client configuration (e.g., no API key)."""


class TransportError(OptToolsError):
    """An HTTP request failed at the network level or with an error status.

    Attributes:
        status_code: HTTP status of the failed response, or None when the
            request never produced a response (connection refused, timeout).
        body: Response body text, if any.
        method: HTTP method of the request.
        url: Full request URL.
    """

    def __init__(
        self,
        message: str,
        *,
        status_code: int | None = None,
        body: str | None = None,
        method: str | None = None,
        url: str | None = None,
    ) -> None:
        self.status_code = status_code
        self.body = body
        self.method = method
        self.url = url
        super().__init__(message)

    @property
    def is_network_error(self) -> bool:
        """True when no HTTP response was received."""
        return self.status_code is None


class RateLimitError(TransportError):
    """Rate limited by the service (429).

    Attributes:
        retry_after: Seconds to wait before retrying (from Retry-After header),
            or None if not provided.
    """

    def __init__(
        self,
        message: str = "Rate limited",
        *,
        retry_after: float | None = None,
        **kwargs: object,
    ) -> None:
        self.retry_after = retry_after
        if retry_after is not None:
            message = f"{message} (retry after {retry_after}s)"
        super().__init__(message, status_code=429, **kwargs)  # type: ignore[arg-type]


class AuthError(TransportError):
    """Authentication failed (401/403)."""


class ResponseError(OptToolsError):
    """Unexpected response format from the optimization service."""
