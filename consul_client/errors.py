"""
Exception types for consul-client.

- HttpRequestError: the control plane answered with a non-2xx status
- DecodeError: a non-JSON response shape could not be read or decoded
- TransportError: network-level failure raised by the fetch function
"""

from typing import Optional

import httpx

# Raised by the default fetch function (connection refused, DNS, timeouts).
# Custom fetch functions may raise anything; it reaches the caller unchanged.
TransportError = httpx.TransportError


class ConsulError(Exception):
    """Base exception for all consul-client errors."""
    pass


class HttpRequestError(ConsulError):
    """
    Raised when the control plane returns a non-success status code.

    Attributes:
        status_code: HTTP status code (e.g. 404)
        status_text: Reason phrase (e.g. "Not Found")
        body: Response body text, or "Unknown error" if it could not be read
    """

    def __init__(self, status_code: int, status_text: str, body: str = ""):
        self.status_code = status_code
        self.status_text = status_text
        self.body = body
        super().__init__(f"HTTP request failed: {status_code} {status_text}\n{body}")

    def __repr__(self) -> str:
        return (
            f"HttpRequestError(status_code={self.status_code!r}, "
            f"status_text={self.status_text!r})"
        )


class DecodeError(ConsulError):
    """Raised when a text, bytes or blob response cannot be decoded."""

    def __init__(self, message: str, response_type: Optional[str] = None):
        self.response_type = response_type
        super().__init__(message)
