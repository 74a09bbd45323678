"""
HTTP transport shared by all endpoint groups.

Builds URLs and headers, encodes request bodies, hands the request to a
pluggable fetch function and decodes the response.
"""

import io
import json
import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Literal, Mapping, Optional, Tuple, Union
from urllib.parse import quote

import httpx

from consul_client.errors import DecodeError, HttpRequestError

logger = logging.getLogger(__name__)

ResponseType = Literal["json", "text", "bytes", "blob"]

JSON_CONTENT_TYPE = "application/json"
OCTET_STREAM_CONTENT_TYPE = "application/octet-stream"


@dataclass
class Request:
    """Request descriptor passed to the fetch function."""
    method: str
    headers: Dict[str, str] = field(default_factory=dict)
    content: Optional[Union[str, bytes]] = None


FetchFn = Callable[[str, Request], httpx.Response]


def default_fetch(url: str, request: Request) -> httpx.Response:
    """Send the request with httpx. No timeout is applied (blocking queries can wait minutes)."""
    with httpx.Client(timeout=None) as client:
        return client.request(
            request.method,
            url,
            headers=request.headers,
            content=request.content,
        )


def _query_value(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def _find_header(headers: Mapping[str, str], name: str) -> Optional[str]:
    for key in headers:
        if key.lower() == name.lower():
            return key
    return None


class HttpClient:
    """
    Performs one request per call against the Consul HTTP API.

    Supports:
    - Relative paths joined onto the base URL (absolute URLs pass through)
    - Default headers and query parameters, overridden per call
    - JSON or raw request bodies
    - json, text, bytes and blob response shapes
    """

    def __init__(
        self,
        base_url: str,
        headers: Optional[Dict[str, str]] = None,
        fetch_fn: Optional[FetchFn] = None,
        params: Optional[Dict[str, Any]] = None,
    ):
        """
        Initialize the transport.

        Args:
            base_url: API root, e.g. http://localhost:8500/v1
            headers: Headers sent with every request
            fetch_fn: Callable performing the network call (default: httpx)
            params: Query parameters sent with every request (dc, ns, partition)
        """
        self.base_url = base_url.rstrip("/")
        self.default_headers = dict(headers or {})
        self.default_params = dict(params or {})
        self.fetch_fn = fetch_fn or default_fetch

    def build_url(self, path: str, params: Optional[Mapping[str, Any]] = None) -> str:
        """
        Build the full request URL.

        List and tuple values produce one entry per element, None values are
        dropped. Keys keep a literal "=" so `node-meta=<key>` survives encoding.
        """
        if path.startswith(("http://", "https://")):
            url = path
        else:
            url = f"{self.base_url}{path}"

        merged: Dict[str, Any] = dict(self.default_params)
        merged.update(params or {})

        pairs: List[Tuple[str, str]] = []
        for key, value in merged.items():
            if value is None:
                continue
            if isinstance(value, (list, tuple)):
                for item in value:
                    pairs.append((key, _query_value(item)))
            else:
                pairs.append((key, _query_value(value)))

        if not pairs:
            return url

        query = "&".join(
            f"{quote(key, safe='=')}={quote(value, safe='')}" for key, value in pairs
        )
        separator = "&" if "?" in url else "?"
        return f"{url}{separator}{query}"

    def _build_headers(self, overrides: Optional[Mapping[str, str]]) -> Dict[str, str]:
        headers = dict(self.default_headers)
        for key, value in (overrides or {}).items():
            existing = _find_header(headers, key)
            if existing is not None:
                del headers[existing]
            headers[key] = value
        return headers

    def request(
        self,
        method: str,
        path: str,
        body: Any = None,
        params: Optional[Mapping[str, Any]] = None,
        headers: Optional[Mapping[str, str]] = None,
        response_type: ResponseType = "json",
    ) -> Any:
        """
        Perform an HTTP request and decode the response.

        Args:
            method: HTTP verb
            path: Path relative to the base URL, or an absolute URL
            body: Request body; str/bytes are sent raw, anything else as JSON
            params: Query parameters
            headers: Per-call headers, taking precedence over the defaults
            response_type: How to decode the response body

        Returns:
            Decoded response data

        Raises:
            HttpRequestError: If the response status is not 2xx
            DecodeError: If a text/bytes/blob body cannot be read
        """
        url = self.build_url(path, params)
        request_headers = self._build_headers(headers)

        content: Optional[Union[str, bytes]] = None
        if body is not None:
            content_type_key = _find_header(request_headers, "Content-Type")
            if content_type_key is None:
                if isinstance(body, (str, bytes, bytearray)):
                    content_type = OCTET_STREAM_CONTENT_TYPE
                else:
                    content_type = JSON_CONTENT_TYPE
                request_headers["Content-Type"] = content_type
            else:
                content_type = request_headers[content_type_key]

            if isinstance(body, (str, bytes)):
                content = body
            elif isinstance(body, bytearray):
                content = bytes(body)
            else:
                if not content_type.startswith(JSON_CONTENT_TYPE):
                    logger.debug(f"Encoding structured body as JSON despite Content-Type {content_type}")
                content = json.dumps(body)

        logger.debug(f"{method} {url}")
        response = self.fetch_fn(url, Request(method=method, headers=request_headers, content=content))

        if not response.is_success:
            try:
                error_text = response.read().decode(response.encoding or "utf-8", errors="replace")
            except Exception as e:
                logger.debug(f"Could not read error body: {type(e).__name__}: {e}")
                error_text = "Unknown error"
            raise HttpRequestError(response.status_code, response.reason_phrase, error_text)

        return self._decode(response, response_type)

    def _decode(self, response: httpx.Response, response_type: ResponseType) -> Any:
        if response_type == "json":
            if response.headers.get("content-length") == "0":
                return None
            try:
                return response.json()
            except ValueError:
                return response.text

        try:
            data = response.read()
        except httpx.HTTPError as e:
            raise DecodeError(f"Failed to read response body: {e}", response_type) from e

        if response_type == "bytes":
            return data
        if response_type == "blob":
            return io.BytesIO(data)

        try:
            return data.decode(response.charset_encoding or "utf-8")
        except (UnicodeDecodeError, LookupError) as e:
            raise DecodeError(f"Failed to decode response text: {e}", response_type) from e

    def get(self, path: str, **options: Any) -> Any:
        """Perform a GET request."""
        return self.request("GET", path, **options)

    def post(self, path: str, body: Any = None, **options: Any) -> Any:
        """Perform a POST request."""
        return self.request("POST", path, body=body, **options)

    def put(self, path: str, body: Any = None, **options: Any) -> Any:
        """Perform a PUT request."""
        return self.request("PUT", path, body=body, **options)

    def delete(self, path: str, **options: Any) -> Any:
        """Perform a DELETE request."""
        return self.request("DELETE", path, **options)
