"""
Shared plumbing for the endpoint groups.

Each group wraps the HttpClient with its own paths. Failure handling differs
per operation on purpose: some reads raise, some collapse to None or [], and
writes report success as a boolean.
"""

import logging
from typing import Any, Callable, Dict, Optional
from urllib.parse import quote

from consul_client.http import HttpClient
from consul_client.types import QueryOptions


def segment(value: Any) -> str:
    """Percent-encode a path segment. "/" is kept so KV keys can span levels."""
    return quote(str(value), safe="/")


def params_of(options: Optional[QueryOptions]) -> Dict[str, Any]:
    """Query parameters for an options object, or {} when none was given."""
    return options.to_params() if options is not None else {}


def collapse(response: Any) -> Any:
    """
    Reduce a single-record response.

    Some endpoints return a one-element list and some a bare object for the
    same logical record. Empty or missing responses become None, lists give
    their first element, anything else is returned as is.
    """
    if not response:
        return None
    if isinstance(response, list):
        return response[0]
    return response


class EndpointGroup:
    """Base class for one Consul API subsystem (agent, catalog, kv, ...)."""

    def __init__(
        self,
        client: HttpClient,
        base_url: str,
        logger: Optional[logging.Logger] = None,
    ):
        """
        Args:
            client: Shared HTTP transport
            base_url: API root the transport was built with
            logger: Where swallowed failures are reported (default: module logger)
        """
        self._client = client
        self._base_url = base_url
        self._logger = logger or logging.getLogger(type(self).__module__)

    def _succeeds(self, action: str, call: Callable[[], Any]) -> bool:
        """Run a write call; True if it completed, False (and logged) on any failure."""
        try:
            call()
            return True
        except Exception as e:
            self._logger.error(f"{action} failed: {type(e).__name__}: {e}")
            return False

    def _single(self, action: str, call: Callable[[], Any]) -> Any:
        """Run a read call for one record; None (and logged) on any failure."""
        try:
            return collapse(call())
        except Exception as e:
            self._logger.warning(f"{action} failed: {type(e).__name__}: {e}")
            return None
