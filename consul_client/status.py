"""Raft status endpoints."""

from typing import List, Optional

from consul_client.base import EndpointGroup, params_of
from consul_client.types import QueryOptions


class StatusClient(EndpointGroup):
    """Client for /v1/status."""

    def leader(self, options: Optional[QueryOptions] = None) -> str:
        """Return the address of the current Raft leader (e.g. "10.0.0.1:8300")."""
        return self._client.get("/status/leader", params=params_of(options))

    def peers(self, options: Optional[QueryOptions] = None) -> List[str]:
        """Return the addresses of the Raft peers."""
        return self._client.get("/status/peers", params=params_of(options))
