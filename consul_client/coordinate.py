"""Network coordinate endpoints."""

from typing import Any, Dict, List, Optional

from consul_client.base import EndpointGroup, params_of, segment
from consul_client.types import BlockingQueryOptions, QueryOptions


class CoordinateClient(EndpointGroup):
    """Client for /v1/coordinate."""

    def nodes(self, options: Optional[BlockingQueryOptions] = None) -> List[Dict[str, Any]]:
        """Return the LAN coordinates of every node in the datacenter."""
        return self._client.get("/coordinate/nodes", params=params_of(options))

    def node(self, node: str, options: Optional[BlockingQueryOptions] = None) -> Optional[Dict[str, Any]]:
        """Return one node's coordinate, or None if unknown or the request failed."""
        return self._single(
            f"Coordinate node {node}",
            lambda: self._client.get(f"/coordinate/node/{segment(node)}", params=params_of(options)),
        )

    def datacenters(self, options: Optional[QueryOptions] = None) -> List[Dict[str, Any]]:
        """Return the WAN coordinates of the servers in every datacenter."""
        return self._client.get("/coordinate/datacenters", params=params_of(options))
