"""Catalog endpoints: the cluster-wide registry of nodes and services."""

from typing import Any, Dict, List, Optional

from consul_client.base import EndpointGroup, params_of, segment
from consul_client.types import (
    BlockingQueryOptions,
    CatalogDeregistration,
    CatalogRegistration,
    CatalogServiceOptions,
    FilterOptions,
    Node,
    QueryOptions,
    Service,
)


class CatalogClient(EndpointGroup):
    """
    Client for /v1/catalog.

    Reads raise on failure. Register and deregister return a boolean.
    """

    def register(self, registration: CatalogRegistration, options: Optional[QueryOptions] = None) -> bool:
        """Register a node, service or check directly in the catalog."""
        return self._succeeds(
            "Catalog register",
            lambda: self._client.put("/catalog/register", registration, params=params_of(options)),
        )

    def deregister(self, deregistration: CatalogDeregistration, options: Optional[QueryOptions] = None) -> bool:
        """Remove a node, service or check from the catalog."""
        return self._succeeds(
            "Catalog deregister",
            lambda: self._client.put("/catalog/deregister", deregistration, params=params_of(options)),
        )

    def datacenters(self, options: Optional[QueryOptions] = None) -> List[str]:
        """List all known datacenters."""
        return self._client.get("/catalog/datacenters", params=params_of(options))

    def nodes(self, options: Optional[FilterOptions] = None) -> List[Node]:
        """List the nodes in a datacenter."""
        return self._client.get("/catalog/nodes", params=params_of(options))

    def services(self, options: Optional[FilterOptions] = None) -> Dict[str, List[str]]:
        """List service names, each with its tags."""
        return self._client.get("/catalog/services", params=params_of(options))

    def service(self, service: str, options: Optional[CatalogServiceOptions] = None) -> List[Service]:
        """List the nodes providing `service`."""
        return self._client.get(f"/catalog/service/{segment(service)}", params=params_of(options))

    def connect(self, service: str, options: Optional[CatalogServiceOptions] = None) -> List[Service]:
        """List the mesh-capable instances of `service`."""
        return self._client.get(f"/catalog/connect/{segment(service)}", params=params_of(options))

    def node_services(self, node: str, options: Optional[BlockingQueryOptions] = None) -> Dict[str, Any]:
        """Return a node and the services registered on it ({"Node": ..., "Services": ...})."""
        return self._client.get(f"/catalog/node/{segment(node)}", params=params_of(options))

    def gateway_services(self, gateway: str, options: Optional[BlockingQueryOptions] = None) -> List[Dict[str, Any]]:
        """List the services associated with a gateway."""
        return self._client.get(f"/catalog/gateway-services/{segment(gateway)}", params=params_of(options))
