"""Health endpoints. All reads; failures propagate to the caller."""

from typing import Any, Dict, List, Optional

from consul_client.base import EndpointGroup, params_of, segment
from consul_client.types import Check, HealthCheckOptions, HealthServiceOptions, HealthState


class HealthClient(EndpointGroup):
    """Client for /v1/health."""

    def node(self, node: str, options: Optional[HealthCheckOptions] = None) -> List[Check]:
        """Return the checks on a node."""
        return self._client.get(f"/health/node/{segment(node)}", params=params_of(options))

    def checks(self, service: str, options: Optional[HealthCheckOptions] = None) -> List[Check]:
        """Return the checks associated with a service."""
        return self._client.get(f"/health/checks/{segment(service)}", params=params_of(options))

    def service(self, service: str, options: Optional[HealthServiceOptions] = None) -> List[Dict[str, Any]]:
        """
        Return the instances of a service with their node and checks.

        Each entry has "Node", "Service" and "Checks" keys. Pass
        HealthServiceOptions(passing=True) to keep only healthy instances.
        """
        return self._client.get(f"/health/service/{segment(service)}", params=params_of(options))

    def connect(self, service: str, options: Optional[HealthServiceOptions] = None) -> List[Dict[str, Any]]:
        """Same as service(), for mesh-capable instances."""
        return self._client.get(f"/health/connect/{segment(service)}", params=params_of(options))

    def ingress(self, service: str, options: Optional[HealthServiceOptions] = None) -> List[Dict[str, Any]]:
        """Return the ingress gateways that route to a service."""
        return self._client.get(f"/health/ingress/{segment(service)}", params=params_of(options))

    def state(self, state: HealthState, options: Optional[HealthCheckOptions] = None) -> List[Check]:
        """Return the checks in a given state ("any" for all)."""
        return self._client.get(f"/health/state/{segment(state)}", params=params_of(options))
