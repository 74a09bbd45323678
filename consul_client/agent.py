"""Agent endpoints: the local agent's view of members, services and checks."""

from typing import Any, Dict, List, Optional

from consul_client.base import EndpointGroup, params_of, segment
from consul_client.types import (
    Check,
    CheckStatus,
    CheckUpdateOptions,
    JoinOptions,
    MembersOptions,
    MetricsOptions,
    QueryOptions,
    Service,
)


class AgentClient(EndpointGroup):
    """
    Client for /v1/agent.

    Write operations return True on success and False on any failure; the
    failure is logged, never raised.
    """

    def self(self, options: Optional[QueryOptions] = None) -> Dict[str, Any]:
        """Return the local agent's configuration and member information."""
        return self._client.get("/agent/self", params=params_of(options))

    def members(self, options: Optional[MembersOptions] = None) -> List[Dict[str, Any]]:
        """Return the members the agent sees in the cluster gossip pool."""
        return self._client.get("/agent/members", params=params_of(options))

    def service_register(self, service: Service, options: Optional[QueryOptions] = None) -> bool:
        """Register a service with the local agent."""
        return self._succeeds(
            "Service register",
            lambda: self._client.put("/agent/service/register", service, params=params_of(options)),
        )

    def service_deregister(self, service_id: str, options: Optional[QueryOptions] = None) -> bool:
        """Deregister a service from the local agent."""
        return self._succeeds(
            f"Service deregister {service_id}",
            lambda: self._client.put(f"/agent/service/deregister/{segment(service_id)}", params=params_of(options)),
        )

    def services(self, options: Optional[QueryOptions] = None) -> Dict[str, Service]:
        """Return the services registered with the local agent, keyed by ID."""
        return self._client.get("/agent/services", params=params_of(options))

    def check_register(self, check: Check, options: Optional[QueryOptions] = None) -> bool:
        """Register a check with the local agent."""
        return self._succeeds(
            "Check register",
            lambda: self._client.put("/agent/check/register", check, params=params_of(options)),
        )

    def check_deregister(self, check_id: str, options: Optional[QueryOptions] = None) -> bool:
        """Deregister a check from the local agent."""
        return self._succeeds(
            f"Check deregister {check_id}",
            lambda: self._client.put(f"/agent/check/deregister/{segment(check_id)}", params=params_of(options)),
        )

    def checks(self, options: Optional[QueryOptions] = None) -> Dict[str, Check]:
        """Return the checks registered with the local agent, keyed by ID."""
        return self._client.get("/agent/checks", params=params_of(options))

    def join(self, address: str, options: Optional[JoinOptions] = None) -> bool:
        """Ask the agent to join the node at `address`."""
        return self._succeeds(
            f"Join {address}",
            lambda: self._client.put(f"/agent/join/{segment(address)}", params=params_of(options)),
        )

    def leave(self, options: Optional[QueryOptions] = None) -> bool:
        """Gracefully leave the cluster and shut the agent down."""
        return self._succeeds(
            "Leave",
            lambda: self._client.put("/agent/leave", params=params_of(options)),
        )

    def reload(self, options: Optional[QueryOptions] = None) -> bool:
        """Reload the agent's configuration files."""
        return self._succeeds(
            "Reload",
            lambda: self._client.put("/agent/reload", params=params_of(options)),
        )

    def metrics(self, options: Optional[MetricsOptions] = None) -> Any:
        """Return the agent's metrics (JSON, or text when format="prometheus")."""
        return self._client.get("/agent/metrics", params=params_of(options))

    def check_update(
        self,
        check_id: str,
        status: CheckStatus,
        options: Optional[CheckUpdateOptions] = None,
    ) -> bool:
        """
        Set the status of a TTL check.

        Args:
            check_id: ID of the check to update
            status: passing, warning or critical
            options: Query options; `note` becomes the check's Output

        Returns:
            True if the check was updated, False otherwise
        """
        params = params_of(options)
        body: Dict[str, Any] = {"Status": status}
        note = params.pop("note", None)
        if note is not None:
            body["Output"] = note
        return self._succeeds(
            f"Check update {check_id}",
            lambda: self._client.put(
                f"/agent/check/update/{segment(check_id)}",
                body,
                params=params,
            ),
        )

    def connect(self, options: Optional[QueryOptions] = None) -> Any:
        """Return the agent's service mesh (Connect) information."""
        return self._client.get("/agent/connect", params=params_of(options))
