"""User event endpoints."""

from typing import List, Optional, Union

from consul_client.base import EndpointGroup, params_of, segment
from consul_client.types import Event, EventFireOptions, EventListOptions


class EventClient(EndpointGroup):
    """Client for /v1/event."""

    def fire(
        self,
        name: str,
        payload: Optional[Union[str, bytes]] = None,
        options: Optional[EventFireOptions] = None,
    ) -> Event:
        """
        Fire a user event.

        The node, service and tag options restrict which agents act on it.
        Failures are raised.
        """
        return self._client.put(f"/event/fire/{segment(name)}", payload, params=params_of(options))

    def list(self, options: Optional[EventListOptions] = None) -> List[Event]:
        """List the most recent events the agent has seen."""
        return self._client.get("/event/list", params=params_of(options))
