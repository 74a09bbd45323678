"""Session endpoints, used for locks and leader election."""

from typing import List, Optional

from consul_client.base import EndpointGroup, params_of, segment
from consul_client.types import BlockingQueryOptions, QueryOptions, SessionEntry


class SessionClient(EndpointGroup):
    """Client for /v1/session."""

    def create(self, session: SessionEntry, options: Optional[QueryOptions] = None) -> str:
        """
        Create a session.

        Args:
            session: Session settings (Name, TTL, Behavior, LockDelay, ...)
            options: Query options

        Returns:
            The new session's ID

        Raises:
            HttpRequestError: If the control plane rejects the request
        """
        response = self._client.put("/session/create", session, params=params_of(options))
        return response["ID"]

    def destroy(self, session_id: str, options: Optional[QueryOptions] = None) -> bool:
        """Destroy a session, releasing any locks it holds."""
        return self._succeeds(
            f"Session destroy {session_id}",
            lambda: self._client.put(f"/session/destroy/{segment(session_id)}", params=params_of(options)),
        )

    def info(self, session_id: str, options: Optional[BlockingQueryOptions] = None) -> Optional[SessionEntry]:
        """Return a session, or None if it does not exist or the request failed."""
        return self._single(
            f"Session info {session_id}",
            lambda: self._client.get(f"/session/info/{segment(session_id)}", params=params_of(options)),
        )

    def node(self, node: str, options: Optional[BlockingQueryOptions] = None) -> List[SessionEntry]:
        """List the sessions belonging to a node."""
        return self._client.get(f"/session/node/{segment(node)}", params=params_of(options))

    def list(self, options: Optional[BlockingQueryOptions] = None) -> List[SessionEntry]:
        """List all sessions in the datacenter."""
        return self._client.get("/session/list", params=params_of(options))

    def renew(self, session_id: str, options: Optional[QueryOptions] = None) -> Optional[SessionEntry]:
        """Renew a TTL session. None if the session is gone or the request failed."""
        return self._single(
            f"Session renew {session_id}",
            lambda: self._client.put(f"/session/renew/{segment(session_id)}", params=params_of(options)),
        )
