"""Prepared query endpoints."""

from typing import Any, Dict, List, Optional

from consul_client.base import EndpointGroup, params_of, segment
from consul_client.types import QueryExecuteOptions, QueryOptions


class QueryClient(EndpointGroup):
    """
    Client for /v1/query.

    create, list and execute raise on failure; update and delete return a
    boolean; get returns None on failure.
    """

    def create(self, query: Dict[str, Any], options: Optional[QueryOptions] = None) -> Dict[str, Any]:
        """Create a prepared query. The response carries the new query's ID."""
        return self._client.post("/query", query, params=params_of(options))

    def update(self, query_id: str, query: Dict[str, Any], options: Optional[QueryOptions] = None) -> bool:
        """Replace an existing prepared query."""
        return self._succeeds(
            f"Query update {query_id}",
            lambda: self._client.put(f"/query/{segment(query_id)}", query, params=params_of(options)),
        )

    def list(self, options: Optional[QueryOptions] = None) -> List[Dict[str, Any]]:
        """List all prepared queries."""
        return self._client.get("/query", params=params_of(options))

    def get(self, query_id: str, options: Optional[QueryOptions] = None) -> Optional[Dict[str, Any]]:
        """Return one prepared query, or None."""
        return self._single(
            f"Query get {query_id}",
            lambda: self._client.get(f"/query/{segment(query_id)}", params=params_of(options)),
        )

    def delete(self, query_id: str, options: Optional[QueryOptions] = None) -> bool:
        """Delete a prepared query."""
        return self._succeeds(
            f"Query delete {query_id}",
            lambda: self._client.delete(f"/query/{segment(query_id)}", params=params_of(options)),
        )

    def execute(self, query_id_or_name: str, options: Optional[QueryExecuteOptions] = None) -> Dict[str, Any]:
        """Run a prepared query by ID or name and return its result."""
        return self._client.get(f"/query/{segment(query_id_or_name)}/execute", params=params_of(options))
