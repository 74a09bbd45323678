"""Transaction endpoint."""

import json
from typing import List, Optional

from consul_client.base import EndpointGroup, params_of
from consul_client.errors import HttpRequestError
from consul_client.types import QueryOptions, TxnOp, TxnResponse

# Status the server uses for a rolled-back transaction; its body is a TxnResponse
ROLLED_BACK = 409


class TxnClient(EndpointGroup):
    """Client for /v1/txn."""

    def create(self, operations: List[TxnOp], options: Optional[QueryOptions] = None) -> TxnResponse:
        """
        Apply a list of operations atomically.

        The decoded response is returned unchanged, including the server's
        per-operation "Errors" list when the transaction was rolled back.
        Any other failure is raised.
        """
        try:
            return self._client.put("/txn", operations, params=params_of(options))
        except HttpRequestError as e:
            if e.status_code != ROLLED_BACK:
                raise
            try:
                return json.loads(e.body)
            except ValueError:
                raise e from None
