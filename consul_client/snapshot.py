"""Snapshot endpoints for backing up and restoring server state."""

from typing import Optional, Union

from consul_client.base import EndpointGroup, params_of
from consul_client.http import OCTET_STREAM_CONTENT_TYPE
from consul_client.types import QueryOptions


class SnapshotClient(EndpointGroup):
    """Client for /v1/snapshot."""

    def save(self, options: Optional[QueryOptions] = None) -> bytes:
        """Download a point-in-time snapshot (gzipped tar archive)."""
        return self._client.get("/snapshot", params=params_of(options), response_type="bytes")

    def restore(self, snapshot: Union[bytes, bytearray], options: Optional[QueryOptions] = None) -> bool:
        """Restore a snapshot previously produced by save()."""
        return self._succeeds(
            "Snapshot restore",
            lambda: self._client.put(
                "/snapshot",
                snapshot,
                params=params_of(options),
                headers={"Content-Type": OCTET_STREAM_CONTENT_TYPE},
            ),
        )
