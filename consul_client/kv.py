"""Key/value store endpoints."""

import base64
from typing import List, Optional, Union

from consul_client.base import EndpointGroup, params_of, segment
from consul_client.types import (
    BlockingQueryOptions,
    KVDeleteOptions,
    KVGetOptions,
    KVKeysOptions,
    KVPair,
    KVPutOptions,
)


def decode_value(pair: Optional[KVPair]) -> Optional[bytes]:
    """Return the base64-decoded Value of a KV entry, or None if it has none."""
    if not pair or pair.get("Value") is None:
        return None
    return base64.b64decode(pair["Value"])


class KVClient(EndpointGroup):
    """
    Client for /v1/kv.

    Lookups never raise: a missing key gives None, a missing prefix gives [].
    Writes return a boolean.
    """

    def get(self, key: str, options: Optional[KVGetOptions] = None) -> Optional[Union[KVPair, bytes]]:
        """
        Get a single entry.

        Args:
            key: Key to read
            options: Blocking query options; raw=True returns the stored value
                     as bytes instead of a KVPair

        Returns:
            The entry (or raw value), or None if the key does not exist or
            the request failed
        """
        params = params_of(options)

        if options is not None and options.raw:
            try:
                return self._client.get(f"/kv/{segment(key)}", params=params, response_type="bytes") or None
            except Exception as e:
                self._logger.warning(f"KV get {key} failed: {type(e).__name__}: {e}")
                return None

        return self._single(f"KV get {key}", lambda: self._client.get(f"/kv/{segment(key)}", params=params))

    def keys(self, prefix: str, options: Optional[KVKeysOptions] = None) -> List[str]:
        """List the keys under `prefix` (up to `separator`, if given)."""
        params = params_of(options)
        params["keys"] = True
        try:
            return self._client.get(f"/kv/{segment(prefix)}", params=params) or []
        except Exception as e:
            self._logger.warning(f"KV keys {prefix} failed: {type(e).__name__}: {e}")
            return []

    def list(self, prefix: str, options: Optional[BlockingQueryOptions] = None) -> List[KVPair]:
        """Return every entry under `prefix`."""
        params = params_of(options)
        params["recurse"] = True
        try:
            return self._client.get(f"/kv/{segment(prefix)}", params=params) or []
        except Exception as e:
            self._logger.warning(f"KV list {prefix} failed: {type(e).__name__}: {e}")
            return []

    def put(self, key: str, value: Union[str, bytes], options: Optional[KVPutOptions] = None) -> bool:
        """
        Store a value.

        The value is sent as-is with an octet-stream content type. With
        `cas`, `acquire` or `release` the server may refuse the write and
        answer `false`; the call itself still counts as a success.
        """
        return self._succeeds(
            f"KV put {key}",
            lambda: self._client.put(f"/kv/{segment(key)}", value, params=params_of(options)),
        )

    def delete(self, key: str, options: Optional[KVDeleteOptions] = None) -> bool:
        """Delete a key, or a whole prefix with recurse=True."""
        return self._succeeds(
            f"KV delete {key}",
            lambda: self._client.delete(f"/kv/{segment(key)}", params=params_of(options)),
        )
