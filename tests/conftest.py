"""
Pytest configuration for consul-client tests.
"""

import httpx
import pytest
from unittest.mock import MagicMock

from consul_client import ConsulClient


@pytest.fixture
def fetch():
    """Fetch function double; answers 200 with an empty JSON object by default."""
    return MagicMock(return_value=httpx.Response(200, json={}))


@pytest.fixture
def consul(fetch):
    """Client wired to the fetch double."""
    return ConsulClient(fetch_fn=fetch)


@pytest.fixture
def sent(fetch):
    """Return (url, request) of the last call made through the fetch double."""
    def last_call():
        url, request = fetch.call_args.args
        return url, request
    return last_call


@pytest.fixture
def kv_pair():
    """KV entry as returned by the API."""
    return {
        "Key": "config/feature",
        "CreateIndex": 100,
        "ModifyIndex": 200,
        "LockIndex": 0,
        "Flags": 42,
        "Value": "b24=",
        "Session": "adf4238a-882b-9ddc-4a9d-5b6758e4159e",
    }
