"""Tests for the session endpoints."""

import json

import httpx
import pytest

from consul_client.errors import HttpRequestError
from consul_client.types import BlockingQueryOptions

BASE = "http://localhost:8500/v1"
SESSION_ID = "adf4238a-882b-9ddc-4a9d-5b6758e4159e"


@pytest.fixture
def session_entry():
    return {
        "ID": SESSION_ID,
        "Name": "leader-lock",
        "Node": "n1",
        "LockDelay": 15000000000,
        "Behavior": "release",
        "TTL": "30s",
    }


class TestSessionClient:
    """Tests for SessionClient."""

    def test_create_returns_id(self, consul, fetch, sent):
        fetch.return_value = httpx.Response(200, json={"ID": SESSION_ID})

        session_id = consul.session.create({"Name": "leader-lock", "TTL": "30s", "Behavior": "delete"})

        assert session_id == SESSION_ID
        url, request = sent()
        assert url == f"{BASE}/session/create"
        assert request.method == "PUT"
        assert json.loads(request.content) == {"Name": "leader-lock", "TTL": "30s", "Behavior": "delete"}

    def test_create_failure_raises(self, consul, fetch):
        fetch.return_value = httpx.Response(500, text="Missing node registration")

        with pytest.raises(HttpRequestError):
            consul.session.create({"Node": "ghost"})

    def test_destroy(self, consul, fetch, sent):
        fetch.return_value = httpx.Response(200, json=True)

        assert consul.session.destroy(SESSION_ID) is True
        assert sent()[0] == f"{BASE}/session/destroy/{SESSION_ID}"
        assert sent()[1].method == "PUT"

    def test_destroy_failure_returns_false(self, consul, fetch):
        fetch.return_value = httpx.Response(403, text="Permission denied")
        assert consul.session.destroy(SESSION_ID) is False

    def test_info_collapses_list(self, consul, fetch, sent, session_entry):
        fetch.return_value = httpx.Response(200, json=[session_entry])

        assert consul.session.info(SESSION_ID, BlockingQueryOptions(index=3)) == session_entry
        assert sent()[0] == f"{BASE}/session/info/{SESSION_ID}?index=3"

    def test_info_unknown_session_returns_none(self, consul, fetch):
        # The API answers null for an unknown session
        fetch.return_value = httpx.Response(200, content=b"null")
        assert consul.session.info("missing") is None

    def test_info_failure_returns_none(self, consul, fetch):
        fetch.return_value = httpx.Response(500, text="boom")
        assert consul.session.info(SESSION_ID) is None

    def test_node_and_list(self, consul, fetch, sent, session_entry):
        fetch.return_value = httpx.Response(200, json=[session_entry])

        assert consul.session.node("n1") == [session_entry]
        assert sent()[0] == f"{BASE}/session/node/n1"

        assert consul.session.list(BlockingQueryOptions(consistency="stale")) == [session_entry]
        assert sent()[0] == f"{BASE}/session/list?stale=true"

    def test_renew(self, consul, fetch, sent, session_entry):
        fetch.return_value = httpx.Response(200, json=[session_entry])

        assert consul.session.renew(SESSION_ID) == session_entry
        url, request = sent()
        assert url == f"{BASE}/session/renew/{SESSION_ID}"
        assert request.method == "PUT"

    def test_renew_expired_returns_none(self, consul, fetch):
        fetch.return_value = httpx.Response(404, text=f"Session id '{SESSION_ID}' not found")
        assert consul.session.renew(SESSION_ID) is None
