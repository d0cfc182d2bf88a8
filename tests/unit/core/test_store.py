"""Unit tests for the store connection handle."""

from __future__ import annotations

from unittest.mock import MagicMock, PropertyMock, patch

import pytest
from django.db import OperationalError, connection

from modules.core.exceptions import StoreError
from modules.core.store import StoreConnection, connect_store

pytestmark = pytest.mark.unit


@pytest.fixture()
def unreachable_store():
    conn = MagicMock()
    conn.ensure_connection.side_effect = OperationalError("connection refused")
    with patch.object(
        StoreConnection, "connection", new_callable=PropertyMock, return_value=conn
    ):
        yield conn


class TestConnectStore:
    def test_returns_handle_for_default_alias(self):
        handle = connect_store()
        assert isinstance(handle, StoreConnection)
        assert handle.alias == "default"

    def test_is_idempotent(self):
        assert connect_store() is connect_store()

    def test_unreachable_store_raises_store_error(self, unreachable_store):
        with pytest.raises(StoreError, match="connection refused"):
            connect_store()

    def test_failed_connect_is_not_cached(self, unreachable_store):
        with pytest.raises(StoreError):
            connect_store()
        unreachable_store.ensure_connection.side_effect = None
        assert connect_store().alias == "default"


class TestStoreConnection:
    def test_ping_returns_elapsed_ms(self):
        elapsed = StoreConnection().ping()
        assert elapsed >= 0

    def test_ping_wraps_driver_errors(self, unreachable_store):
        with pytest.raises(StoreError):
            StoreConnection().ping()

    def test_vendor(self):
        assert StoreConnection().vendor == connection.vendor

    def test_repr(self):
        assert repr(StoreConnection("replica")) == "StoreConnection(alias='replica')"
