"""Connection handle for the product store.

The store is reached through a Django database alias.  ``connect_store()``
is the explicit process-startup step: it opens the connection once, logs it,
and returns a ``StoreConnection`` handle that repositories receive by
reference.  Calling it again for the same alias returns the same handle.
"""

from __future__ import annotations

import threading
import time
from typing import Dict

import structlog
from django.db import DEFAULT_DB_ALIAS, DatabaseError, connections
from django.db.backends.base.base import BaseDatabaseWrapper

from modules.core.exceptions import StoreError

logger = structlog.get_logger(__name__)

_handles: Dict[str, "StoreConnection"] = {}
_handles_lock = threading.Lock()


class StoreConnection:
    """Handle on one configured store alias."""

    def __init__(self, alias: str = DEFAULT_DB_ALIAS) -> None:
        self.alias = alias

    @property
    def connection(self) -> BaseDatabaseWrapper:
        # Django keeps one wrapper per thread and alias.
        return connections[self.alias]

    @property
    def vendor(self) -> str:
        return self.connection.vendor

    def ensure(self) -> None:
        """Open the underlying connection if it is not open yet."""
        try:
            self.connection.ensure_connection()
        except DatabaseError as exc:
            raise StoreError(f"Cannot connect to store '{self.alias}': {exc}") from exc

    def ping(self) -> float:
        """Run a trivial query and return the round trip in milliseconds."""
        start = time.monotonic()
        self.ensure()
        try:
            with self.connection.cursor() as cursor:
                cursor.execute("SELECT 1")
                cursor.fetchone()
        except DatabaseError as exc:
            raise StoreError(f"Store '{self.alias}' did not answer: {exc}") from exc
        return round((time.monotonic() - start) * 1000, 2)

    def __repr__(self) -> str:
        return f"StoreConnection(alias={self.alias!r})"


def connect_store(alias: str = DEFAULT_DB_ALIAS) -> StoreConnection:
    """Initialise the store connection for *alias* and return its handle.

    Idempotent: the first call connects and caches the handle, later calls
    return the cached handle without reconnecting.

    Raises:
        StoreError: if the store cannot be reached on the first call.
    """
    with _handles_lock:
        handle = _handles.get(alias)
        if handle is not None:
            return handle
        handle = StoreConnection(alias)
        handle.ensure()
        _handles[alias] = handle

    logger.info("store.connected", alias=alias, vendor=handle.vendor)
    return handle


def reset_store_handles() -> None:
    """Forget cached handles (used when settings change, e.g. in tests)."""
    with _handles_lock:
        _handles.clear()
