"""Infrastructure exceptions shared by every catalog module."""

from __future__ import annotations


class StoreError(Exception):
    """The product store could not complete an operation.

    Wraps connectivity, I/O and constraint failures coming from the
    database driver.  Views map it to a 500 response.
    """
