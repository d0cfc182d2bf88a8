"""Base abstract model for catalog entities.

``BaseModel`` gives every entity a store-assigned UUIDv7 primary key and
``created_at`` / ``updated_at`` bookkeeping.  Records are hard-deleted; there
is no soft-delete state.
"""

from __future__ import annotations

import uuid6
from django.db import models


class BaseModel(models.Model):
    """Abstract base with UUIDv7 PK and timestamp bookkeeping."""

    id = models.UUIDField(
        primary_key=True,
        default=uuid6.uuid7,
        editable=False,
    )
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        abstract = True
