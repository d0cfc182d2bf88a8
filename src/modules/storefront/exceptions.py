"""Storefront client exceptions."""

from __future__ import annotations

from typing import Optional


class ProductAPIError(Exception):
    """A catalog API call failed or answered with an error status.

    ``status_code`` is ``None`` when no response was received.
    """

    def __init__(self, message: str, status_code: Optional[int] = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class InvalidFlowTransition(Exception):
    """An event was sent to the delete flow from a state that does not accept it."""


class NavigationError(Exception):
    """Loading the target route failed; the router stayed on the current path."""
