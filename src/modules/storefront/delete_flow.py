"""Delete confirmation flow for the product detail view.

The delete button never calls the API directly: it opens a confirmation
modal, and only an explicit confirm issues the delete.  Navigation back to
the catalog happens only after the API accepted the delete; a failed call
keeps the modal open with the error so the user can retry or cancel.

    IDLE --request--> CONFIRM_PENDING --cancel--> IDLE
                      CONFIRM_PENDING --confirm--> DELETING
                      DELETING --ok--> DELETED (navigate home)
                      DELETING --error--> FAILED --confirm/cancel--> DELETING/IDLE
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional

import structlog

from modules.storefront.constants import (
    HOME_PATH,
    MODAL_STATES,
    VALID_TRANSITIONS,
    FlowState,
)
from modules.storefront.exceptions import InvalidFlowTransition, ProductAPIError

if TYPE_CHECKING:
    from modules.storefront.client import ProductAPIClient
    from modules.storefront.navigation import Navigator

logger = structlog.get_logger(__name__)


class DeleteConfirmationFlow:
    """Two-step delete gate for one product.

    Single-threaded: the flow leaves ``CONFIRM_PENDING`` before the delete
    call is issued, so at most one call is in flight per instance.
    """

    def __init__(
        self,
        product_id: str,
        client: ProductAPIClient,
        navigator: Navigator,
        home_path: str = HOME_PATH,
    ) -> None:
        self.product_id = product_id
        self._client = client
        self._navigator = navigator
        self._home_path = home_path
        self._state = FlowState.IDLE
        self.error: Optional[str] = None

    @property
    def state(self) -> FlowState:
        return self._state

    @property
    def modal_open(self) -> bool:
        return self._state in MODAL_STATES

    def can_transition_to(self, new_state: FlowState) -> bool:
        return new_state in VALID_TRANSITIONS.get(self._state, set())

    # ------------------------------------------------------------------
    # User events
    # ------------------------------------------------------------------

    def request_delete(self) -> FlowState:
        """Open the confirmation modal."""
        return self._transition(FlowState.CONFIRM_PENDING)

    def cancel(self) -> FlowState:
        """Close the modal without side effects."""
        self.error = None
        return self._transition(FlowState.IDLE)

    def confirm(self) -> FlowState:
        """Issue the delete call and settle into ``DELETED`` or ``FAILED``.

        Raises:
            InvalidFlowTransition: if no confirmation is pending, including
                while a delete is already in flight.
        """
        self._transition(FlowState.DELETING)
        self.error = None
        try:
            self._client.delete_product(self.product_id)
        except ProductAPIError as exc:
            self.error = str(exc)
            logger.warning(
                "delete_flow.failed",
                product_id=self.product_id,
                status_code=exc.status_code,
                error=self.error,
            )
            return self._transition(FlowState.FAILED)

        self._transition(FlowState.DELETED)
        self._navigator.push(self._home_path)
        return self._state

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _transition(self, new_state: FlowState) -> FlowState:
        if not self.can_transition_to(new_state):
            raise InvalidFlowTransition(
                f"Cannot go from {self._state.value} to {new_state.value}."
            )
        logger.info(
            "delete_flow.transition",
            product_id=self.product_id,
            from_state=self._state.value,
            to_state=new_state.value,
        )
        self._state = new_state
        return self._state
