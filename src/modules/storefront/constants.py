"""Delete confirmation flow constants.

Defines the flow states and the valid transitions of the delete
confirmation state machine.
"""

from enum import Enum


class FlowState(str, Enum):
    IDLE = "IDLE"
    CONFIRM_PENDING = "CONFIRM_PENDING"
    DELETING = "DELETING"
    DELETED = "DELETED"
    FAILED = "FAILED"


VALID_TRANSITIONS: dict[FlowState, set[FlowState]] = {
    FlowState.IDLE: {FlowState.CONFIRM_PENDING},
    FlowState.CONFIRM_PENDING: {FlowState.IDLE, FlowState.DELETING},
    FlowState.DELETING: {FlowState.DELETED, FlowState.FAILED},
    FlowState.DELETED: set(),
    FlowState.FAILED: {FlowState.IDLE, FlowState.DELETING},
}

# States in which the confirmation modal is shown
MODAL_STATES: set[FlowState] = {
    FlowState.CONFIRM_PENDING,
    FlowState.DELETING,
    FlowState.FAILED,
}

HOME_PATH = "/"
