"""Domain enumerations for the proof-of-funds client.

Enums represent fixed sets of domain values (job state, controller state).
"""

from enum import Enum


class JobState(str, Enum):
    """Backend-reported state of an asynchronous proof job.

    The backend is the only source of truth for transitions; the client
    never infers a state locally.
    """

    PENDING = "Pending"
    IN_PROGRESS = "InProgress"
    COMPLETED = "Completed"
    FAILED = "Failed"

    @property
    def is_terminal(self) -> bool:
        """True for COMPLETED and FAILED."""
        return self in (JobState.COMPLETED, JobState.FAILED)

    @classmethod
    def values(cls) -> list[str]:
        """Return all valid state values as strings.

        Returns:
            List of enum value strings (wire representation).
        """
        return [state.value for state in cls]


class ControllerState(str, Enum):
    """Lifecycle state of the job controller."""

    IDLE = "idle"
    SUBMITTING = "submitting"
    POLLING = "polling"
