"""Domain layer: value objects, enums, and exceptions.

No dependencies on infrastructure or presentation. Used by application
and infrastructure layers.
"""

from pof_client.domain.enums import ControllerState, JobState
from pof_client.domain.exceptions import (
    AlreadyActiveError,
    JobNotFoundError,
    MalformedResponseError,
    NoActiveJobError,
    PollingStoppedError,
    ProofOfFundsException,
    TransportError,
)
from pof_client.domain.value_objects import (
    CommitmentAck,
    CommitmentRequest,
    DealInfo,
    JobHandle,
    JobStatus,
    ProofRequest,
    ProofResult,
)

__all__ = [
    "AlreadyActiveError",
    "CommitmentAck",
    "CommitmentRequest",
    "ControllerState",
    "DealInfo",
    "JobHandle",
    "JobNotFoundError",
    "JobState",
    "JobStatus",
    "MalformedResponseError",
    "NoActiveJobError",
    "PollingStoppedError",
    "ProofOfFundsException",
    "ProofRequest",
    "ProofResult",
    "TransportError",
]
