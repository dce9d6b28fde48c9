"""Domain value objects for the proof-of-funds client.

Value objects are immutable types that represent domain concepts with
self-validation. They use semantic names; wire field naming lives in
pof_client.schemas.
"""

import math
from dataclasses import dataclass
from datetime import datetime
from typing import Any, TypeAlias

from pof_client.domain.enums import JobState

# Backend-defined acknowledgement for a commitment; passed through untyped.
CommitmentAck: TypeAlias = dict[str, Any]


def _validate_positive(value: float, field_name: str) -> None:
    """Raise ValueError unless value is a finite number greater than zero."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValueError(f"{field_name} must be a number")
    if not math.isfinite(value) or value <= 0:
        raise ValueError(f"{field_name} must be a positive number")


def _validate_non_empty(value: str, field_name: str) -> None:
    if not isinstance(value, str) or not value.strip():
        raise ValueError(f"{field_name} must be a non-empty string")


@dataclass(frozen=True)
class CommitmentRequest:
    """Pledge of funds from one bank.

    bank_index selects the bank's signing key on the backend. deal_id and
    buyer are optional; the backend applies its own defaults when omitted.
    """

    bank_index: int
    amount: float
    deal_id: str | None = None
    buyer: str | None = None

    def __post_init__(self) -> None:
        if isinstance(self.bank_index, bool) or not isinstance(self.bank_index, int):
            raise ValueError("bank_index must be an integer")
        if self.bank_index < 0:
            raise ValueError("bank_index must be >= 0")
        _validate_positive(self.amount, "amount")
        if self.deal_id is not None:
            _validate_non_empty(self.deal_id, "deal_id")
        if self.buyer is not None:
            _validate_non_empty(self.buyer, "buyer")


@dataclass(frozen=True)
class ProofRequest:
    """Proof to generate for a named deal (sync or async)."""

    required_amount: float
    deal_id: str

    def __post_init__(self) -> None:
        _validate_positive(self.required_amount, "required_amount")
        _validate_non_empty(self.deal_id, "deal_id")


@dataclass(frozen=True)
class DealInfo:
    """Deal data committed into a proof."""

    amount: float
    buyer: str
    deal_id: str


@dataclass(frozen=True)
class ProofResult:
    """Outcome of proof generation or verification.

    deal_info is None only for a verification that did not succeed.
    """

    verified: bool
    deal_info: DealInfo | None
    verified_amount: float | None = None


@dataclass(frozen=True)
class JobHandle:
    """Identifies one in-flight asynchronous proof job."""

    job_id: str
    created_at: datetime

    def __post_init__(self) -> None:
        _validate_non_empty(self.job_id, "job_id")


@dataclass(frozen=True)
class JobStatus:
    """Backend-reported status of a proof job.

    Tagged by state: proof is set for COMPLETED, error for FAILED.
    """

    job_id: str
    state: JobState
    created_at: datetime | None = None
    updated_at: datetime | None = None
    proof: ProofResult | None = None
    error: str | None = None

    def __post_init__(self) -> None:
        if self.state is JobState.COMPLETED and self.proof is None:
            raise ValueError("Completed job status requires a proof")

    @property
    def is_terminal(self) -> bool:
        """True once the job is COMPLETED or FAILED."""
        return self.state.is_terminal
