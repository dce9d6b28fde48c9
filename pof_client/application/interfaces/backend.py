"""Backend interface (port) for the application layer.

Protocol defines the contract the job controller depends on (DIP);
ProofBackendClient implements it.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from pof_client.domain.value_objects import (
        CommitmentAck,
        CommitmentRequest,
        JobHandle,
        JobStatus,
        ProofRequest,
        ProofResult,
    )


class IProofBackend(Protocol):
    """Protocol for the proof-of-funds backend operations."""

    async def create_commitment(self, request: CommitmentRequest) -> CommitmentAck:
        """Create a bank commitment; returns the backend acknowledgement."""

    async def generate_proof_sync(self, request: ProofRequest) -> ProofResult:
        """Generate a proof and wait for it."""

    async def generate_proof_async(self, request: ProofRequest) -> JobHandle:
        """Submit a background proof job and return its handle."""

    async def check_job_status(self, job_id: str) -> JobStatus:
        """Return the backend's current status for the job."""

    async def verify_proof(self, deal_id: str) -> ProofResult:
        """Verify the stored proof for a deal."""
