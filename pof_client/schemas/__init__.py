"""Wire schemas for the proof-of-funds backend (lower_snake_case JSON)."""

from pof_client.schemas.commitment import CommitmentCreateRequest
from pof_client.schemas.job import ProofJobCreateResponse, ProofJobStatusResponse
from pof_client.schemas.proof import (
    DealInfoResponse,
    ProofCreateRequest,
    ProofResponse,
    VerifyRequest,
    VerifyResponse,
)

__all__ = [
    "CommitmentCreateRequest",
    "DealInfoResponse",
    "ProofCreateRequest",
    "ProofJobCreateResponse",
    "ProofJobStatusResponse",
    "ProofResponse",
    "VerifyRequest",
    "VerifyResponse",
]
