"""Translation between backend wire schemas and domain value objects.

Wire names are lower_snake_case JSON owned by pof_client.schemas; domain
types use semantic names. Shape problems the schemas cannot express
(e.g. a proof without deal_info) raise MalformedResponseError here.
"""

from typing import Any

from pof_client.core.constants import DEFAULT_JOB_FAILED_MESSAGE
from pof_client.domain.enums import JobState
from pof_client.domain.exceptions import MalformedResponseError
from pof_client.domain.value_objects import (
    CommitmentRequest,
    DealInfo,
    JobHandle,
    JobStatus,
    ProofRequest,
    ProofResult,
)
from pof_client.schemas.commitment import CommitmentCreateRequest
from pof_client.schemas.job import ProofJobCreateResponse, ProofJobStatusResponse
from pof_client.schemas.proof import (
    DealInfoResponse,
    ProofCreateRequest,
    ProofResponse,
    VerifyRequest,
    VerifyResponse,
)
from pof_client.shared.utils.datetime import ensure_utc, utc_now


def commitment_to_wire(request: CommitmentRequest) -> dict[str, Any]:
    """Commitment body; optional deal_id/buyer are left out when unset."""
    return CommitmentCreateRequest(
        bank_index=request.bank_index,
        amount=request.amount,
        deal_id=request.deal_id,
        buyer=request.buyer,
    ).model_dump(exclude_none=True)


def proof_request_to_wire(request: ProofRequest) -> dict[str, Any]:
    return ProofCreateRequest(
        required_amount=request.required_amount,
        deal_id=request.deal_id,
    ).model_dump()


def verify_request_to_wire(deal_id: str) -> dict[str, Any]:
    return VerifyRequest(deal_id=deal_id).model_dump()


def deal_info_from_wire(deal_info: DealInfoResponse) -> DealInfo:
    return DealInfo(
        amount=deal_info.amount,
        buyer=deal_info.buyer,
        deal_id=deal_info.deal_id,
    )


def proof_result_from_wire(proof: ProofResponse, operation: str) -> ProofResult:
    """Map a generated proof. deal_info is mandatory for generation results."""
    if proof.deal_info is None:
        raise MalformedResponseError(operation, "proof is missing deal_info")
    return ProofResult(
        verified=proof.is_verified,
        deal_info=deal_info_from_wire(proof.deal_info),
        verified_amount=proof.verified_amount,
    )


def verification_from_wire(body: VerifyResponse, operation: str) -> ProofResult:
    """Map a verification result. Only a failed verification may omit deal_info."""
    if body.verified and body.deal_info is None:
        raise MalformedResponseError(operation, "verified proof is missing deal_info")
    return ProofResult(
        verified=body.verified,
        deal_info=deal_info_from_wire(body.deal_info) if body.deal_info else None,
    )


def job_handle_from_wire(body: ProofJobCreateResponse) -> JobHandle:
    """Build the handle; the submit response has no timestamp so the client stamps it."""
    return JobHandle(job_id=body.job_id, created_at=utc_now())


def job_status_from_wire(
    job_id: str, body: ProofJobStatusResponse, operation: str
) -> JobStatus:
    """Map a status snapshot into the tagged JobStatus variant."""
    proof: ProofResult | None = None
    error: str | None = body.error
    if body.status is JobState.COMPLETED:
        if body.proof is None:
            raise MalformedResponseError(operation, "completed job is missing proof")
        proof = proof_result_from_wire(body.proof, operation)
    elif body.status is JobState.FAILED:
        error = error or DEFAULT_JOB_FAILED_MESSAGE
    return JobStatus(
        job_id=job_id,
        state=body.status,
        created_at=ensure_utc(body.created_at),
        updated_at=ensure_utc(body.updated_at),
        proof=proof,
        error=error,
    )
