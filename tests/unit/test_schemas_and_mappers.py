"""Wire schema and mapper tests: snake_case bodies, integer amounts, status mapping."""

import pytest
from pydantic import ValidationError

from pof_client.domain.enums import JobState
from pof_client.domain.exceptions import MalformedResponseError
from pof_client.domain.value_objects import CommitmentRequest, ProofRequest
from pof_client.infrastructure.backend import mappers
from pof_client.schemas.job import ProofJobStatusResponse
from pof_client.schemas.proof import ProofResponse, VerifyResponse


def test_commitment_body_omits_unset_fields_and_keeps_int_amount() -> None:
    body = mappers.commitment_to_wire(CommitmentRequest(bank_index=0, amount=50))
    assert body == {"bank_index": 0, "amount": 50}
    assert isinstance(body["amount"], int)


def test_proof_request_body() -> None:
    body = mappers.proof_request_to_wire(ProofRequest(required_amount=60.5, deal_id="DEAL123"))
    assert body == {"required_amount": 60.5, "deal_id": "DEAL123"}


def test_verify_request_rejects_empty_deal_id() -> None:
    with pytest.raises(ValidationError):
        mappers.verify_request_to_wire("")


def test_proof_response_is_verified_falls_back_to_success() -> None:
    assert ProofResponse(success=True).is_verified is True
    assert ProofResponse(success=False).is_verified is False
    assert ProofResponse().is_verified is False
    assert ProofResponse(success=True, verified=False).is_verified is False


def test_status_response_ignores_extra_fields() -> None:
    body = ProofJobStatusResponse.model_validate(
        {"status": "Pending", "worker": "w-1", "created_at": "2024-05-01T10:00:00"}
    )
    assert body.status is JobState.PENDING
    # Naive timestamps are treated as UTC.
    assert body.created_at.utcoffset().total_seconds() == 0


def test_job_status_from_wire_completed() -> None:
    body = ProofJobStatusResponse.model_validate(
        {
            "status": "Completed",
            "proof": {
                "success": True,
                "verified_amount": 60,
                "deal_info": {"amount": 60, "buyer": "buyer123", "deal_id": "DEAL123"},
            },
        }
    )
    status = mappers.job_status_from_wire("job-1", body, "check_job_status")
    assert status.state is JobState.COMPLETED
    assert status.proof.verified is True
    assert status.proof.verified_amount == 60


def test_job_status_from_wire_completed_proof_without_deal_info() -> None:
    body = ProofJobStatusResponse.model_validate(
        {"status": "Completed", "proof": {"success": True}}
    )
    with pytest.raises(MalformedResponseError, match="deal_info"):
        mappers.job_status_from_wire("job-1", body, "check_job_status")


def test_verification_from_wire() -> None:
    ok = mappers.verification_from_wire(
        VerifyResponse.model_validate(
            {"verified": True, "deal_info": {"amount": 1, "buyer": "b", "deal_id": "D"}}
        ),
        "verify_proof",
    )
    assert ok.deal_info.deal_id == "D"
    rejected = mappers.verification_from_wire(VerifyResponse(verified=False), "verify_proof")
    assert rejected.deal_info is None
