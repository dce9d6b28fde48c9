"""Tests for client exceptions (error_code, message, details)."""

from pof_client.domain.exceptions import (
    AlreadyActiveError,
    JobNotFoundError,
    MalformedResponseError,
    NoActiveJobError,
    PollingStoppedError,
    ProofOfFundsException,
    TransportError,
)


def test_base_exception_default_error_code() -> None:
    """Base exception uses class name as error_code when not provided."""
    exc = ProofOfFundsException("Something failed")
    assert exc.message == "Something failed"
    assert exc.error_code == "ProofOfFundsException"
    assert exc.details == {}
    assert str(exc) == "Something failed"


def test_transport_error() -> None:
    exc = TransportError("generate_proof_sync", "Internal Server Error", status_code=500)
    assert exc.operation == "generate_proof_sync"
    assert exc.status_code == 500
    assert exc.error_code == "TRANSPORT_ERROR"
    assert exc.details == {"operation": "generate_proof_sync", "status_code": 500}
    assert isinstance(exc, ProofOfFundsException)


def test_transport_error_without_response() -> None:
    exc = TransportError("verify_proof", "Request failed: connection refused")
    assert exc.status_code is None


def test_job_not_found_is_transport_error() -> None:
    exc = JobNotFoundError("job-1", status_code=404)
    assert isinstance(exc, TransportError)
    assert exc.operation == "check_job_status"
    assert exc.message == "Proof job not found: job-1"
    assert exc.error_code == "JOB_NOT_FOUND"
    assert exc.details == {"operation": "check_job_status", "status_code": 404, "job_id": "job-1"}


def test_malformed_response_error() -> None:
    exc = MalformedResponseError("generate_proof_async", "job_id: Field required")
    assert exc.message == "Malformed response from generate_proof_async: job_id: Field required"
    assert exc.error_code == "MALFORMED_RESPONSE"
    assert exc.details["reason"] == "job_id: Field required"


def test_already_active_error_with_and_without_job() -> None:
    exc = AlreadyActiveError("job-1")
    assert exc.message == "Proof job already active: job-1"
    assert exc.details == {"job_id": "job-1"}
    submitting = AlreadyActiveError()
    assert submitting.message == "Proof job submission already in progress"
    assert submitting.details == {}
    assert submitting.error_code == "JOB_ALREADY_ACTIVE"


def test_no_active_job_and_polling_stopped() -> None:
    assert NoActiveJobError().error_code == "NO_ACTIVE_JOB"
    stopped = PollingStoppedError("job-1")
    assert stopped.error_code == "POLLING_STOPPED"
    assert stopped.details == {"job_id": "job-1"}
    before_submit = PollingStoppedError()
    assert before_submit.message == "Polling stopped before the proof job was submitted"
    assert before_submit.details == {}
