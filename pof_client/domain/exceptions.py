"""Exceptions for the proof-of-funds client.

Transport, response-shape, and job-lifecycle failures. All derive from
ProofOfFundsException so callers can catch one base type and still read
message, error_code, and details.
"""

from typing import Any


class ProofOfFundsException(Exception):
    """Base exception for all client errors.

    Attributes:
        message: Human-readable error description.
        error_code: Machine-readable error code.
        details: Additional error context (e.g. operation, job_id).
    """

    def __init__(
        self,
        message: str,
        error_code: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize the exception.

        Args:
            message: Human-readable error description.
            error_code: Optional machine-readable code; defaults to class name.
            details: Optional dict of extra context.
        """
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}
        super().__init__(self.message)


class TransportError(ProofOfFundsException):
    """Network failure, timeout, or non-success HTTP status from the backend.

    status_code is None when no HTTP response was received.
    """

    def __init__(
        self,
        operation: str,
        message: str,
        status_code: int | None = None,
        error_code: str = "TRANSPORT_ERROR",
        details: dict[str, Any] | None = None,
    ) -> None:
        self.operation = operation
        self.status_code = status_code
        super().__init__(
            message,
            error_code,
            {"operation": operation, "status_code": status_code, **(details or {})},
        )


class JobNotFoundError(TransportError):
    """Backend does not know the requested job id."""

    def __init__(
        self,
        job_id: str,
        status_code: int | None = None,
        message: str | None = None,
    ) -> None:
        self.job_id = job_id
        super().__init__(
            "check_job_status",
            message or f"Proof job not found: {job_id}",
            status_code=status_code,
            error_code="JOB_NOT_FOUND",
            details={"job_id": job_id},
        )


class MalformedResponseError(ProofOfFundsException):
    """Success status but the body does not match the expected shape."""

    def __init__(self, operation: str, reason: str) -> None:
        self.operation = operation
        super().__init__(
            f"Malformed response from {operation}: {reason}",
            "MALFORMED_RESPONSE",
            {"operation": operation, "reason": reason},
        )


class AlreadyActiveError(ProofOfFundsException):
    """A job is already being submitted or polled."""

    def __init__(self, job_id: str | None = None) -> None:
        message = (
            f"Proof job already active: {job_id}"
            if job_id
            else "Proof job submission already in progress"
        )
        super().__init__(
            message,
            "JOB_ALREADY_ACTIVE",
            {"job_id": job_id} if job_id else {},
        )


class NoActiveJobError(ProofOfFundsException):
    """A job-scoped operation was requested with no active job."""

    def __init__(self, message: str = "No active proof job") -> None:
        super().__init__(message, "NO_ACTIVE_JOB")


class PollingStoppedError(ProofOfFundsException):
    """Polling was stopped before the job reached a terminal state.

    job_id is None when the stop came while the job was still being submitted.
    """

    def __init__(self, job_id: str | None = None) -> None:
        message = (
            f"Polling stopped for proof job {job_id}"
            if job_id
            else "Polling stopped before the proof job was submitted"
        )
        super().__init__(
            message,
            "POLLING_STOPPED",
            {"job_id": job_id} if job_id else {},
        )
