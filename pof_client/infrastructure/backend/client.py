"""HTTP client for the proof-of-funds backend.

One method per backend operation; each performs exactly one request with
no retries and no caching. All HTTP calls use httpx.AsyncClient so they do
not block the event loop. Failures surface as TransportError (network,
timeout, non-2xx, backend error body) or MalformedResponseError (success
status with an unexpected body).
"""

from __future__ import annotations

import json
from typing import Any, TypeVar
from urllib.parse import quote

import httpx
from pydantic import BaseModel, ValidationError

from pof_client.core.config import get_settings
from pof_client.core.constants import (
    JSON_HEADERS,
    MAX_ERROR_BODY_CHARS,
    PATH_COMMITMENT,
    PATH_PROOF_JOBS,
    PATH_PROOF_SYNC,
    PATH_VERIFY,
)
from pof_client.domain.exceptions import (
    JobNotFoundError,
    MalformedResponseError,
    TransportError,
)
from pof_client.domain.value_objects import (
    CommitmentAck,
    CommitmentRequest,
    JobHandle,
    JobStatus,
    ProofRequest,
    ProofResult,
)
from pof_client.infrastructure.backend import mappers
from pof_client.schemas.job import ProofJobCreateResponse, ProofJobStatusResponse
from pof_client.schemas.proof import ProofResponse, VerifyResponse
from pof_client.shared.telemetry.logging import get_logger
from pof_client.shared.telemetry.tracing import add_span_attributes, traced

logger = get_logger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)

_JOB_NOT_FOUND_PREFIX = "Proof job not found"


def _error_message(response: httpx.Response) -> str:
    """Best-effort message from an error response; the body may not be JSON."""
    text = response.text.strip()
    try:
        data = json.loads(text) if text else None
    except ValueError:
        data = None
    if isinstance(data, dict):
        for key in ("error", "detail", "message"):
            value = data.get(key)
            if isinstance(value, str) and value:
                return value
    if text:
        return text[:MAX_ERROR_BODY_CHARS]
    return f"HTTP {response.status_code} {response.reason_phrase}".strip()


def _backend_error(data: dict[str, Any], expected_keys: tuple[str, ...]) -> str | None:
    """Return the backend's error string when the body is an error report.

    The backend reports some failures with a success status and an
    {"error": ...} body; a body carrying any expected key is a real result.
    """
    error = data.get("error")
    if not isinstance(error, str):
        return None
    if data.keys() & set(expected_keys):
        return None
    return error


def _summarize_validation(exc: ValidationError) -> str:
    parts = []
    for err in exc.errors()[:3]:
        loc = ".".join(str(p) for p in err.get("loc", ())) or "body"
        parts.append(f"{loc}: {err.get('msg')}")
    return "; ".join(parts)


class ProofBackendClient:
    """Typed client for the five backend operations."""

    def __init__(
        self,
        base_url: str | None = None,
        *,
        timeout_seconds: float | None = None,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        settings = get_settings()
        self._base_url = (base_url or settings.backend_base_url).rstrip("/")
        self._timeout = (
            timeout_seconds
            if timeout_seconds is not None
            else settings.request_timeout_seconds
        )
        self._http = (
            http_client
            if http_client is not None
            else httpx.AsyncClient(timeout=self._timeout)
        )
        self._owns_http = http_client is None

    @property
    def base_url(self) -> str:
        return self._base_url

    async def aclose(self) -> None:
        """Close the HTTP client only if we created it (do not close injected client)."""
        if self._owns_http:
            await self._http.aclose()

    async def __aenter__(self) -> ProofBackendClient:
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()

    async def _request(
        self,
        operation: str,
        method: str,
        path: str,
        body: dict[str, Any] | None = None,
    ) -> httpx.Response:
        """Perform one HTTP request. Non-2xx and transport failures raise TransportError."""
        url = f"{self._base_url}{path}"
        try:
            response = await self._http.request(
                method,
                url,
                json=body,
                headers=JSON_HEADERS,
                timeout=self._timeout,
            )
        except httpx.TimeoutException as e:
            logger.warning("Backend %s timed out after %ss: %s %s", operation, self._timeout, method, url)
            raise TransportError(
                operation, f"Request timed out after {self._timeout}s: {method} {path}"
            ) from e
        except httpx.HTTPError as e:
            logger.warning("Backend %s request failed: %s", operation, e)
            raise TransportError(operation, f"Request failed: {e}") from e

        if not response.is_success:
            message = _error_message(response)
            logger.warning(
                "Backend %s returned %s: %s", operation, response.status_code, message
            )
            raise TransportError(operation, message, status_code=response.status_code)
        return response

    def _json_object(self, operation: str, response: httpx.Response) -> dict[str, Any]:
        try:
            data = response.json()
        except ValueError as e:
            raise MalformedResponseError(operation, "body is not valid JSON") from e
        if not isinstance(data, dict):
            raise MalformedResponseError(operation, "expected a JSON object")
        return data

    def _parse(
        self,
        operation: str,
        response: httpx.Response,
        model: type[ModelT],
        expected_keys: tuple[str, ...],
    ) -> ModelT:
        """Decode and validate a success body, turning backend error bodies into TransportError."""
        data = self._json_object(operation, response)
        error = _backend_error(data, expected_keys)
        if error is not None:
            logger.warning("Backend %s reported error: %s", operation, error)
            raise TransportError(operation, error, status_code=response.status_code)
        try:
            return model.model_validate(data)
        except ValidationError as e:
            raise MalformedResponseError(operation, _summarize_validation(e)) from e

    @traced("pof_client.backend.create_commitment")
    async def create_commitment(self, request: CommitmentRequest) -> CommitmentAck:
        """POST /lb/commitment. The acknowledgement body is passed through untyped."""
        operation = "create_commitment"
        add_span_attributes(bank_index=request.bank_index)
        response = await self._request(
            operation, "POST", PATH_COMMITMENT, mappers.commitment_to_wire(request)
        )
        data = self._json_object(operation, response)
        error = _backend_error(data, ())
        if error is not None:
            logger.warning("Backend %s reported error: %s", operation, error)
            raise TransportError(operation, error, status_code=response.status_code)
        logger.info("Commitment created: bank_index=%s", request.bank_index)
        return data

    @traced("pof_client.backend.generate_proof_sync")
    async def generate_proof_sync(self, request: ProofRequest) -> ProofResult:
        """POST /bb/proof. Blocks (awaits) until the backend has generated the proof."""
        operation = "generate_proof_sync"
        add_span_attributes(deal_id=request.deal_id)
        response = await self._request(
            operation, "POST", PATH_PROOF_SYNC, mappers.proof_request_to_wire(request)
        )
        body = self._parse(
            operation,
            response,
            ProofResponse,
            ("deal_info", "verified", "success"),
        )
        return mappers.proof_result_from_wire(body, operation)

    @traced("pof_client.backend.generate_proof_async")
    async def generate_proof_async(self, request: ProofRequest) -> JobHandle:
        """POST /proofs/async. Returns the job handle without waiting for the proof."""
        operation = "generate_proof_async"
        add_span_attributes(deal_id=request.deal_id)
        response = await self._request(
            operation, "POST", PATH_PROOF_JOBS, mappers.proof_request_to_wire(request)
        )
        body = self._parse(operation, response, ProofJobCreateResponse, ("job_id",))
        handle = mappers.job_handle_from_wire(body)
        add_span_attributes(job_id=handle.job_id)
        return handle

    @traced("pof_client.backend.check_job_status")
    async def check_job_status(self, job_id: str) -> JobStatus:
        """GET /proofs/async/{job_id}. Unknown jobs raise JobNotFoundError."""
        operation = "check_job_status"
        add_span_attributes(job_id=job_id)
        path = f"{PATH_PROOF_JOBS}/{quote(job_id, safe='')}"
        try:
            response = await self._request(operation, "GET", path)
        except TransportError as e:
            if e.status_code == 404:
                raise JobNotFoundError(job_id, 404, e.message) from e
            raise
        data = self._json_object(operation, response)
        error = _backend_error(data, ("status",))
        if error is not None:
            if error.startswith(_JOB_NOT_FOUND_PREFIX):
                raise JobNotFoundError(job_id, response.status_code, error)
            raise TransportError(operation, error, status_code=response.status_code)
        try:
            body = ProofJobStatusResponse.model_validate(data)
        except ValidationError as e:
            raise MalformedResponseError(operation, _summarize_validation(e)) from e
        status = mappers.job_status_from_wire(job_id, body, operation)
        add_span_attributes(state=status.state.value)
        return status

    @traced("pof_client.backend.verify_proof")
    async def verify_proof(self, deal_id: str) -> ProofResult:
        """POST /sb/verify. verified is False (deal_info may be None) when the proof does not check out."""
        operation = "verify_proof"
        add_span_attributes(deal_id=deal_id)
        response = await self._request(
            operation, "POST", PATH_VERIFY, mappers.verify_request_to_wire(deal_id)
        )
        body = self._parse(operation, response, VerifyResponse, ("verified",))
        return mappers.verification_from_wire(body, operation)
