"""Async proof job wire schemas (POST /proofs/async, GET /proofs/async/{job_id})."""

from datetime import datetime, timezone
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from pof_client.domain.enums import JobState
from pof_client.schemas.proof import ProofResponse


def _parse_timestamp(v: Any) -> datetime | None:
    """Accept datetime or ISO/RFC 3339 string; anything else becomes None.

    Naive values are treated as UTC.
    """
    if isinstance(v, datetime):
        dt = v
    elif isinstance(v, str) and v:
        try:
            dt = datetime.fromisoformat(v.replace("Z", "+00:00"))
        except ValueError:
            return None
    else:
        return None
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    return dt


class ProofJobCreateResponse(BaseModel):
    """Job submission acknowledgement."""

    model_config = ConfigDict(extra="ignore")

    job_id: str = Field(..., min_length=1, pattern=r"\S")


class ProofJobStatusResponse(BaseModel):
    """Job status snapshot."""

    model_config = ConfigDict(extra="ignore")

    status: JobState
    created_at: datetime | None = None
    updated_at: datetime | None = None
    proof: ProofResponse | None = None
    error: str | None = None

    @field_validator("created_at", "updated_at", mode="before")
    @classmethod
    def timestamp_or_none(cls, v: Any) -> datetime | None:
        return _parse_timestamp(v)
