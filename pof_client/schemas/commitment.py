"""Commitment wire schemas (POST /lb/commitment)."""

from pydantic import BaseModel, Field


class CommitmentCreateRequest(BaseModel):
    """Payload for creating a bank commitment.

    deal_id and buyer are omitted from the JSON when unset so the backend
    applies its defaults.
    """

    bank_index: int = Field(..., ge=0)
    amount: int | float = Field(..., gt=0)
    deal_id: str | None = Field(default=None, min_length=1)
    buyer: str | None = Field(default=None, min_length=1)
