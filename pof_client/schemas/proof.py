"""Proof wire schemas (POST /bb/proof, POST /sb/verify)."""

from pydantic import BaseModel, ConfigDict, Field


class ProofCreateRequest(BaseModel):
    """Payload for sync proof generation and async job submission."""

    required_amount: int | float = Field(..., gt=0)
    deal_id: str = Field(..., min_length=1)


class DealInfoResponse(BaseModel):
    """Deal data embedded in proof and verification responses."""

    model_config = ConfigDict(extra="ignore")

    amount: int | float
    buyer: str
    deal_id: str


class ProofResponse(BaseModel):
    """Proof generation result.

    Older backends report success/verified_amount, newer ones verified;
    is_verified prefers verified when both are present.
    """

    model_config = ConfigDict(extra="ignore")

    verified: bool | None = None
    success: bool | None = None
    verified_amount: int | float | None = None
    deal_info: DealInfoResponse | None = None

    @property
    def is_verified(self) -> bool:
        if self.verified is not None:
            return self.verified
        return bool(self.success)


class VerifyRequest(BaseModel):
    """Payload for proof verification."""

    deal_id: str = Field(..., min_length=1)


class VerifyResponse(BaseModel):
    """Verification result; deal_info is absent when verification failed."""

    model_config = ConfigDict(extra="ignore")

    verified: bool
    deal_info: DealInfoResponse | None = None
