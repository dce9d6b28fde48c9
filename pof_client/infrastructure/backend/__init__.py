"""Proof-of-funds backend adapter (httpx client and wire mappers)."""

from pof_client.infrastructure.backend.client import ProofBackendClient

__all__ = ["ProofBackendClient"]
