"""Application services: proof job lifecycle controller."""

from pof_client.application.services.job_controller import ProofJobController

__all__ = ["ProofJobController"]
