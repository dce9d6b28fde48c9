"""Application ports (Protocols) implemented by infrastructure."""

from pof_client.application.interfaces.backend import IProofBackend

__all__ = ["IProofBackend"]
