"""Application layer: job lifecycle orchestration over the backend port."""
