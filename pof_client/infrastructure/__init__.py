"""Infrastructure layer: adapters for external systems (backend HTTP API)."""
