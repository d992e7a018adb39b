"""JSON Schema contracts for machine-readable output."""
