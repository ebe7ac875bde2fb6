"""API-level middleware and dependencies."""
