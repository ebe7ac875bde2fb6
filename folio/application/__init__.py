"""Application layer - CQRS command and query handlers."""
