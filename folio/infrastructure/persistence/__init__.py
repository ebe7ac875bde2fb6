"""Persistence adapters (SQLAlchemy async ORM)."""
