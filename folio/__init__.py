"""Folio - retail investment backend.

Layers:
- core/: Settings, Result types, base errors, dependency container
- domain/: Entities, value objects, protocols (pure Python)
- application/: Command and query handlers (CQRS)
- infrastructure/: Database, logging, security adapters
- presentation/: FastAPI routers, middleware, error responses
"""
