"""Request and response schemas (Pydantic) for the HTTP API."""
