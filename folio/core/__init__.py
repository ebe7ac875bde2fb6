"""Core package: settings, Result types, base errors, container."""
