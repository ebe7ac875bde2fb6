"""Domain layer - Pure business logic.

Structure:
- entities/: Domain entities (mutable, have identity)
- value_objects/: Value objects (immutable, no identity)
- enums/: Domain enumerations
- errors/: Domain error types returned in Failure results
- protocols/: Ports implemented by infrastructure adapters

The domain layer has NO dependencies on any framework or infrastructure.
"""
