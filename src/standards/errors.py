"""
Standards Errors

Exception taxonomy for resolution and admin writes.
A target standard that does not exist is NOT an error: overrides that
point at nothing are silently dropped by the engine.
"""


class StandardsError(RuntimeError):
    """Base class for standards engine failures."""


class StoreUnavailableError(StandardsError):
    """
    Raised when the override store cannot serve a read or write.
    The engine recovers from it for reads (the layer becomes empty);
    admin writes let it propagate so the caller sees the rejection.
    """
    def __init__(self, layer: str, cause: BaseException | str | None = None):
        detail = f": {cause}" if cause else ""
        super().__init__(f"Override store unavailable for {layer} layer{detail}")
        self.layer = layer
        self.cause = cause


class StandardsValidationError(StandardsError, ValueError):
    """Raised when an admin write is missing a required field."""
    def __init__(self, operation: str, errors: list[str]):
        super().__init__(f"{operation} rejected: {'; '.join(errors)}")
        self.operation = operation
        self.errors = errors
