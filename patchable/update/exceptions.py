"""Exceptions for programming errors around the update engine.

Expected update failures are never raised; they come back as an
``Error`` result. These exceptions signal misuse by the caller or a
broken field declaration.
"""


class PatchableError(Exception):
    """Base exception for the update engine."""


class FieldDefinitionError(PatchableError):
    """Raised when a model declares an updatable field incorrectly."""

    def __init__(self, model: str, field: str, message: str) -> None:
        self.model = model
        self.field = field
        super().__init__(f"{model}.{field}: {message}")


class InvalidDocumentError(PatchableError, TypeError):
    """Raised when the source document is not a JSON object."""

    def __init__(self, received: type) -> None:
        self.received = received
        super().__init__(
            f"Update document must be a JSON object, got {received.__name__}"
        )
