"""API exception hierarchy.

Every API exception carries the status_code and error_code the global
exception handler turns into an ErrorResponse.
"""

from uuid import UUID

from patchable.api.models.errors import ErrorCode, ErrorDetail
from patchable.update.results import FieldError


class PatchableAPIError(Exception):
    """Base exception for all API errors."""

    status_code: int = 500
    error_code: ErrorCode = ErrorCode.INTERNAL_ERROR

    def __init__(self, message: str, details: list[ErrorDetail] | None = None) -> None:
        self.message = message
        self.details = details
        super().__init__(message)


class ModelNotFoundError(PatchableAPIError):
    """Raised when no model exists with the requested id."""

    status_code = 404
    error_code = ErrorCode.MODEL_NOT_FOUND

    def __init__(self, model_id: UUID) -> None:
        super().__init__(f"Model {model_id} not found")
        self.model_id = model_id


class UpdateRejectedError(PatchableAPIError):
    """Raised when an update call returned Error."""

    status_code = 400
    error_code = ErrorCode.UPDATE_REJECTED

    def __init__(self, errors: list[FieldError]) -> None:
        super().__init__(
            "Update rejected",
            details=[ErrorDetail.from_field_error(error) for error in errors],
        )
        self.errors = errors
