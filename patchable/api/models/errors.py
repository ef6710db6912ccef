"""Error response models for consistent API error handling."""

from enum import Enum

from pydantic import BaseModel

from patchable.update.results import FieldError


class ErrorCode(str, Enum):
    """Machine-readable error codes for API responses."""

    INVALID_REQUEST = "INVALID_REQUEST"
    """Request body is not a JSON object or failed request validation."""

    UPDATE_REJECTED = "UPDATE_REJECTED"
    """The update document failed field or whole-object validation."""

    MODEL_NOT_FOUND = "MODEL_NOT_FOUND"
    """No model exists with the requested id."""

    INTERNAL_ERROR = "INTERNAL_ERROR"
    """An unexpected internal error occurred."""


class ErrorDetail(BaseModel):
    """Field-level error detail."""

    field: str | None = None
    """Dotted path of the offending field, if any."""

    message: str
    """Human-readable error description."""

    kind: str | None = None
    """Failure class for update errors."""

    @classmethod
    def from_field_error(cls, error: FieldError) -> "ErrorDetail":
        return cls(field=error.path or None, message=error.message, kind=error.kind.value)


class ErrorBody(BaseModel):
    """Error body content for API error responses."""

    code: ErrorCode
    message: str
    details: list[ErrorDetail] | None = None


class ErrorResponse(BaseModel):
    """Standard error response format.

    Example:
        {
            "error": {
                "code": "UPDATE_REJECTED",
                "message": "Update rejected",
                "details": [{"field": "name", "message": "This is required"}]
            }
        }
    """

    error: ErrorBody
