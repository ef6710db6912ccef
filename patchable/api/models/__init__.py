"""API models."""

from patchable.api.models.demo import DemoAddress, DemoModel
from patchable.api.models.errors import ErrorBody, ErrorCode, ErrorDetail, ErrorResponse

__all__ = [
    "DemoAddress",
    "DemoModel",
    "ErrorBody",
    "ErrorCode",
    "ErrorDetail",
    "ErrorResponse",
]
