"""Enums for the update engine."""

from enum import Enum


class OperationKind(str, Enum):
    """How absent document keys are treated.

    Only projection and the "no changes" outcome depend on the kind;
    coercion and validation rules are the same for all three.
    """

    CREATE = "create"
    """New instance; absent keys keep their constructor defaults."""

    REPLACE = "replace"
    """Full replacement; absent updatable keys are treated as explicit nulls."""

    MERGE = "merge"
    """Merge patch; only supplied keys are considered."""

    @classmethod
    def from_http_method(cls, method: str) -> "OperationKind":
        """Map POST, PUT and PATCH onto an operation kind.

        Raises:
            ValueError: For any other method
        """
        try:
            return _HTTP_METHODS[method.upper()]
        except KeyError:
            raise ValueError(f"No update operation for HTTP method {method!r}") from None


_HTTP_METHODS = {
    "POST": OperationKind.CREATE,
    "PUT": OperationKind.REPLACE,
    "PATCH": OperationKind.MERGE,
}


class ErrorKind(str, Enum):
    """Class of an update failure."""

    NULL_NOT_PERMITTED = "null_not_permitted"
    COERCION = "coercion"
    RULE = "rule"
    WHOLE_OBJECT = "whole_object"
