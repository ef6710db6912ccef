"""Partial-update engine for pydantic models.

Usage:
    from patchable.update import OperationKind, Ok, Error, NoChanges

    result = customer.update_model({"name": "Ada"}, OperationKind.MERGE)
"""

from patchable.update.engine import UpdateEngine, default_engine
from patchable.update.enums import ErrorKind, OperationKind
from patchable.update.exceptions import (
    FieldDefinitionError,
    InvalidDocumentError,
    PatchableError,
)
from patchable.update.fields import FieldDescriptor, Updatable, resolve_fields
from patchable.update.model import UpdatableModel
from patchable.update.projector import project
from patchable.update.results import (
    COERCION_FAILED_MESSAGE,
    NULL_NOT_PERMITTED_MESSAGE,
    Error,
    FieldError,
    NoChanges,
    Ok,
    UpdateResult,
)
from patchable.update.rules import (
    AllowedValues,
    MaxLength,
    MinLength,
    Pattern,
    Predicate,
    Range,
    Required,
    ValidationRule,
)

__all__ = [
    # Engine
    "UpdateEngine",
    "default_engine",
    "project",
    "resolve_fields",
    # Declarations
    "FieldDescriptor",
    "UpdatableModel",
    "Updatable",
    # Rules
    "AllowedValues",
    "MaxLength",
    "MinLength",
    "Pattern",
    "Predicate",
    "Range",
    "Required",
    "ValidationRule",
    # Results
    "COERCION_FAILED_MESSAGE",
    "NULL_NOT_PERMITTED_MESSAGE",
    "Error",
    "ErrorKind",
    "FieldError",
    "NoChanges",
    "Ok",
    "OperationKind",
    "UpdateResult",
    # Exceptions
    "FieldDefinitionError",
    "InvalidDocumentError",
    "PatchableError",
]
