"""Per-field application of a projected document entry."""

import json
from collections.abc import Mapping
from dataclasses import dataclass, field
from datetime import date, time, timedelta
from decimal import Decimal
from enum import Enum
from typing import TYPE_CHECKING, Any, assert_never
from uuid import UUID

from pydantic import ValidationError

from patchable.update.enums import ErrorKind, OperationKind
from patchable.update.fields import FieldDescriptor
from patchable.update.model import UpdatableModel
from patchable.update.results import (
    COERCION_FAILED_MESSAGE,
    NULL_NOT_PERMITTED_MESSAGE,
    Error,
    FieldError,
    NoChanges,
    Ok,
)

if TYPE_CHECKING:
    from patchable.update.engine import UpdateEngine

# Compared by value. Anything else (lists, dicts, models) always counts as
# changed when assigned, even if structurally equal to the current value.
VALUE_TYPES: tuple[type, ...] = (
    type(None),
    bool,
    int,
    float,
    complex,
    str,
    bytes,
    Decimal,
    date,
    time,
    timedelta,
    UUID,
    Enum,
)


def is_value_like(value: Any) -> bool:
    return isinstance(value, VALUE_TYPES)


@dataclass
class FieldOutcome:
    """What applying one field did."""

    changed: bool = False
    errors: list[FieldError] = field(default_factory=list)


class FieldApplier:
    """Applies single document entries to a model instance.

    Handles explicit null, delegation into nested updatable models, and
    coercion, rule evaluation, change detection and assignment for every
    other field.
    """

    def __init__(self, engine: "UpdateEngine") -> None:
        self._engine = engine

    def apply(
        self,
        model: UpdatableModel,
        descriptor: FieldDescriptor,
        raw: Any,
        operation: OperationKind,
    ) -> FieldOutcome:
        if raw is None:
            return self._apply_null(model, descriptor)

        current = getattr(model, descriptor.name)
        if isinstance(current, UpdatableModel):
            return self._delegate(current, descriptor, raw, operation)

        return self._apply_value(model, descriptor, raw, current)

    def _apply_null(self, model: UpdatableModel, descriptor: FieldDescriptor) -> FieldOutcome:
        required = descriptor.required
        if required is not None:
            return self._failed(descriptor.name, required.null_message(), ErrorKind.NULL_NOT_PERMITTED)
        if not descriptor.nullable:
            return self._failed(
                descriptor.name, NULL_NOT_PERMITTED_MESSAGE, ErrorKind.NULL_NOT_PERMITTED
            )
        if getattr(model, descriptor.name) is None:
            return FieldOutcome()

        setattr(model, descriptor.name, None)
        return FieldOutcome(changed=True)

    def _delegate(
        self,
        nested: UpdatableModel,
        descriptor: FieldDescriptor,
        raw: Any,
        operation: OperationKind,
    ) -> FieldOutcome:
        if not isinstance(raw, Mapping):
            return self._failed(descriptor.name, COERCION_FAILED_MESSAGE, ErrorKind.COERCION)

        result = self._engine.apply(nested, raw, operation)
        match result:
            case Ok():
                return FieldOutcome(changed=True)
            case Error(errors=errors):
                return FieldOutcome(errors=self._prefixed(descriptor.name, errors))
            case NoChanges():
                return FieldOutcome()
            case _:
                assert_never(result)

    def _apply_value(
        self,
        model: UpdatableModel,
        descriptor: FieldDescriptor,
        raw: Any,
        current: Any,
    ) -> FieldOutcome:
        """Coerce, check and assign a non-null value.

        A nested model built from scratch, because the current value is
        None, is checked with ``validate_object`` only: its Required rules
        and ``validate_model()``. The other rules declared on its own fields
        are not run against it.
        """
        try:
            candidate = self._coerce(descriptor, raw)
        except (ValidationError, TypeError, ValueError):
            return self._failed(descriptor.name, COERCION_FAILED_MESSAGE, ErrorKind.COERCION)

        # Every rule runs once coercion succeeded; the stop-at-first policy
        # only decides whether the next field is attempted.
        errors = [
            FieldError(path=descriptor.name, message=rule.error_message(), kind=ErrorKind.RULE)
            for rule in descriptor.rules
            if not rule.is_valid(candidate)
        ]
        if errors:
            return FieldOutcome(errors=errors)

        if is_value_like(candidate) and is_value_like(current) and candidate == current:
            return FieldOutcome()

        if isinstance(candidate, UpdatableModel):
            nested_errors = self._engine.validate_object(candidate)
            if nested_errors:
                return FieldOutcome(errors=self._prefixed(descriptor.name, nested_errors))

        setattr(model, descriptor.name, candidate)
        return FieldOutcome(changed=True)

    def _coerce(self, descriptor: FieldDescriptor, raw: Any) -> Any:
        return descriptor.adapter.validate_json(
            json.dumps(raw), strict=self._engine.config.strict_coercion
        )

    def _prefixed(self, name: str, errors: list[FieldError]) -> list[FieldError]:
        separator = self._engine.config.path_separator
        return [error.under(name, separator) for error in errors]

    @staticmethod
    def _failed(path: str, message: str, kind: ErrorKind) -> FieldOutcome:
        return FieldOutcome(errors=[FieldError(path=path, message=message, kind=kind)])
