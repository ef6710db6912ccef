"""Update engine.

Runs one update call through the stages:

1. Field resolution - the static updatable field table of the model type
2. Source projection - document keys intersected with that table
3. Per-field application - null handling, nested delegation, coercion,
   rule evaluation, change detection
4. Aggregation - field outcomes folded into Error, NoChanges or onwards
5. Finalization - whole-object validation, then the post-update hook

The public ``update`` entry point works on a deep copy of the caller's
instance and copies the result back only when the call ends in ``Ok``. The
post-update hook then runs on the caller's own instance.
"""

import time
from collections.abc import Mapping
from functools import lru_cache
from typing import Any

from patchable.config.models.engine import EngineConfig
from patchable.observability.logging import get_logger
from patchable.observability.metrics import (
    UPDATE_FIELD_ERRORS,
    UPDATE_LATENCY,
    UPDATE_RESULTS,
)
from patchable.update.applier import FieldApplier
from patchable.update.enums import ErrorKind, OperationKind
from patchable.update.exceptions import InvalidDocumentError
from patchable.update.fields import FieldDescriptor, resolve_fields
from patchable.update.model import UpdatableModel
from patchable.update.projector import project
from patchable.update.results import Error, FieldError, NoChanges, Ok, UpdateResult

logger = get_logger(__name__)


class UpdateEngine:
    """Applies JSON documents to ``UpdatableModel`` instances.

    Stateless apart from its configuration; one engine can serve any number
    of model types and calls. It holds no locks: callers sharing a model
    instance between concurrent requests must serialize access to it.
    """

    def __init__(self, config: EngineConfig | None = None) -> None:
        self.config = config or EngineConfig()
        self._applier = FieldApplier(self)

    def update(
        self,
        model: UpdatableModel,
        document: Mapping[str, Any],
        operation: OperationKind,
    ) -> UpdateResult:
        """Apply ``document`` to ``model``.

        Args:
            model: Instance to update; modified only if the result is Ok
            document: Parsed JSON object
            operation: Create, replace or merge

        Returns:
            Ok with the changed field names, Error with every collected
            failure, or NoChanges

        Raises:
            InvalidDocumentError: If document is not a mapping
        """
        if not isinstance(document, Mapping):
            raise InvalidDocumentError(type(document))

        model_name = type(model).__name__
        started = time.perf_counter()

        descriptors = resolve_fields(type(model))
        projection = project(document, descriptors, operation)
        if projection is None:
            result: UpdateResult = NoChanges()
        else:
            working = model.model_copy(deep=True)
            result = self._run(working, descriptors, projection, operation)
            if isinstance(result, Ok):
                _commit(model, working)
                model.on_model_updated(list(result.changed))

        UPDATE_LATENCY.labels(model=model_name, operation=operation.value).observe(
            time.perf_counter() - started
        )
        self._record(model_name, operation, result)
        return result

    def apply(
        self,
        model: UpdatableModel,
        document: Mapping[str, Any],
        operation: OperationKind,
    ) -> UpdateResult:
        """Apply ``document`` to ``model`` in place.

        Used for nested delegation, where the instance already belongs to
        the outer call's working copy. Fields applied before a failure stay
        applied on ``model``.
        """
        descriptors = resolve_fields(type(model))
        projection = project(document, descriptors, operation)
        if projection is None:
            return NoChanges()
        result = self._run(model, descriptors, projection, operation)
        if isinstance(result, Ok):
            model.on_model_updated(list(result.changed))
        return result

    def validate_object(self, model: UpdatableModel) -> list[FieldError]:
        """Whole-object validation of an instance in its current state.

        Required rules are checked against every updatable field first; the
        model's own cross-field rules run only if those pass.
        """
        errors: list[FieldError] = []
        for name, descriptor in resolve_fields(type(model)).items():
            required = descriptor.required
            if required is None:
                continue
            value = getattr(model, name)
            if value is None:
                errors.append(
                    FieldError(
                        path=name,
                        message=required.null_message(),
                        kind=ErrorKind.NULL_NOT_PERMITTED,
                    )
                )
            elif not required.is_valid(value):
                errors.append(
                    FieldError(path=name, message=required.error_message(), kind=ErrorKind.RULE)
                )

        if not errors:
            errors.extend(model.validate_model())
        return errors

    def _validate_all(self, model: UpdatableModel) -> bool:
        declared = type(model).validate_all_fields
        return self.config.validate_all_fields if declared is None else declared

    def _run(
        self,
        model: UpdatableModel,
        descriptors: Mapping[str, FieldDescriptor],
        projection: dict[str, Any],
        operation: OperationKind,
    ) -> UpdateResult:
        validate_all = self._validate_all(model)
        changed: list[str] = []
        errors: list[FieldError] = []

        for name, raw in projection.items():
            if errors and not validate_all:
                break
            outcome = self._applier.apply(model, descriptors[name], raw, operation)
            errors.extend(outcome.errors)
            if outcome.changed:
                changed.append(name)

        if errors:
            return Error(errors=errors)
        if operation is OperationKind.MERGE and not changed:
            return NoChanges()
        return self._finalize(model, changed)

    def _finalize(self, model: UpdatableModel, changed: list[str]) -> UpdateResult:
        errors = self.validate_object(model)
        if errors:
            return Error(errors=errors)
        return Ok(changed=changed)

    def _record(self, model_name: str, operation: OperationKind, result: UpdateResult) -> None:
        UPDATE_RESULTS.labels(
            model=model_name, operation=operation.value, outcome=result.outcome
        ).inc()

        if isinstance(result, Error):
            for error in result.errors:
                UPDATE_FIELD_ERRORS.labels(model=model_name, kind=error.kind.value).inc()
            logger.warning(
                "update_rejected",
                model=model_name,
                operation=operation.value,
                error_count=len(result.errors),
                paths=[error.path for error in result.errors],
            )
        elif isinstance(result, Ok):
            logger.info(
                "update_applied",
                model=model_name,
                operation=operation.value,
                changed=result.changed,
            )
        else:
            logger.debug("update_no_changes", model=model_name, operation=operation.value)


def _commit(target: UpdatableModel, working: UpdatableModel) -> None:
    """Copy every field of the updated working copy onto the caller's instance."""
    for name in type(target).model_fields:
        setattr(target, name, getattr(working, name))


@lru_cache(maxsize=1)
def default_engine() -> UpdateEngine:
    """Engine with default configuration, shared by ``update_model``."""
    return UpdateEngine()
