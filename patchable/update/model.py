"""Base class for models that accept partial updates from JSON documents."""

from collections.abc import Iterable, Mapping
from typing import TYPE_CHECKING, Any, ClassVar

from pydantic import BaseModel, ConfigDict

from patchable.update.enums import OperationKind
from patchable.update.results import FieldError, UpdateResult

if TYPE_CHECKING:
    from patchable.update.engine import UpdateEngine
    from patchable.update.fields import FieldDescriptor


class UpdatableModel(BaseModel):
    """Pydantic model whose ``Updatable`` fields can be set from documents.

    Subclasses declare updatable fields with ``typing.Annotated``:

        class Customer(UpdatableModel):
            id: UUID = Field(default_factory=uuid4)
            name: Annotated[str | None, Updatable(), Required()] = None
            visits: Annotated[int, Updatable(), Range(minimum=0)] = 0

    and may override the hooks below. The field table is built when the
    subclass is defined, so a bad declaration fails at import time.
    """

    model_config = ConfigDict(frozen=False, extra="ignore")

    validate_all_fields: ClassVar[bool | None] = None
    """Keep validating after the first failing field. None defers to the
    engine configuration."""

    @classmethod
    def __pydantic_init_subclass__(cls, **kwargs: Any) -> None:
        super().__pydantic_init_subclass__(**kwargs)
        from patchable.update.fields import resolve_fields

        resolve_fields(cls)

    @classmethod
    def updatable_fields(cls) -> "Mapping[str, FieldDescriptor]":
        from patchable.update.fields import resolve_fields

        return resolve_fields(cls)

    def validate_model(self) -> Iterable[FieldError]:
        """Cross-field validation of the whole object.

        Runs after every field update succeeded. Yield one
        ``FieldError.whole_object(...)`` per violated rule.
        """
        return ()

    def on_model_updated(self, changed: list[str]) -> None:
        """Called exactly once after a successful update, before it is
        returned. Never called for rejected or empty updates."""

    def update_model(
        self,
        document: Mapping[str, Any],
        operation: OperationKind,
        engine: "UpdateEngine | None" = None,
    ) -> UpdateResult:
        """Apply a JSON document to this instance.

        The instance is only modified when the result is ``Ok``.
        """
        from patchable.update.engine import default_engine

        return (engine or default_engine()).update(self, document, operation)
