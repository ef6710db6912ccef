"""Field resolution: the static table of updatable fields per model type.

A field opts in with the ``Updatable`` marker inside ``typing.Annotated``.
The table is built once per class when the class is defined and cached
afterwards, so every call on the same type sees the same descriptors.
"""

import types
from dataclasses import dataclass, field
from functools import lru_cache
from types import MappingProxyType
from typing import TYPE_CHECKING, Annotated, Any, Union, get_args, get_origin

from pydantic import TypeAdapter

from patchable.update.exceptions import FieldDefinitionError
from patchable.update.rules import Required, ValidationRule

if TYPE_CHECKING:
    from collections.abc import Mapping

    from pydantic import BaseModel
    from pydantic.fields import FieldInfo


@dataclass(frozen=True)
class Updatable:
    """Marks a model field as writable through update documents.

    Args:
        nullable: Whether explicit null is accepted. When omitted it is
            taken from the annotation (``T | None`` is nullable).
    """

    nullable: bool | None = None


@dataclass(frozen=True)
class FieldDescriptor:
    """Static metadata for one updatable field."""

    name: str
    annotation: Any
    nullable: bool
    adapter: TypeAdapter[Any] = field(repr=False, compare=False)
    rules: tuple[ValidationRule, ...] = ()
    nested: bool = False

    @property
    def required(self) -> Required | None:
        for rule in self.rules:
            if isinstance(rule, Required):
                return rule
        return None


def _split_optional(annotation: Any) -> tuple[Any, bool]:
    """Return the annotation without ``None`` and whether None was present."""
    if annotation is Any:
        return annotation, True
    origin = get_origin(annotation)
    if origin is Union or origin is types.UnionType:
        args = get_args(annotation)
        remaining = tuple(arg for arg in args if arg is not type(None))
        if len(remaining) == len(args):
            return annotation, False
        if len(remaining) == 1:
            return remaining[0], True
        return Union[remaining], True  # noqa: UP007
    return annotation, annotation is None or annotation is type(None)


def _is_updatable_model(annotation: Any) -> bool:
    from patchable.update.model import UpdatableModel

    return isinstance(annotation, type) and issubclass(annotation, UpdatableModel)


@lru_cache(maxsize=None)
def resolve_fields(model_type: "type[BaseModel]") -> "Mapping[str, FieldDescriptor]":
    """Build the updatable field table for a model type.

    Args:
        model_type: A pydantic model class

    Returns:
        Read-only mapping of field name to descriptor, in declaration order.
        Empty when the type declares no updatable fields.

    Raises:
        FieldDefinitionError: If a marker conflicts with the annotation
    """
    descriptors: dict[str, FieldDescriptor] = {}

    for name, info in model_type.model_fields.items():
        markers = [m for m in info.metadata if isinstance(m, Updatable)]
        if not markers:
            continue
        if len(markers) > 1:
            raise FieldDefinitionError(
                model_type.__name__, name, "Updatable declared more than once"
            )

        inner, optional = _split_optional(info.annotation)
        nullable = markers[0].nullable if markers[0].nullable is not None else optional
        if nullable and not optional:
            raise FieldDefinitionError(
                model_type.__name__,
                name,
                "declared nullable but its annotation does not accept None",
            )

        descriptors[name] = FieldDescriptor(
            name=name,
            annotation=info.annotation,
            nullable=nullable,
            rules=tuple(m for m in info.metadata if isinstance(m, ValidationRule)),
            nested=_is_updatable_model(inner),
            adapter=TypeAdapter(_declared_type(info)),
        )

    return MappingProxyType(descriptors)


def _declared_type(info: "FieldInfo") -> Any:
    """The field annotation with its pydantic constraints reattached.

    Pydantic moves ``Annotated`` metadata such as ``Gt(0)`` or
    ``Field(max_length=3)`` off ``info.annotation`` into ``info.metadata``.
    """
    constraints = [
        m for m in info.metadata if not isinstance(m, (Updatable, ValidationRule))
    ]
    if not constraints:
        return info.annotation
    return Annotated[(info.annotation, *constraints)]
