"""Declarative validation rules for updatable fields.

Rules are attached to a field through ``typing.Annotated`` next to the
``Updatable`` marker:

    name: Annotated[str | None, Updatable(), Required(), MaxLength(64)] = None

Each rule is a predicate over an already-coerced, non-null candidate value
plus the message reported when it fails. ``Required`` is the only rule that
also has an opinion about null.
"""

import re
from abc import ABC, abstractmethod
from collections.abc import Callable, Collection
from dataclasses import dataclass, field
from typing import Any

from patchable.update.results import NULL_NOT_PERMITTED_MESSAGE


class ValidationRule(ABC):
    """Base class for field validation rules."""

    message: str | None

    @abstractmethod
    def is_valid(self, value: Any) -> bool:
        """Return True if the candidate value satisfies the rule."""

    @abstractmethod
    def default_message(self) -> str:
        """Message used when no explicit message was declared."""

    def error_message(self) -> str:
        return self.message or self.default_message()


@dataclass(frozen=True)
class Required(ValidationRule):
    """Forbid null, whatever the field's declared nullability.

    Blank strings are rejected too unless ``allow_empty_strings`` is set.
    """

    message: str | None = None
    allow_empty_strings: bool = False

    def is_valid(self, value: Any) -> bool:
        if value is None:
            return False
        if isinstance(value, str) and not self.allow_empty_strings:
            return bool(value.strip())
        return True

    def default_message(self) -> str:
        return "value is required"

    def null_message(self) -> str:
        return self.message or NULL_NOT_PERMITTED_MESSAGE


def _length(value: Any) -> int | None:
    try:
        return len(value)
    except TypeError:
        return None


@dataclass(frozen=True)
class MinLength(ValidationRule):
    """Minimum length of a string or collection."""

    length: int
    message: str | None = None

    def is_valid(self, value: Any) -> bool:
        if value is None:
            return True
        size = _length(value)
        return size is not None and size >= self.length

    def default_message(self) -> str:
        return f"length must be at least {self.length}"


@dataclass(frozen=True)
class MaxLength(ValidationRule):
    """Maximum length of a string or collection."""

    length: int
    message: str | None = None

    def is_valid(self, value: Any) -> bool:
        if value is None:
            return True
        size = _length(value)
        return size is not None and size <= self.length

    def default_message(self) -> str:
        return f"length must be at most {self.length}"


@dataclass(frozen=True)
class Range(ValidationRule):
    """Inclusive bounds on a comparable value. Either bound may be omitted."""

    minimum: Any = None
    maximum: Any = None
    message: str | None = None

    def is_valid(self, value: Any) -> bool:
        if value is None:
            return True
        try:
            if self.minimum is not None and value < self.minimum:
                return False
            if self.maximum is not None and value > self.maximum:
                return False
        except TypeError:
            return False
        return True

    def default_message(self) -> str:
        if self.minimum is None:
            return f"value must be at most {self.maximum}"
        if self.maximum is None:
            return f"value must be at least {self.minimum}"
        return f"value must be between {self.minimum} and {self.maximum}"


@dataclass(frozen=True)
class Pattern(ValidationRule):
    """The whole string form of the value must match a regular expression."""

    pattern: str
    message: str | None = None
    _compiled: re.Pattern[str] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "_compiled", re.compile(self.pattern))

    def is_valid(self, value: Any) -> bool:
        if value is None:
            return True
        return self._compiled.fullmatch(str(value)) is not None

    def default_message(self) -> str:
        return f"value must match pattern {self.pattern}"


@dataclass(frozen=True)
class AllowedValues(ValidationRule):
    """The value must be one of a fixed set."""

    values: Collection[Any]
    message: str | None = None

    def is_valid(self, value: Any) -> bool:
        return value is None or value in self.values

    def default_message(self) -> str:
        allowed = ", ".join(repr(v) for v in self.values)
        return f"value must be one of: {allowed}"


@dataclass(frozen=True)
class Predicate(ValidationRule):
    """Arbitrary check; ``check`` returns True for acceptable values."""

    check: Callable[[Any], bool]
    message: str | None = None

    def is_valid(self, value: Any) -> bool:
        return value is None or bool(self.check(value))

    def default_message(self) -> str:
        name = getattr(self.check, "__name__", "predicate")
        return f"value failed check {name}"
