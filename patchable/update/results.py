"""Update result variants.

``UpdateResult`` is a closed union. Call sites match on it exhaustively:

    match result:
        case Ok(changed=changed):
            ...
        case Error(errors=errors):
            ...
        case NoChanges():
            ...
        case _:
            assert_never(result)
"""

from typing import ClassVar, Literal

from pydantic import BaseModel, ConfigDict, Field

from patchable.update.enums import ErrorKind

NULL_NOT_PERMITTED_MESSAGE = "value must not be null"
COERCION_FAILED_MESSAGE = "error deserializing value"


class FieldError(BaseModel):
    """A single update failure attributed to a field path.

    An empty path means the failure belongs to the object as a whole.
    """

    model_config = ConfigDict(frozen=True)

    path: str = Field(..., description="Dotted field path")
    message: str = Field(..., description="Human-readable failure message")
    kind: ErrorKind = Field(default=ErrorKind.RULE, description="Failure class")

    @classmethod
    def whole_object(cls, message: str, path: str = "") -> "FieldError":
        """Failure raised by a cross-field rule."""
        return cls(path=path, message=message, kind=ErrorKind.WHOLE_OBJECT)

    def under(self, prefix: str, separator: str = ".") -> "FieldError":
        """Re-attribute this failure to a nested location."""
        path = f"{prefix}{separator}{self.path}" if self.path else prefix
        return self.model_copy(update={"path": path})


class Ok(BaseModel):
    """The update was applied."""

    model_config = ConfigDict(frozen=True)

    outcome: ClassVar[str] = "ok"

    status: Literal["ok"] = "ok"
    changed: list[str] = Field(default_factory=list, description="Changed field paths")


class Error(BaseModel):
    """The update was rejected. The model must not be persisted."""

    model_config = ConfigDict(frozen=True)

    outcome: ClassVar[str] = "error"

    status: Literal["error"] = "error"
    errors: list[FieldError] = Field(..., min_length=1)


class NoChanges(BaseModel):
    """Nothing in the document applied to the model."""

    model_config = ConfigDict(frozen=True)

    outcome: ClassVar[str] = "no_changes"

    status: Literal["no_changes"] = "no_changes"


UpdateResult = Ok | Error | NoChanges
