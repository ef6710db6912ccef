"""Demo models served by the demo API."""

from collections.abc import Iterator
from datetime import UTC, datetime
from typing import Annotated
from uuid import UUID, uuid4

from pydantic import Field

from patchable.update import (
    FieldError,
    MaxLength,
    Range,
    Required,
    Updatable,
    UpdatableModel,
)

INVALID_NAME = "InvalidName"


def utc_now() -> datetime:
    """Return current UTC time."""
    return datetime.now(UTC)


class DemoAddress(UpdatableModel):
    """Postal address nested inside a demo model."""

    street: Annotated[str | None, Updatable(), Required()] = None
    city: Annotated[str | None, Updatable(), MaxLength(64)] = None
    postcode: Annotated[str | None, Updatable(), MaxLength(16)] = None


class DemoModel(UpdatableModel):
    """Demo record. ``id`` and the timestamp are not updatable."""

    id: UUID = Field(default_factory=uuid4, description="Unique identifier")
    name: Annotated[
        str | None, Updatable(), Required(message="This is required")
    ] = None
    no: Annotated[int, Updatable(), Range(minimum=0)] = 0
    tags: Annotated[list[str], Updatable(), MaxLength(10)] = Field(default_factory=list)
    address: Annotated[DemoAddress | None, Updatable()] = None
    last_update_date_time: datetime = Field(
        default_factory=utc_now, description="Last successful update"
    )

    def validate_model(self) -> Iterator[FieldError]:
        if self.name == INVALID_NAME:
            yield FieldError.whole_object(f"Name is {INVALID_NAME}", "name")

    def on_model_updated(self, changed: list[str]) -> None:
        self.last_update_date_time = utc_now()
