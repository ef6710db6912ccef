"""Update engine configuration."""

from pydantic import BaseModel, Field


class EngineConfig(BaseModel):
    """Defaults applied by the update engine.

    A model class can pin its own validation policy with the
    ``validate_all_fields`` class attribute; this section only supplies the
    value used when it does not.
    """

    validate_all_fields: bool = Field(
        default=False,
        description="Keep validating remaining fields after the first failure",
    )
    strict_coercion: bool = Field(
        default=True,
        description="Coerce JSON values in pydantic strict mode",
    )
    path_separator: str = Field(
        default=".",
        min_length=1,
        description="Separator used when prefixing nested field paths",
    )
