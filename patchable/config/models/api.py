"""Demo API configuration."""

from pydantic import BaseModel, Field


class APIConfig(BaseModel):
    """Demo HTTP surface configuration."""

    title: str = Field(default="Patchable Demo API", description="OpenAPI title")
    cors_origins: list[str] = Field(
        default_factory=lambda: ["*"],
        description="Allowed CORS origins",
    )
    cors_allow_credentials: bool = Field(
        default=False, description="Allow credentials on CORS requests"
    )
    seed_demo_models: int = Field(
        default=10,
        ge=0,
        le=1000,
        description="Number of demo models created at startup",
    )
