"""Error details domain model."""

from pydantic import BaseModel, ConfigDict


class ErrorDetails(BaseModel):
    """Details about an error shown to the rider instead of a crash."""

    model_config = ConfigDict(frozen=True)

    source: str | None = None
    reason: str
