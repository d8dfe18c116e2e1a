"""Failure values returned by fallible user-input operations."""

from pydantic import BaseModel, ConfigDict, Field


class Failure(BaseModel):
    """A user-facing failure with a diagnostic message."""
    model_config = ConfigDict(frozen=True)

    message: str = Field(..., description="Human readable diagnostic")

    def __str__(self) -> str:
        return self.message


class ParseFailure(Failure):
    """Text did not match the expected grammar."""
    pass


class ReadFailure(Failure):
    """A file could not be read."""
    pass
