"""Validation result models handed to the persistence and UI layers."""

from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field


class FieldError(BaseModel):
    """A single constraint violation attributed to one named field."""

    model_config = ConfigDict(frozen=True)

    field: str
    message: str


class Valid(BaseModel):
    """Successful validation carrying the normalized record."""

    model_config = ConfigDict(frozen=True)

    ok: Literal[True] = True
    value: dict[str, Any]

    @property
    def is_valid(self) -> bool:
        return True

    def __bool__(self) -> bool:
        return True


class Invalid(BaseModel):
    """Failed validation carrying field errors in schema declaration order."""

    model_config = ConfigDict(frozen=True)

    ok: Literal[False] = False
    errors: tuple[FieldError, ...] = Field(..., min_length=1)

    @property
    def is_valid(self) -> bool:
        return False

    def __bool__(self) -> bool:
        return False

    def errors_by_field(self) -> dict[str, list[str]]:
        """Group messages per field, e.g. for inline form display."""
        grouped: dict[str, list[str]] = {}
        for error in self.errors:
            grouped.setdefault(error.field, []).append(error.message)
        return grouped

    def messages(self) -> list[str]:
        return [error.message for error in self.errors]


ValidationResult = Valid | Invalid
