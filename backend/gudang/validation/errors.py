"""
Exception hierarchy for the validation layer.

Field-level problems in user input are never raised; they are returned as
``FieldError`` data.  The exceptions below signal programming or lookup
mistakes (a broken schema definition, an unknown schema name) and carry
structured context for logging.
"""

from __future__ import annotations


class GudangError(Exception):
    """Base exception for all library errors."""

    def __init__(
        self,
        message: str,
        *,
        schema_name: str | None = None,
        field: str | None = None,
        details: dict | None = None,
    ) -> None:
        self.schema_name = schema_name
        self.field = field
        self.details = details or {}
        super().__init__(message)


class SchemaDefinitionError(GudangError):
    """A schema was declared with conflicting or invalid rules."""
    pass


class UnknownSchemaError(GudangError):
    """No schema (or import template) is registered under the requested name."""
    pass
