"""Validation engine package: schema-as-data validation of untrusted records."""

from gudang.validation.constraints import (
    Constraint,
    Email,
    FieldKind,
    Integer,
    MaxLength,
    MinLength,
    OneOf,
    Pattern,
    Range,
)
from gudang.validation.errors import GudangError, SchemaDefinitionError, UnknownSchemaError
from gudang.validation.result import FieldError, Invalid, Valid, ValidationResult
from gudang.validation.schema import FieldRule, Schema, boolean, choice, number, text, validate

__all__ = [
    "Constraint",
    "Email",
    "FieldKind",
    "Integer",
    "MaxLength",
    "MinLength",
    "OneOf",
    "Pattern",
    "Range",
    "GudangError",
    "SchemaDefinitionError",
    "UnknownSchemaError",
    "FieldError",
    "Invalid",
    "Valid",
    "ValidationResult",
    "FieldRule",
    "Schema",
    "boolean",
    "choice",
    "number",
    "text",
    "validate",
]
