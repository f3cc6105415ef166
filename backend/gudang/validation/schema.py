"""
Schema definitions and the validation engine.

A ``Schema`` is an ordered, immutable tuple of ``FieldRule`` records.
``validate(schema, raw)`` folds over the rules in declaration order:

    1. presence coercion: ``None``, a missing key, ``""`` or whitespace-only
       text all mean "absent";
    2. absent + required  -> the field's required message;
       absent + optional  -> the field's default (``None`` unless declared);
    3. otherwise coerce to the field kind, apply transforms, then evaluate
       constraints in order, stopping at the first failure for that field.

Every field is visited, so one call reports at most one error per field.
Definition problems raise ``SchemaDefinitionError`` when the schema is
built, never while validating.
"""

from __future__ import annotations

import math
import re
from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from typing import Any

from gudang.validation.constraints import (
    Constraint,
    FieldKind,
    Integer,
    MaxLength,
    MinLength,
    OneOf,
)
from gudang.validation.errors import SchemaDefinitionError
from gudang.validation.result import FieldError, Invalid, Valid, ValidationResult

DEFAULT_TYPE_MESSAGE = "Format tidak valid"

_TRUE_STRINGS = frozenset({"true", "1", "ya", "yes"})
_FALSE_STRINGS = frozenset({"false", "0", "tidak", "no"})
_NUMBER_TEXT = re.compile(r"[+-]?[0-9]+(\.[0-9]+)?([eE][+-]?[0-9]+)?")
_INTEGER_TEXT = re.compile(r"[+-]?[0-9]+")


class _Absent:
    """Sentinel for "no usable value"."""

    def __repr__(self) -> str:
        return "<absent>"


ABSENT = _Absent()


@dataclass(frozen=True)
class FieldRule:
    """Declaration of a single field: kind, presence, constraints, messages."""

    name: str
    kind: FieldKind = FieldKind.TEXT
    required: bool = True
    required_message: str = ""
    constraints: tuple[Constraint, ...] = ()
    type_message: str = ""
    default: Any = None
    transforms: tuple[Callable[[Any], Any], ...] = field(default=(), compare=False)

    @property
    def invalid_type_message(self) -> str:
        return self.type_message or self.required_message or DEFAULT_TYPE_MESSAGE

    @property
    def is_integer(self) -> bool:
        return any(isinstance(c, Integer) for c in self.constraints)

    def normalize(self, value: Any) -> Any:
        """
        Coerce and transform ``value`` the way ``validate`` would, without
        checking constraints.  Returns ``None`` for absent or uncoercible
        values.
        """
        if _is_empty(value):
            return None
        coerced = _COERCERS[self.kind](value)
        if coerced is None:
            return None
        for transform in self.transforms:
            try:
                coerced = transform(coerced)
            except (TypeError, ValueError, ArithmeticError):
                return None
            if _is_empty(coerced):
                return None
        return coerced


@dataclass(frozen=True)
class Schema:
    """Named, ordered collection of field rules.  Immutable once built."""

    name: str
    fields: tuple[FieldRule, ...]

    def __post_init__(self) -> None:
        if not self.name:
            raise SchemaDefinitionError("Schema name must not be empty")
        if not isinstance(self.fields, tuple):
            object.__setattr__(self, "fields", tuple(self.fields))

        seen: set[str] = set()
        for rule in self.fields:
            if rule.name in seen:
                raise SchemaDefinitionError(
                    f"Duplicate field {rule.name!r}",
                    schema_name=self.name,
                    field=rule.name,
                )
            seen.add(rule.name)
            _verify_rule(self.name, rule)

    @property
    def field_names(self) -> tuple[str, ...]:
        return tuple(rule.name for rule in self.fields)

    def rule(self, name: str) -> FieldRule:
        for rule in self.fields:
            if rule.name == name:
                return rule
        raise KeyError(name)

    def validate(self, raw: Any) -> ValidationResult:
        return validate(self, raw)


# ─── Schema construction checks ───────────────────────────


def _verify_rule(schema_name: str, rule: FieldRule) -> None:
    def fail(message: str, **details: Any) -> SchemaDefinitionError:
        return SchemaDefinitionError(
            message, schema_name=schema_name, field=rule.name, details=details
        )

    if not rule.name:
        raise fail("Field name must not be empty")
    if rule.required and not rule.required_message:
        raise fail(f"Required field {rule.name!r} has no required message")

    for constraint in rule.constraints:
        if rule.kind not in constraint.applies_to:
            raise fail(
                f"{type(constraint).__name__} does not apply to {rule.kind} field {rule.name!r}",
                kind=str(rule.kind),
            )
        try:
            constraint.verify()
        except SchemaDefinitionError as exc:
            raise fail(str(exc), **exc.details) from exc

    minimums = [c.limit for c in rule.constraints if isinstance(c, MinLength)]
    maximums = [c.limit for c in rule.constraints if isinstance(c, MaxLength)]
    if minimums and maximums and max(minimums) > min(maximums):
        raise fail(
            f"Field {rule.name!r} has min length {max(minimums)} above max length {min(maximums)}",
            min_length=max(minimums),
            max_length=min(maximums),
        )

    if rule.kind == FieldKind.CHOICE and not any(isinstance(c, OneOf) for c in rule.constraints):
        raise fail(f"Choice field {rule.name!r} needs a OneOf constraint")

    if rule.default is not None:
        outcome = _check_present(rule, rule.default)
        if isinstance(outcome, FieldError) or outcome is ABSENT:
            raise fail(f"Default for {rule.name!r} does not satisfy its own rules", default=rule.default)


# ─── Field-kind coercion ──────────────────────────────────


def _coerce_text(value: Any) -> str | None:
    if isinstance(value, str):
        return value.strip()
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float) and math.isfinite(value) and value.is_integer():
        return str(int(value))
    return None


def _coerce_number(value: Any) -> int | float | None:
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return value if math.isfinite(value) else None
    if isinstance(value, str):
        # ASCII digits only; int()/float() would also take "1_000" or "٣".
        text = value.strip()
        if _INTEGER_TEXT.fullmatch(text):
            return int(text)
        if not _NUMBER_TEXT.fullmatch(text):
            return None
        number = float(text)
        return number if math.isfinite(number) else None
    return None


def _coerce_boolean(value: Any) -> bool | None:
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        text = value.strip().lower()
        if text in _TRUE_STRINGS:
            return True
        if text in _FALSE_STRINGS:
            return False
    return None


_COERCERS: dict[FieldKind, Callable[[Any], Any]] = {
    FieldKind.TEXT: _coerce_text,
    FieldKind.CHOICE: _coerce_text,
    FieldKind.NUMBER: _coerce_number,
    FieldKind.BOOLEAN: _coerce_boolean,
}


def _is_empty(value: Any) -> bool:
    return value is None or value is ABSENT or (isinstance(value, str) and not value.strip())


# ─── Engine ───────────────────────────────────────────────


def _check_present(rule: FieldRule, value: Any) -> Any:
    """
    Coerce, transform and check a value known to be present.

    Returns the normalized value, ``ABSENT`` when transforms emptied it,
    or a ``FieldError``.
    """
    coerced = _COERCERS[rule.kind](value)
    if coerced is None:
        return FieldError(field=rule.name, message=rule.invalid_type_message)

    for transform in rule.transforms:
        try:
            coerced = transform(coerced)
        except (TypeError, ValueError, ArithmeticError):
            return FieldError(field=rule.name, message=rule.invalid_type_message)
        if _is_empty(coerced):
            return ABSENT

    for constraint in rule.constraints:
        if not constraint.check(coerced):
            return FieldError(field=rule.name, message=constraint.message)

    if rule.is_integer and isinstance(coerced, float):
        coerced = int(coerced)
    return coerced


def _validate_field(rule: FieldRule, raw: Mapping[str, Any]) -> Any:
    value = raw.get(rule.name, ABSENT)
    outcome = ABSENT if _is_empty(value) else _check_present(rule, value)

    if outcome is ABSENT:
        if rule.required:
            return FieldError(field=rule.name, message=rule.required_message)
        return rule.default
    return outcome


def validate(schema: Schema, raw: Any) -> ValidationResult:
    """
    Apply ``schema`` to an untrusted record.

    ``raw`` may be anything; a non-mapping is treated as a record with no
    keys.  Returns ``Valid`` with exactly the schema's fields, or
    ``Invalid`` with errors in declaration order.
    """
    if not isinstance(raw, Mapping):
        raw = {}

    errors: list[FieldError] = []
    normalized: dict[str, Any] = {}

    for rule in schema.fields:
        outcome = _validate_field(rule, raw)
        if isinstance(outcome, FieldError):
            errors.append(outcome)
        else:
            normalized[rule.name] = outcome

    if errors:
        return Invalid(errors=tuple(errors))
    return Valid(value=normalized)


# ─── Declaration helpers ──────────────────────────────────


def text(
    name: str,
    *constraints: Constraint,
    required: bool = True,
    message: str = "",
    type_message: str = "",
    default: str | None = None,
    transforms: tuple[Callable[[Any], Any], ...] = (),
) -> FieldRule:
    return FieldRule(
        name=name,
        kind=FieldKind.TEXT,
        required=required,
        required_message=message,
        constraints=constraints,
        type_message=type_message,
        default=default,
        transforms=transforms,
    )


def number(
    name: str,
    *constraints: Constraint,
    required: bool = True,
    message: str = "",
    type_message: str = "",
    default: int | float | None = None,
    transforms: tuple[Callable[[Any], Any], ...] = (),
) -> FieldRule:
    return FieldRule(
        name=name,
        kind=FieldKind.NUMBER,
        required=required,
        required_message=message,
        constraints=constraints,
        type_message=type_message,
        default=default,
        transforms=transforms,
    )


def boolean(
    name: str,
    *,
    required: bool = True,
    message: str = "",
    type_message: str = "",
    default: bool | None = None,
) -> FieldRule:
    return FieldRule(
        name=name,
        kind=FieldKind.BOOLEAN,
        required=required,
        required_message=message,
        type_message=type_message,
        default=default,
    )


def choice(
    name: str,
    choices: tuple[str, ...] | list[str],
    *,
    invalid_message: str,
    required: bool = True,
    message: str = "",
    default: str | None = None,
    transforms: tuple[Callable[[Any], Any], ...] = (),
) -> FieldRule:
    return FieldRule(
        name=name,
        kind=FieldKind.CHOICE,
        required=required,
        required_message=message,
        constraints=(OneOf(tuple(str(c) for c in choices), invalid_message),),
        type_message=invalid_message,
        default=default,
        transforms=transforms,
    )
