"""
Constraint variants evaluated by the validation engine.

Each constraint is an immutable record holding its parameters and the
message reported when it fails.  ``check`` receives an already-coerced
value (``str`` for text fields, ``int``/``float`` for numbers) and never
raises for bad input.  ``verify`` is called once at schema construction and
raises ``SchemaDefinitionError`` for an unusable definition.
"""

from __future__ import annotations

import math
import re
from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import StrEnum
from functools import lru_cache
from typing import Any, ClassVar

from email_validator import EmailNotValidError, validate_email

from gudang.validation.errors import SchemaDefinitionError


class FieldKind(StrEnum):
    """Primitive kind of a schema field."""

    TEXT = "text"
    NUMBER = "number"
    BOOLEAN = "boolean"
    CHOICE = "choice"


_TEXTUAL = frozenset({FieldKind.TEXT, FieldKind.CHOICE})
_NUMERIC = frozenset({FieldKind.NUMBER})
_TLD = re.compile(r"[A-Za-z]{2,}")


@lru_cache(maxsize=128)
def _compiled(pattern: str) -> re.Pattern[str]:
    return re.compile(pattern)


class Constraint(ABC):
    """Base class for every constraint variant."""

    applies_to: ClassVar[frozenset[FieldKind]] = _TEXTUAL
    message: str

    @abstractmethod
    def check(self, value: Any) -> bool:
        """Return True when ``value`` satisfies the constraint."""
        ...

    def verify(self) -> None:
        """Reject unusable parameters.  Default: nothing to check."""
        if not self.message:
            raise SchemaDefinitionError(f"{type(self).__name__} requires a message")


@dataclass(frozen=True, slots=True)
class MinLength(Constraint):
    limit: int
    message: str

    def check(self, value: Any) -> bool:
        return len(value) >= self.limit

    def verify(self) -> None:
        Constraint.verify(self)
        if self.limit < 0:
            raise SchemaDefinitionError(f"MinLength limit must be >= 0, got {self.limit}")


@dataclass(frozen=True, slots=True)
class MaxLength(Constraint):
    limit: int
    message: str

    def check(self, value: Any) -> bool:
        return len(value) <= self.limit

    def verify(self) -> None:
        Constraint.verify(self)
        if self.limit < 0:
            raise SchemaDefinitionError(f"MaxLength limit must be >= 0, got {self.limit}")


@dataclass(frozen=True, slots=True)
class Pattern(Constraint):
    """Full-match regular expression."""

    pattern: str
    message: str

    def check(self, value: Any) -> bool:
        return _compiled(self.pattern).fullmatch(value) is not None

    def verify(self) -> None:
        Constraint.verify(self)
        try:
            _compiled(self.pattern)
        except re.error as exc:
            raise SchemaDefinitionError(
                f"Invalid pattern {self.pattern!r}: {exc}",
                details={"pattern": self.pattern},
            ) from exc


@dataclass(frozen=True, slots=True)
class Email(Constraint):
    """
    Syntactic e-mail check (no DNS lookups).

    ASCII only, and the domain must end in an alphabetic TLD of two or
    more letters.  ``.test`` domains are allowed; other special-use names
    such as ``.local`` are still rejected by ``email_validator``.
    """

    message: str

    def check(self, value: Any) -> bool:
        if not value.isascii():
            return False
        try:
            info = validate_email(
                value,
                check_deliverability=False,
                test_environment=True,
                allow_smtputf8=False,
            )
        except EmailNotValidError:
            return False
        _, dot, tld = info.ascii_domain.rpartition(".")
        return bool(dot) and _TLD.fullmatch(tld) is not None


@dataclass(frozen=True, slots=True)
class Range(Constraint):
    """Inclusive numeric bounds; either side may be open."""

    applies_to: ClassVar[frozenset[FieldKind]] = _NUMERIC

    message: str
    min: float | None = None
    max: float | None = None

    def check(self, value: Any) -> bool:
        if self.min is not None and value < self.min:
            return False
        if self.max is not None and value > self.max:
            return False
        return True

    def verify(self) -> None:
        Constraint.verify(self)
        if self.min is None and self.max is None:
            raise SchemaDefinitionError("Range needs at least one bound")
        if self.min is not None and self.max is not None and self.min > self.max:
            raise SchemaDefinitionError(
                f"Range min {self.min} is greater than max {self.max}",
                details={"min": self.min, "max": self.max},
            )


@dataclass(frozen=True, slots=True)
class Integer(Constraint):
    applies_to: ClassVar[frozenset[FieldKind]] = _NUMERIC

    message: str

    def check(self, value: Any) -> bool:
        return isinstance(value, int) or (math.isfinite(value) and float(value).is_integer())


@dataclass(frozen=True, slots=True)
class OneOf(Constraint):
    """Membership in a fixed set of allowed values."""

    choices: tuple[str, ...]
    message: str

    def check(self, value: Any) -> bool:
        return value in self.choices

    def verify(self) -> None:
        Constraint.verify(self)
        if not self.choices:
            raise SchemaDefinitionError("OneOf needs at least one choice")
