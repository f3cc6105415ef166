"""Cross-row checks for spreadsheet imports: duplicates and master-data references."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Mapping, Sequence
from dataclasses import dataclass, field
from typing import Any

Normalizer = Callable[[Any], Any]


@dataclass
class Duplicate:
    value: str
    rows: list[int]


@dataclass
class DuplicateCheckResult:
    duplicates: list[Duplicate] = field(default_factory=list)

    @property
    def has_duplicates(self) -> bool:
        return bool(self.duplicates)

    def to_dict(self) -> dict[str, Any]:
        return {
            "has_duplicates": self.has_duplicates,
            "duplicates": [{"value": d.value, "rows": d.rows} for d in self.duplicates],
        }


@dataclass
class InvalidReference:
    value: str
    row: int


@dataclass
class ReferenceCheckResult:
    invalid_refs: list[InvalidReference] = field(default_factory=list)

    @property
    def has_invalid_refs(self) -> bool:
        return bool(self.invalid_refs)

    def to_dict(self) -> dict[str, Any]:
        return {
            "has_invalid_refs": self.has_invalid_refs,
            "invalid_refs": [{"value": r.value, "row": r.row} for r in self.invalid_refs],
        }


def _cell(row: Any, field_name: str, normalize: Normalizer | None = None) -> str:
    if not isinstance(row, Mapping):
        return ""
    value = row.get(field_name)
    if value is None:
        return ""
    if normalize is not None:
        normalized = normalize(value)
        if normalized is not None:
            value = normalized
    return str(value).strip()


def check_duplicates(
    rows: Sequence[Any],
    field_name: str,
    start_row: int,
    *,
    normalize: Normalizer | None = None,
) -> DuplicateCheckResult:
    """
    Find values (case-insensitive, trimmed) that appear in more than one row.

    Empty cells are ignored.  Duplicates are listed in order of first
    appearance; ``rows`` holds spreadsheet row numbers.  ``normalize``
    maps a raw cell to the value the row schema would store, so ``1001``,
    ``"1001"`` and ``1001.0`` compare equal.
    """
    seen: dict[str, list[int]] = {}
    for index, row in enumerate(rows):
        value = _cell(row, field_name, normalize).lower()
        if value:
            seen.setdefault(value, []).append(index + start_row)

    return DuplicateCheckResult(
        duplicates=[Duplicate(value=v, rows=r) for v, r in seen.items() if len(r) > 1]
    )


def check_references(
    rows: Sequence[Any],
    field_name: str,
    valid_values: Iterable[Any],
    start_row: int,
    *,
    normalize: Normalizer | None = None,
) -> ReferenceCheckResult:
    """Find non-empty cells whose value is not in the master list (case-insensitive)."""
    known = {
        value.lower()
        for item in valid_values
        if (value := _cell({field_name: item}, field_name, normalize))
    }
    invalid = [
        InvalidReference(value=value, row=index + start_row)
        for index, row in enumerate(rows)
        if (value := _cell(row, field_name, normalize)) and value.lower() not in known
    ]
    return ReferenceCheckResult(invalid_refs=invalid)
