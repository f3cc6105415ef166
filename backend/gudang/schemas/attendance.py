"""Attendance (absensi) schemas, including bulk daily input."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from gudang.core.constants import AttendanceStatus
from gudang.validation import (
    FieldError,
    Invalid,
    MaxLength,
    Range,
    Schema,
    Valid,
    ValidationResult,
    choice,
    number,
    text,
    validate,
)

STATUS_INVALID_MESSAGE = "Status kehadiran tidak valid"


def _entry_fields(*, notes_limit: bool) -> tuple:
    notes_constraints = (MaxLength(500, "Keterangan maksimal 500 karakter"),) if notes_limit else ()
    return (
        text("employee_id", message="Karyawan wajib dipilih"),
        text("clock_in", required=False),
        text("clock_out", required=False),
        choice(
            "status",
            tuple(AttendanceStatus),
            invalid_message=STATUS_INVALID_MESSAGE,
            message="Status wajib dipilih",
        ),
        number(
            "overtime_hours",
            Range("Jam lembur tidak boleh negatif", min=0),
            required=False,
            type_message="Jam lembur harus berupa angka",
        ),
        text("notes", *notes_constraints, required=False),
    )


attendance_schema = Schema(
    name="attendance",
    fields=(text("date", message="Tanggal wajib diisi"), *_entry_fields(notes_limit=True)),
)

bulk_attendance_entry_schema = Schema(
    name="bulk_attendance_entry",
    fields=_entry_fields(notes_limit=False),
)

bulk_attendance_header_schema = Schema(
    name="bulk_attendance",
    fields=(text("date", message="Tanggal wajib diisi"),),
)


def validate_bulk_attendance(raw: Any) -> ValidationResult:
    """
    Validate one day of attendance for many employees.

    Entry errors are reported as ``entries.<index>.<field>``.  Only the
    ``entries`` list itself is descended into; nested values inside an
    entry are validated as plain fields.
    """
    if not isinstance(raw, Mapping):
        raw = {}

    errors: list[FieldError] = []
    header = validate(bulk_attendance_header_schema, raw)
    if isinstance(header, Invalid):
        errors.extend(header.errors)

    entries = raw.get("entries")
    normalized_entries: list[dict[str, Any]] = []
    if not isinstance(entries, list):
        errors.append(FieldError(field="entries", message="Data absensi tidak valid"))
    else:
        for index, entry in enumerate(entries):
            result = validate(bulk_attendance_entry_schema, entry)
            if isinstance(result, Invalid):
                errors.extend(
                    FieldError(field=f"entries.{index}.{e.field}", message=e.message)
                    for e in result.errors
                )
            else:
                normalized_entries.append(result.value)

    if errors:
        return Invalid(errors=tuple(errors))
    return Valid(value={**header.value, "entries": normalized_entries})
