"""
Import validation: per-row schema checks plus cross-row checks.

Rows are validated one by one against the import schema of the chosen
template; duplicates within the upload and unknown master-data references
are reported as batch errors.  Nothing is persisted here: the caller gets
an ``ImportSummary`` and decides what to write.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from typing import Any

from gudang.core.config import settings
from gudang.core.constants import ImportType
from gudang.core.logging import get_logger
from gudang.importing.checks import (
    DuplicateCheckResult,
    ReferenceCheckResult,
    check_duplicates,
    check_references,
)
from gudang.importing.schemas import IMPORT_SCHEMAS
from gudang.validation import Invalid, Schema, UnknownSchemaError, Valid, ValidationResult, validate

logger = get_logger(__name__)

# Column checked for duplicates, and the label used in the message.
DUPLICATE_FIELDS: dict[ImportType, tuple[str, str]] = {
    ImportType.KATEGORI: ("name", "Kategori"),
    ImportType.SUPPLIER: ("name", "Supplier"),
    ImportType.ALAT_BERAT: ("code", "Kode unit"),
    ImportType.SPAREPART: ("code", "Kode sparepart"),
    ImportType.KARYAWAN: ("nik", "NIK"),
    ImportType.STOK_AWAL: ("sparepart_code", "Kode sparepart"),
}

# Column, master-data key, and message template for reference checks.
REFERENCE_FIELDS: dict[ImportType, tuple[str, str, str]] = {
    ImportType.SPAREPART: (
        "category_name",
        "categories",
        'Kategori "{value}" tidak ditemukan (baris {row})',
    ),
    ImportType.STOK_AWAL: (
        "sparepart_code",
        "spareparts",
        'Sparepart "{value}" tidak ditemukan di master (baris {row})',
    ),
}


@dataclass
class RowResult:
    """Validation outcome of one spreadsheet row."""

    row: int
    result: ValidationResult

    @property
    def is_valid(self) -> bool:
        return isinstance(self.result, Valid)

    @property
    def errors(self) -> list[str]:
        if isinstance(self.result, Invalid):
            return self.result.messages()
        return []

    def to_dict(self) -> dict[str, Any]:
        return {"row": self.row, "errors": self.errors}


@dataclass
class ImportSummary:
    """Everything the import screen needs to show before committing."""

    import_type: ImportType
    total_rows: int = 0
    rows: list[RowResult] = field(default_factory=list)
    errors: list[str] = field(default_factory=list)
    duplicate_check: DuplicateCheckResult = field(default_factory=DuplicateCheckResult)
    reference_check: ReferenceCheckResult | None = None

    @property
    def failed_rows(self) -> list[RowResult]:
        return [r for r in self.rows if not r.is_valid]

    @property
    def valid_records(self) -> list[dict[str, Any]]:
        return [r.result.value for r in self.rows if isinstance(r.result, Valid)]

    @property
    def is_valid(self) -> bool:
        return not self.errors and not self.failed_rows

    def to_dict(self) -> dict[str, Any]:
        return {
            "import_type": str(self.import_type),
            "is_valid": self.is_valid,
            "total": self.total_rows,
            "passed": len(self.valid_records),
            "failed": len(self.failed_rows),
            "errors": self.errors,
            "row_errors": [r.to_dict() for r in self.failed_rows],
            "duplicates": self.duplicate_check.to_dict(),
            "references": self.reference_check.to_dict() if self.reference_check else None,
        }


def resolve_import_type(import_type: str) -> ImportType:
    try:
        return ImportType(import_type)
    except ValueError:
        raise UnknownSchemaError(
            f"Unknown import type {import_type!r}",
            schema_name=import_type,
            details={"available": [t.value for t in ImportType]},
        ) from None


def get_import_schema(import_type: str) -> Schema:
    return IMPORT_SCHEMAS[resolve_import_type(import_type)]


_MALFORMED = object()


def _master_values(master_data: Any, key: str) -> Any:
    """List of known values under ``key``, ``None`` when absent, ``_MALFORMED`` otherwise."""
    if not isinstance(master_data, Mapping):
        return _MALFORMED
    values = master_data.get(key)
    if values is None or isinstance(values, (list, tuple)):
        return values
    return _MALFORMED


def validate_import_data(
    import_type: str,
    rows: Any,
    master_data: Mapping[str, Sequence[Any]] | None = None,
    *,
    start_row: int | None = None,
) -> ImportSummary:
    """
    Validate an uploaded sheet.

    Args:
        import_type: Template name, e.g. ``"sparepart"`` or ``"stok-awal"``.
        rows: Decoded rows (list of dicts keyed by template column).
        master_data: Optional known values for reference checks, keyed
            ``"categories"`` / ``"spareparts"``.
        start_row: Spreadsheet row number of the first data row.  Defaults
            to ``settings.IMPORT_START_ROW``.
    """
    kind = resolve_import_type(import_type)
    schema = IMPORT_SCHEMAS[kind]
    first_row = settings.IMPORT_START_ROW if start_row is None else start_row
    summary = ImportSummary(import_type=kind)
    log = logger.bind(import_type=str(kind))

    if not isinstance(rows, list):
        summary.errors.append("Format data tidak valid")
        log.warning("Import rejected", reason="rows is not a list")
        return summary
    if not rows:
        summary.errors.append("Data kosong")
        log.warning("Import rejected", reason="no rows")
        return summary

    summary.total_rows = len(rows)
    if len(rows) > settings.IMPORT_MAX_ROWS:
        summary.errors.append(f"Jumlah baris melebihi batas maksimal {settings.IMPORT_MAX_ROWS}")
        log.warning("Import rejected", reason="too many rows", total=len(rows))
        return summary

    for index, row in enumerate(rows):
        row_result = RowResult(row=index + first_row, result=validate(schema, row))
        summary.rows.append(row_result)
        if not row_result.is_valid:
            log.warning("Row validation failed", row=row_result.row, errors=row_result.errors)

    dup_field, dup_label = DUPLICATE_FIELDS[kind]
    summary.duplicate_check = check_duplicates(
        rows, dup_field, first_row, normalize=schema.rule(dup_field).normalize
    )
    for duplicate in summary.duplicate_check.duplicates:
        summary.errors.append(
            f'{dup_label} "{duplicate.value}" duplikat di baris: '
            f'{", ".join(str(r) for r in duplicate.rows)}'
        )

    if kind in REFERENCE_FIELDS and master_data is not None:
        ref_field, master_key, template = REFERENCE_FIELDS[kind]
        known = _master_values(master_data, master_key)
        if known is _MALFORMED:
            summary.errors.append("Format data master tidak valid")
            log.warning("Reference check skipped", reason="master data is malformed")
        elif known is not None:
            summary.reference_check = check_references(
                rows, ref_field, known, first_row, normalize=schema.rule(ref_field).normalize
            )
            for ref in summary.reference_check.invalid_refs:
                summary.errors.append(template.format(value=ref.value, row=ref.row))

    log.info(
        "Import validation complete",
        total=summary.total_rows,
        passed=len(summary.valid_records),
        failed=len(summary.failed_rows),
        batch_errors=len(summary.errors),
    )
    return summary
