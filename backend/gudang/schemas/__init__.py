"""
Entity schemas package: one module per form, registered by name.

Convention:
    - Each module defines module-level ``Schema`` objects (built once at import)
    - Field names are snake_case
    - Messages are user-facing Indonesian text, kept verbatim
    - New schemas must be added to ``SCHEMAS`` below
"""

from __future__ import annotations

from gudang.schemas.alat_berat import alat_berat_schema
from gudang.schemas.attendance import (
    attendance_schema,
    bulk_attendance_entry_schema,
    validate_bulk_attendance,
)
from gudang.schemas.auth import create_user_schema, login_schema
from gudang.schemas.karyawan import karyawan_schema
from gudang.schemas.kategori import kategori_schema
from gudang.schemas.petty_cash import petty_cash_expense_schema, petty_cash_income_schema
from gudang.schemas.sparepart import compatibility_schema, sparepart_schema
from gudang.schemas.stock import reject_schema, stock_in_schema, stock_out_schema
from gudang.schemas.supplier import supplier_schema
from gudang.validation import Schema, UnknownSchemaError

SCHEMAS: dict[str, Schema] = {
    schema.name: schema
    for schema in (
        kategori_schema,
        supplier_schema,
        alat_berat_schema,
        karyawan_schema,
        sparepart_schema,
        compatibility_schema,
        attendance_schema,
        bulk_attendance_entry_schema,
        stock_in_schema,
        stock_out_schema,
        reject_schema,
        petty_cash_income_schema,
        petty_cash_expense_schema,
        login_schema,
        create_user_schema,
    )
}


def get_schema(name: str) -> Schema:
    """Look up a registered schema by name."""
    try:
        return SCHEMAS[name]
    except KeyError:
        raise UnknownSchemaError(
            f"No schema registered as {name!r}",
            schema_name=name,
            details={"available": sorted(SCHEMAS)},
        ) from None


def schema_names() -> list[str]:
    return sorted(SCHEMAS)


__all__ = [
    "SCHEMAS",
    "get_schema",
    "schema_names",
    "validate_bulk_attendance",
    "alat_berat_schema",
    "attendance_schema",
    "bulk_attendance_entry_schema",
    "compatibility_schema",
    "create_user_schema",
    "karyawan_schema",
    "kategori_schema",
    "login_schema",
    "petty_cash_expense_schema",
    "petty_cash_income_schema",
    "reject_schema",
    "sparepart_schema",
    "stock_in_schema",
    "stock_out_schema",
    "supplier_schema",
]
