"""Spreadsheet import validation package."""

from gudang.importing.checks import check_duplicates, check_references
from gudang.importing.schemas import IMPORT_SCHEMAS
from gudang.importing.validator import (
    ImportSummary,
    RowResult,
    get_import_schema,
    validate_import_data,
)

__all__ = [
    "IMPORT_SCHEMAS",
    "ImportSummary",
    "RowResult",
    "check_duplicates",
    "check_references",
    "get_import_schema",
    "validate_import_data",
]
