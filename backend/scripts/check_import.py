#!/usr/bin/env python3
"""
Validate an import file (JSON list of rows) without touching the database.

Usage:
    cd backend
    python -m scripts.check_import <import-type> <rows.json> [master.json]

``master.json`` is optional: {"categories": [...], "spareparts": [...]}.
Exit code is 0 when the sheet is valid, 1 otherwise.
"""

import json
import os
import sys

from gudang.core.constants import APP_NAME, ImportType
from gudang.core.logging import setup_logging
from gudang.importing import validate_import_data
from gudang.security.sanitizer import validate_upload
from gudang.validation import UnknownSchemaError

USAGE = f"""
{APP_NAME}: import checker

Usage: python -m scripts.check_import <import-type> <rows.json> [master.json]

Import types: {", ".join(t.value for t in ImportType)}
"""


def _load_json(path: str):
    with open(path, encoding="utf-8") as fh:
        return json.load(fh)


def main(argv: list[str] | None = None) -> int:
    args = sys.argv[1:] if argv is None else argv
    if len(args) < 2 or args[0] in ("-h", "--help"):
        print(USAGE)
        return 0 if args[:1] in (["-h"], ["--help"]) else 2

    setup_logging("WARNING")
    import_type, rows_path = args[0], args[1]
    upload = validate_upload(
        rows_path,
        os.path.getsize(rows_path),
        "application/json",
        allowed_types=("application/json",),
    )
    if not upload.valid:
        print(f"✗ {upload.error}")
        return 2
    master = _load_json(args[2]) if len(args) > 2 else None

    try:
        summary = validate_import_data(import_type, _load_json(rows_path), master)
    except UnknownSchemaError as exc:
        print(f"✗ {exc}")
        print(USAGE)
        return 2

    print(json.dumps(summary.to_dict(), indent=2, ensure_ascii=False))
    if summary.is_valid:
        print(f"✓ {summary.total_rows} rows valid")
        return 0
    print(f"✗ {len(summary.failed_rows)} invalid rows, {len(summary.errors)} batch errors")
    return 1


if __name__ == "__main__":
    sys.exit(main())
