"""
Spreadsheet import row schemas.

Import rows come from Excel/CSV templates, so values are mostly text and
need extra normalization on top of the form rules: codes are upper-cased,
units and statuses lower-cased, numeric cells parsed leniently.
"""

from __future__ import annotations

from gudang.core.constants import EquipmentStatus, ImportType
from gudang.schemas.alat_berat import MAX_YEAR
from gudang.security.sanitizer import digits_only
from gudang.validation import Email, MaxLength, MinLength, Range, Schema, choice, number, text

STATUS_CHOICES = tuple(EquipmentStatus)


def _year_or_none(value: int | float) -> int | None:
    """Out-of-range years are dropped instead of rejected."""
    year = int(value)
    return year if 1900 <= year <= MAX_YEAR else None


def _non_negative_int(value: int | float) -> int:
    return max(0, int(value))


kategori_import_schema = Schema(
    name="import_kategori",
    fields=(
        text(
            "name",
            MinLength(2, "Nama kategori minimal 2 karakter"),
            MaxLength(100, "Nama kategori maksimal 100 karakter"),
            message="Nama kategori wajib diisi",
        ),
    ),
)

supplier_import_schema = Schema(
    name="import_supplier",
    fields=(
        text(
            "name",
            MinLength(2, "Nama supplier minimal 2 karakter"),
            MaxLength(200, "Nama supplier maksimal 200 karakter"),
            message="Nama supplier wajib diisi",
        ),
        text("phone", required=False),
        text("email", Email("Format email tidak valid"), required=False, transforms=(str.lower,)),
        text("address", required=False),
    ),
)

alat_berat_import_schema = Schema(
    name="import_alat_berat",
    fields=(
        text(
            "code",
            MaxLength(50, "Kode unit maksimal 50 karakter"),
            message="Kode unit wajib diisi",
            transforms=(str.upper,),
        ),
        text("name", MaxLength(200, "Nama unit maksimal 200 karakter"), message="Nama unit wajib diisi"),
        text("type", message="Tipe wajib diisi"),
        text("brand", MaxLength(100, "Merk maksimal 100 karakter"), message="Merk wajib diisi"),
        text("model", MaxLength(100, "Model maksimal 100 karakter"), message="Model wajib diisi"),
        number(
            "year",
            required=False,
            type_message="Tahun harus berupa angka",
            transforms=(_year_or_none,),
        ),
        text("site_location", required=False),
        choice(
            "status",
            STATUS_CHOICES,
            invalid_message=f"Status harus salah satu dari: {', '.join(STATUS_CHOICES)}",
            required=False,
            default=EquipmentStatus.ACTIVE.value,
            transforms=(str.lower,),
        ),
    ),
)

sparepart_import_schema = Schema(
    name="import_sparepart",
    fields=(
        text(
            "code",
            MaxLength(50, "Kode sparepart maksimal 50 karakter"),
            message="Kode sparepart wajib diisi",
            transforms=(str.upper,),
        ),
        text(
            "name",
            MaxLength(200, "Nama sparepart maksimal 200 karakter"),
            message="Nama sparepart wajib diisi",
        ),
        text("category_name", message="Kategori wajib diisi"),
        text("brand", required=False),
        text("unit", message="Satuan wajib diisi", transforms=(str.lower,)),
        number(
            "min_stock",
            required=False,
            default=0,
            type_message="Stok minimum harus berupa angka",
            transforms=(_non_negative_int,),
        ),
        text("location", required=False),
    ),
)

karyawan_import_schema = Schema(
    name="import_karyawan",
    fields=(
        text("nik", MaxLength(50, "NIK maksimal 50 karakter"), message="NIK wajib diisi"),
        text(
            "name",
            MinLength(2, "Nama minimal 2 karakter"),
            MaxLength(200, "Nama maksimal 200 karakter"),
            message="Nama wajib diisi",
        ),
        text("position", message="Jabatan wajib diisi"),
        text("department", required=False),
        text("phone", required=False, transforms=(digits_only,)),
    ),
)

stok_awal_import_schema = Schema(
    name="import_stok_awal",
    fields=(
        text("sparepart_code", message="Kode sparepart wajib diisi", transforms=(str.upper,)),
        number(
            "quantity",
            Range("Jumlah harus angka >= 0", min=0),
            message="Jumlah stok wajib diisi",
            type_message="Jumlah harus berupa angka",
            transforms=(int,),
        ),
        text("notes", required=False),
    ),
)

IMPORT_SCHEMAS: dict[ImportType, Schema] = {
    ImportType.KATEGORI: kategori_import_schema,
    ImportType.SUPPLIER: supplier_import_schema,
    ImportType.ALAT_BERAT: alat_berat_import_schema,
    ImportType.SPAREPART: sparepart_import_schema,
    ImportType.KARYAWAN: karyawan_import_schema,
    ImportType.STOK_AWAL: stok_awal_import_schema,
}
