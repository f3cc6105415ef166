"""Alat berat (heavy-equipment unit) form schema."""

from datetime import date

from gudang.core.constants import EquipmentStatus
from gudang.validation import Integer, MaxLength, Range, Schema, choice, number, text

# Evaluated once at import, like the rest of the schema.
MAX_YEAR = date.today().year + 1

alat_berat_schema = Schema(
    name="alat_berat",
    fields=(
        text("code", MaxLength(50, "Kode unit maksimal 50 karakter"), message="Kode unit wajib diisi"),
        text("name", MaxLength(100, "Nama maksimal 100 karakter"), message="Nama wajib diisi"),
        text("type", message="Tipe wajib dipilih"),
        text("brand", MaxLength(50, "Merk maksimal 50 karakter"), message="Merk wajib diisi"),
        text("model", MaxLength(50, "Model maksimal 50 karakter"), message="Model wajib diisi"),
        number(
            "year",
            Integer("Tahun harus berupa angka"),
            Range("Tahun minimal 1900", min=1900),
            Range("Tahun tidak valid", max=MAX_YEAR),
            required=False,
            type_message="Tahun harus berupa angka",
        ),
        text("site", MaxLength(100, "Lokasi/site maksimal 100 karakter"), required=False),
        choice(
            "status",
            tuple(EquipmentStatus),
            invalid_message="Status tidak valid",
            message="Status tidak valid",
        ),
    ),
)
