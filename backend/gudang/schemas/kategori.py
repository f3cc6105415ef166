"""Kategori (spare-part category) form schema."""

from gudang.validation import MaxLength, Schema, text

kategori_schema = Schema(
    name="kategori",
    fields=(
        text(
            "name",
            MaxLength(100, "Nama kategori maksimal 100 karakter"),
            message="Nama kategori wajib diisi",
        ),
    ),
)
