"""Supplier form schema.

Optional fields accept ``""`` as "not filled in"; it normalizes to ``None``.
"""

from gudang.validation import Email, MaxLength, Schema, text

supplier_schema = Schema(
    name="supplier",
    fields=(
        text(
            "name",
            MaxLength(100, "Nama supplier maksimal 100 karakter"),
            message="Nama supplier wajib diisi",
        ),
        text(
            "phone",
            MaxLength(20, "Nomor telepon maksimal 20 karakter"),
            required=False,
        ),
        text(
            "email",
            Email("Format email tidak valid"),
            MaxLength(100, "Email maksimal 100 karakter"),
            required=False,
        ),
        text(
            "address",
            MaxLength(500, "Alamat maksimal 500 karakter"),
            required=False,
        ),
    ),
)
