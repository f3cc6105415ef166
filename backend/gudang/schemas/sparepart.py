"""Sparepart and equipment-compatibility form schemas."""

from gudang.validation import Integer, MaxLength, Range, Schema, number, text

sparepart_schema = Schema(
    name="sparepart",
    fields=(
        text("code", MaxLength(50, "Kode maksimal 50 karakter"), message="Kode wajib diisi"),
        text("name", MaxLength(200, "Nama maksimal 200 karakter"), message="Nama wajib diisi"),
        text("category_id", message="Kategori wajib dipilih"),
        text("brand", MaxLength(50, "Merk maksimal 50 karakter"), required=False),
        text("unit", message="Satuan wajib dipilih"),
        number(
            "min_stock",
            Integer("Stok minimum harus berupa angka"),
            Range("Stok minimum minimal 0", min=0),
            required=False,
            default=0,
            type_message="Stok minimum harus berupa angka",
        ),
        text("rack_location", MaxLength(50, "Lokasi rak maksimal 50 karakter"), required=False),
    ),
)

compatibility_schema = Schema(
    name="compatibility",
    fields=(
        text("sparepart_id", message="Sparepart wajib dipilih"),
        text("equipment_type", message="Tipe alat wajib diisi"),
        text("equipment_brand", required=False),
        text("equipment_model", required=False),
    ),
)
