"""Stock movement schemas: barang masuk, barang keluar, approval rejection."""

from gudang.validation import Integer, MaxLength, Range, Schema, number, text

stock_in_schema = Schema(
    name="stock_in",
    fields=(
        text("sparepart_id", message="Sparepart wajib dipilih"),
        number(
            "quantity",
            Integer("Jumlah harus bilangan bulat"),
            Range("Jumlah minimal 1", min=1),
            message="Jumlah wajib diisi",
            type_message="Jumlah harus bilangan bulat",
        ),
        text("supplier_id", required=False),
        text("invoice_number", MaxLength(100, "Nomor invoice maksimal 100 karakter"), required=False),
        number(
            "purchase_price",
            Range("Harga tidak boleh negatif", min=0),
            required=False,
            type_message="Harga harus berupa angka",
        ),
        text("warranty_expiry", required=False),
        text("notes", MaxLength(500, "Catatan maksimal 500 karakter"), required=False),
    ),
)

stock_out_schema = Schema(
    name="stock_out",
    fields=(
        text("sparepart_id", message="Sparepart wajib dipilih"),
        text("equipment_id", message="Unit alat berat wajib dipilih"),
        text("employee_id", message="Pemohon/karyawan wajib dipilih"),
        number(
            "quantity",
            Integer("Jumlah harus bilangan bulat"),
            Range("Jumlah minimal 1", min=1),
            message="Jumlah wajib diisi",
            type_message="Jumlah harus bilangan bulat",
        ),
        text("purpose", MaxLength(500, "Keperluan maksimal 500 karakter"), required=False),
        text("scanned_barcode", required=False),
    ),
)

reject_schema = Schema(
    name="reject",
    fields=(
        text(
            "reason",
            MaxLength(500, "Alasan maksimal 500 karakter"),
            message="Alasan penolakan wajib diisi",
        ),
    ),
)
