"""Karyawan (employee) form schema."""

from gudang.validation import MaxLength, Schema, boolean, text

karyawan_schema = Schema(
    name="karyawan",
    fields=(
        text("nik", MaxLength(20, "NIK maksimal 20 karakter"), message="NIK wajib diisi"),
        text("name", MaxLength(100, "Nama maksimal 100 karakter"), message="Nama wajib diisi"),
        text("position", message="Jabatan wajib diisi"),
        text("department", MaxLength(100, "Departemen maksimal 100 karakter"), required=False),
        text("phone", MaxLength(20, "Nomor telepon maksimal 20 karakter"), required=False),
        boolean("is_active", required=False, default=True, type_message="Status aktif tidak valid"),
    ),
)
