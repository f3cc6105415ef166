"""Kas kecil (petty cash) income and expense schemas."""

from gudang.validation import MaxLength, Range, Schema, number, text


def _amount():
    return number(
        "amount",
        Range("Jumlah harus lebih dari 0", min=1),
        message="Jumlah wajib diisi",
        type_message="Jumlah harus berupa angka",
    )


def _description():
    return text(
        "description",
        MaxLength(500, "Keterangan maksimal 500 karakter"),
        message="Keterangan wajib diisi",
    )


petty_cash_income_schema = Schema(
    name="petty_cash_income",
    fields=(
        text("date", message="Tanggal wajib diisi"),
        _amount(),
        _description(),
    ),
)

petty_cash_expense_schema = Schema(
    name="petty_cash_expense",
    fields=(
        text("date", message="Tanggal wajib diisi"),
        text("category_id", message="Kategori wajib dipilih"),
        _amount(),
        _description(),
        text("receipt", required=False),
    ),
)


def format_currency(amount: int | float) -> str:
    """Format an amount as Rupiah, e.g. ``Rp 1.250.000``."""
    rounded = round(amount)
    sign = "-" if rounded < 0 else ""
    grouped = f"{abs(rounded):,}".replace(",", ".")
    return f"{sign}Rp {grouped}"
