"""Login and user-management form schemas."""

from gudang.core.constants import Role
from gudang.validation import MaxLength, MinLength, Pattern, Schema, choice, text

login_schema = Schema(
    name="login",
    fields=(
        text("username", MinLength(3, "Username minimal 3 karakter"), message="Username wajib diisi"),
        text("password", MinLength(6, "Password minimal 6 karakter"), message="Password wajib diisi"),
    ),
)

create_user_schema = Schema(
    name="create_user",
    fields=(
        text(
            "username",
            MinLength(3, "Username minimal 3 karakter"),
            MaxLength(50, "Username maksimal 50 karakter"),
            Pattern(r"[a-zA-Z0-9_]+", "Username hanya boleh huruf, angka, dan underscore"),
            message="Username wajib diisi",
        ),
        text(
            "password",
            MinLength(6, "Password minimal 6 karakter"),
            MaxLength(100, "Password maksimal 100 karakter"),
            message="Password wajib diisi",
        ),
        text("name", MaxLength(100, "Nama maksimal 100 karakter"), message="Nama wajib diisi"),
        choice("role", tuple(Role), invalid_message="Role tidak valid", message="Role tidak valid"),
    ),
)
