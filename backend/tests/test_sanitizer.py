"""Tests for input sanitizers."""

import pytest

from gudang.core.config import settings
from gudang.security.sanitizer import (
    decode_html_entities,
    digits_only,
    encode_html_entities,
    format_file_size,
    is_safe_extension,
    sanitize_code,
    sanitize_email,
    sanitize_filename,
    sanitize_html,
    sanitize_integer,
    sanitize_nik,
    sanitize_number,
    sanitize_object,
    sanitize_phone,
    sanitize_string,
    strip_html,
    validate_upload,
)


@pytest.mark.parametrize(
    "func, empty",
    [
        (sanitize_string, ""),
        (sanitize_code, ""),
        (sanitize_email, ""),
        (sanitize_phone, ""),
        (sanitize_nik, ""),
        (digits_only, ""),
        (sanitize_number, None),
        (sanitize_integer, None),
    ],
)
def test_none_and_empty_inputs(func, empty):
    assert func(None) == empty
    assert func("") == empty


def test_sanitize_string_collapses_whitespace():
    assert sanitize_string("  Filter \t oli\n mesin ") == "Filter oli mesin"


def test_sanitize_code():
    assert sanitize_code("ab-12 x!") == "AB-12X"
    assert len(sanitize_code("a" * 80)) == 50


def test_sanitize_email():
    assert sanitize_email("  Budi@Maju.CO.ID ") == "budi@maju.co.id"
    assert sanitize_email("bukan email") == ""


def test_sanitize_phone_and_nik():
    assert sanitize_phone(" +62 (812) 3456-789 ext") == "+62 (812) 3456-789"
    assert sanitize_nik("NIK: 3201-0012") == "32010012"
    assert len(sanitize_nik("9" * 30)) == 20


def test_numeric_sanitizers():
    assert sanitize_number("3.5 kg") == 3.5
    assert sanitize_number("abc") is None
    assert sanitize_integer("12 pcs") == 12
    assert sanitize_integer("-7") == -7
    assert sanitize_integer("pcs") is None


def test_sanitize_filename():
    assert sanitize_filename("laporan stok (1).XLSX", timestamp=1700000000000) == "laporan_stok_1_1700000000000.xlsx"
    assert sanitize_filename("../../etc/passwd", timestamp=5) == "etcpasswd_5"


@pytest.mark.parametrize("name, safe", [("data.xlsx", True), ("run.EXE", False), ("script.sh", False), ("README", True)])
def test_is_safe_extension(name, safe):
    assert is_safe_extension(name) is safe


def test_sanitize_object_recurses():
    data = {"a": "  x   y ", "b": [" z ", {"c": " w"}], "d": 1, "e": None}
    assert sanitize_object(data) == {"a": "x y", "b": ["z", {"c": "w"}], "d": 1, "e": None}


def test_sanitize_string_strips_html():
    assert sanitize_string("  <b>Filter</b>   oli<script>alert(1)</script> ") == "Filter oli"


def test_sanitize_html_keeps_formatting_tags_only():
    dirty = '<p onclick="steal()">Ganti <strong>oli</strong> <a href="javascript:x()">di sini</a></p><img src=x onerror=y>'
    assert sanitize_html(dirty) == "<p>Ganti <strong>oli</strong> di sini</p>"


def test_strip_html_drops_script_bodies():
    assert strip_html("<div>Rak A<style>p{}</style></div><script>x()</script>") == "Rak A"


def test_html_entities():
    encoded = encode_html_entities("<a href='/x'>\"&\"</a>")
    assert encoded == "&lt;a href=&#x27;&#x2F;x&#x27;&gt;&quot;&amp;&quot;&lt;&#x2F;a&gt;"
    assert decode_html_entities(encoded) == "<a href='/x'>\"&\"</a>"


@pytest.mark.parametrize("size, text", [(512, "512 B"), (1536, "1.5 KB"), (10 * 1024 * 1024, "10.0 MB")])
def test_format_file_size(size, text):
    assert format_file_size(size) == text


def test_validate_upload_accepts_spreadsheet():
    result = validate_upload(
        "stok awal.xlsx",
        2048,
        "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet",
    )
    assert result.valid
    assert result.error is None
    assert result.sanitized_name.startswith("stok_awal_")
    assert result.sanitized_name.endswith(".xlsx")


def test_validate_upload_uses_configured_size_limit(monkeypatch):
    monkeypatch.setattr(settings, "MAX_UPLOAD_SIZE_BYTES", 1024)
    result = validate_upload("nota.pdf", 2048, "application/pdf")
    assert not result.valid
    assert result.error == "File terlalu besar. Maksimal 1.0 KB"


@pytest.mark.parametrize(
    "filename, content_type",
    [("virus.exe", "application/pdf"), ("nota.pdf", "application/x-msdownload")],
)
def test_validate_upload_rejects_type(filename, content_type):
    result = validate_upload(filename, 10, content_type)
    assert not result.valid
    assert result.error.startswith("Tipe file tidak diizinkan. Hanya: jpeg, png")
