"""
Input normalizers for free text, identifiers and uploaded file names.

All string helpers accept ``None`` and return an empty/``None`` value for
it; none of them raise on malformed input.  HTML filtering goes through
``nh3`` (ammonia): ``sanitize_html`` keeps a small set of formatting tags,
``strip_html`` keeps none.
"""

from __future__ import annotations

import html
import re
import time
from dataclasses import dataclass
from typing import Any

import nh3
from email_validator import EmailNotValidError, validate_email

from gudang.core.config import settings

_WHITESPACE = re.compile(r"\s+")
_CODE_DISALLOWED = re.compile(r"[^A-Z0-9\-_]")
_PHONE_DISALLOWED = re.compile(r"[^0-9+\-\s()]")
_NON_DIGITS = re.compile(r"\D")
_NUMBER_DISALLOWED = re.compile(r"[^0-9.\-]")
_INTEGER_DISALLOWED = re.compile(r"[^0-9\-]")
_INTEGER_PREFIX = re.compile(r"-?\d+")
_FILENAME_DISALLOWED = re.compile(r"[^a-zA-Z0-9\-_\s]")
_EXTENSION = re.compile(r"^(.*)\.([^/\\.]+)$")

SAFE_HTML_TAGS = frozenset({"b", "i", "u", "strong", "em", "br", "p", "ul", "ol", "li"})
DANGEROUS_EXTENSIONS = frozenset({"exe", "bat", "cmd", "sh", "php", "js", "vbs", "ps1", "msi"})

ALLOWED_IMAGE_TYPES = ("image/jpeg", "image/png", "image/gif", "image/webp")
ALLOWED_DOCUMENT_TYPES = (
    "application/pdf",
    "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet",
    "application/vnd.ms-excel",
    "text/csv",
)

# Characters escaped on top of html.escape, matching validator.js escape().
_EXTRA_ENTITIES = str.maketrans({"/": "&#x2F;", "\\": "&#x5C;", "`": "&#96;"})


# ─── HTML ─────────────────────────────────────────────────


def sanitize_html(dirty: str) -> str:
    """Keep only basic formatting tags, with no attributes."""
    return nh3.clean(dirty, tags=set(SAFE_HTML_TAGS), attributes={})


def strip_html(dirty: str) -> str:
    """Remove every tag; ``<script>``/``<style>`` bodies are dropped too."""
    return nh3.clean(dirty, tags=set(), attributes={})


def encode_html_entities(value: str) -> str:
    return html.escape(value, quote=True).translate(_EXTRA_ENTITIES)


def decode_html_entities(value: str) -> str:
    return html.unescape(value)


# ─── Strings ──────────────────────────────────────────────


def sanitize_string(value: str | None) -> str:
    """Strip HTML, trim and collapse internal whitespace."""
    if not value:
        return ""
    return _WHITESPACE.sub(" ", strip_html(value)).strip()


def sanitize_code(value: str | None) -> str:
    """Upper-case identifier restricted to ``A-Z0-9-_``, at most 50 chars."""
    if not value:
        return ""
    return _CODE_DISALLOWED.sub("", value.upper())[:50]


def sanitize_email(value: str | None) -> str:
    """Return the normalized address, or ``""`` when it is not an e-mail."""
    if not value:
        return ""
    try:
        return validate_email(value.strip(), check_deliverability=False).normalized.lower()
    except EmailNotValidError:
        return ""


def sanitize_phone(value: str | None) -> str:
    if not value:
        return ""
    return _PHONE_DISALLOWED.sub("", value).strip()


def digits_only(value: str | None) -> str:
    if not value:
        return ""
    return _NON_DIGITS.sub("", value)


def sanitize_nik(value: str | None) -> str:
    """Employee number: digits only, at most 20."""
    return digits_only(value)[:20]


def sanitize_number(value: str | None) -> float | None:
    if not value:
        return None
    cleaned = _NUMBER_DISALLOWED.sub("", value)
    try:
        return float(cleaned)
    except ValueError:
        return None


def sanitize_integer(value: str | None) -> int | None:
    """Leading integer of the cleaned text, e.g. ``"12 pcs"`` -> 12."""
    if not value:
        return None
    cleaned = _INTEGER_DISALLOWED.sub("", value)
    match = _INTEGER_PREFIX.match(cleaned)
    return int(match.group()) if match else None


def sanitize_filename(filename: str, *, timestamp: int | None = None) -> str:
    """Safe storage name: ``<cleaned-stem>_<millis>.<ext>``."""
    match = _EXTENSION.match(filename)
    stem, ext = (match.group(1), match.group(2)) if match else (filename, "")
    cleaned = _WHITESPACE.sub("_", _FILENAME_DISALLOWED.sub("", stem))[:100]
    millis = timestamp if timestamp is not None else int(time.time() * 1000)
    ext = re.sub(r"[^a-z0-9]", "", ext.lower())
    return f"{cleaned}_{millis}.{ext}" if ext else f"{cleaned}_{millis}"


def is_safe_extension(filename: str) -> bool:
    ext = filename.rsplit(".", 1)[-1].lower() if "." in filename else ""
    return ext not in DANGEROUS_EXTENSIONS


def format_file_size(size: int) -> str:
    if size < 1024:
        return f"{size} B"
    if size < 1024 * 1024:
        return f"{size / 1024:.1f} KB"
    return f"{size / (1024 * 1024):.1f} MB"


@dataclass
class FileValidationResult:
    valid: bool
    error: str | None = None
    sanitized_name: str | None = None


def validate_upload(
    filename: str,
    size: int,
    content_type: str,
    *,
    allowed_types: tuple[str, ...] = ALLOWED_IMAGE_TYPES + ALLOWED_DOCUMENT_TYPES,
    max_size: int | None = None,
) -> FileValidationResult:
    """
    Check an uploaded file's size and MIME type, and give it a storage name.

    ``max_size`` defaults to ``settings.MAX_UPLOAD_SIZE_BYTES``.
    """
    limit = settings.MAX_UPLOAD_SIZE_BYTES if max_size is None else max_size
    if size > limit:
        return FileValidationResult(
            valid=False,
            error=f"File terlalu besar. Maksimal {format_file_size(limit)}",
        )
    if content_type not in allowed_types or not is_safe_extension(filename):
        kinds = ", ".join(t.split("/")[-1] for t in allowed_types)
        return FileValidationResult(valid=False, error=f"Tipe file tidak diizinkan. Hanya: {kinds}")
    return FileValidationResult(valid=True, sanitized_name=sanitize_filename(filename))


def sanitize_object(data: Any) -> Any:
    """Apply ``sanitize_string`` to every string inside dicts and lists."""
    if isinstance(data, str):
        return sanitize_string(data)
    if isinstance(data, dict):
        return {key: sanitize_object(value) for key, value in data.items()}
    if isinstance(data, list):
        return [sanitize_object(item) for item in data]
    return data
