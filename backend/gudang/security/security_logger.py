"""
Security event logging.

Events are emitted as structured log lines through structlog; where they are
stored (file, aggregator, database) is decided by the logging configuration,
not here.  Raw field values are never logged, only field names and the
user-facing messages.
"""

from __future__ import annotations

from collections.abc import Iterable
from enum import StrEnum
from typing import Any

from gudang.core.config import settings
from gudang.core.logging import get_logger
from gudang.validation.result import FieldError

logger = get_logger("security")


class SecurityEvent(StrEnum):
    LOGIN_SUCCESS = "LOGIN_SUCCESS"
    LOGIN_FAILED = "LOGIN_FAILED"
    PERMISSION_DENIED = "PERMISSION_DENIED"
    RATE_LIMIT_HIT = "RATE_LIMIT_HIT"
    SUSPICIOUS_ACTIVITY = "SUSPICIOUS_ACTIVITY"
    VALIDATION_FAILED = "VALIDATION_FAILED"
    DATA_IMPORT = "DATA_IMPORT"
    FILE_UPLOAD = "FILE_UPLOAD"
    USER_CREATED = "USER_CREATED"
    ROLE_CHANGED = "ROLE_CHANGED"


class RiskLevel(StrEnum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    CRITICAL = "critical"


EVENT_RISK = {
    SecurityEvent.LOGIN_SUCCESS: RiskLevel.LOW,
    SecurityEvent.LOGIN_FAILED: RiskLevel.MEDIUM,
    SecurityEvent.PERMISSION_DENIED: RiskLevel.MEDIUM,
    SecurityEvent.RATE_LIMIT_HIT: RiskLevel.HIGH,
    SecurityEvent.SUSPICIOUS_ACTIVITY: RiskLevel.HIGH,
    SecurityEvent.VALIDATION_FAILED: RiskLevel.LOW,
    SecurityEvent.DATA_IMPORT: RiskLevel.LOW,
    SecurityEvent.FILE_UPLOAD: RiskLevel.LOW,
    SecurityEvent.USER_CREATED: RiskLevel.MEDIUM,
    SecurityEvent.ROLE_CHANGED: RiskLevel.HIGH,
}

_LEVEL_METHOD = {
    RiskLevel.LOW: "info",
    RiskLevel.MEDIUM: "warning",
    RiskLevel.HIGH: "warning",
    RiskLevel.CRITICAL: "error",
}


def log_security_event(
    event: SecurityEvent,
    *,
    user_id: str | None = None,
    ip_address: str | None = None,
    risk: RiskLevel | None = None,
    **details: Any,
) -> RiskLevel:
    """Emit one security event and return the risk level it was logged at."""
    level = risk or EVENT_RISK.get(event, RiskLevel.LOW)
    log = logger.bind(event_type=str(event), risk=str(level))
    if user_id is not None:
        log = log.bind(user_id=user_id)
    if ip_address is not None:
        log = log.bind(ip_address=ip_address)
    getattr(log, _LEVEL_METHOD[level])("Security event", **details)
    return level


def log_validation_failure(
    schema_name: str,
    errors: Iterable[FieldError],
    *,
    user_id: str | None = None,
    ip_address: str | None = None,
) -> bool:
    """Record a rejected submission.  Returns False when disabled by config."""
    if not settings.LOG_VALIDATION_FAILURES:
        return False
    errors = list(errors)
    log_security_event(
        SecurityEvent.VALIDATION_FAILED,
        user_id=user_id,
        ip_address=ip_address,
        schema=schema_name,
        fields=[e.field for e in errors],
        messages=[e.message for e in errors],
    )
    return True
