"""
Pydantic Settings — centralized configuration loaded from environment variables.
"""

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # ── Application ───────────────────────────
    APP_ENV: str = "development"

    # ── Logging ───────────────────────────────
    LOG_LEVEL: str = "INFO"
    LOG_JSON: bool = False
    LOG_VALIDATION_FAILURES: bool = True

    # ── Spreadsheet import ────────────────────
    IMPORT_START_ROW: int = 4  # first data row of the import templates
    IMPORT_MAX_ROWS: int = 5000

    # ── Uploads ───────────────────────────────
    MAX_UPLOAD_SIZE_BYTES: int = 10 * 1024 * 1024

    model_config = {"env_file": ["../.env", ".env"], "env_prefix": "GUDANG_", "extra": "ignore"}

    @property
    def is_development(self) -> bool:
        return self.APP_ENV == "development"


settings = Settings()
