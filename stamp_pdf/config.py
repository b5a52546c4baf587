"""
Process configuration.

Read once from the environment (and an optional .env file) when the app is
created; request handlers only ever see the resulting Settings object.
"""

from __future__ import annotations

import logging
from typing import List, Optional, Tuple

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from stamp_pdf.util.helpers import split_csv

logger = logging.getLogger(__name__)

IMPLICIT_TLS_PORT = 465

REQUIRED_FIELDS = ("smtp_host", "smtp_user", "smtp_password", "receiver_email")


class Settings(BaseSettings):
    """Application settings"""

    model_config = SettingsConfigDict(
        env_file=".env",
        extra="ignore",
        frozen=True,
        populate_by_name=True,
    )

    # ========== SMTP ==========
    smtp_host: Optional[str] = None
    smtp_port: int = 587  # 465 = implicit TLS, anything else = STARTTLS
    smtp_user: Optional[str] = None
    smtp_password: Optional[str] = Field(default=None, alias="SMTP_PASS")
    receiver_email: Optional[str] = None  # where orders go

    # ========== Server ==========
    port: int = 3000
    cors_origins: str = ""  # comma-separated, empty = allow all

    @property
    def smtp_implicit_tls(self) -> bool:
        return self.smtp_port == IMPLICIT_TLS_PORT

    def allowed_origins(self) -> List[str]:
        return list(split_csv(self.cors_origins)) or ["*"]

    def missing(self) -> Tuple[str, ...]:
        """Env var names of required SMTP values that are not set."""
        fields = type(self).model_fields
        return tuple(
            (fields[name].alias or name).upper()
            for name in REQUIRED_FIELDS
            if not getattr(self, name)
        )


def load_settings(**overrides) -> Settings:
    """
    Build Settings from the environment and .env.

    Missing SMTP values do not stop startup: a warning is logged and sending
    fails later, at dispatch time.
    """
    settings = Settings(**overrides)

    missing = settings.missing()
    if missing:
        logger.warning("Missing environment variables: %s", ", ".join(missing))

    return settings
