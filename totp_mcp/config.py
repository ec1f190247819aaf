"""Settings for the TOTP MCP server.

Values are read from the environment (prefix ``TOTP_MCP_``) or a local
``.env`` file. The account table is not configurable; see ``accounts``.
"""

from __future__ import annotations

from pathlib import Path

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

__all__ = ["DEFAULT_SECRETS_FILE", "TotpSettings", "get_settings"]


DEFAULT_SECRETS_FILE = Path.home() / "Google Drive" / "My Drive" / ".nutrie-secrets"


class TotpSettings(BaseSettings):
    """Runtime settings for the TOTP MCP server."""

    secrets_file: Path = DEFAULT_SECRETS_FILE
    log_level: str = "INFO"
    server_name: str = "totp"
    server_version: str = "1.0.0"

    model_config = SettingsConfigDict(
        env_prefix="TOTP_MCP_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    @field_validator("secrets_file")
    @classmethod
    def _expand_user(cls, value: Path) -> Path:
        return value.expanduser()

    @field_validator("log_level")
    @classmethod
    def _upper_level(cls, value: str) -> str:
        return value.strip().upper() or "INFO"


def get_settings() -> TotpSettings:
    """Return settings built from the current environment."""
    return TotpSettings()
