"""Data models for the TOTP MCP server."""

from typing import Optional

from pydantic import BaseModel, Field


class GetTotpCodeRequest(BaseModel):
    """Arguments of the ``get_totp_code`` tool."""

    account: str = Field(
        ..., min_length=1, description="Account name (e.g., 'google', 'codiedev42')"
    )


class TotpCode(BaseModel):
    """Successful code lookup for an account."""

    account: str = Field(..., description="Account name as requested")
    code: str = Field(..., description="Current 6-digit code")
    seconds_remaining: int = Field(
        ..., description="Seconds before the code rotates"
    )


class TotpError(BaseModel):
    """Human-readable reason a code could not be produced."""

    message: str


class AccountStatus(BaseModel):
    """Whether an account has a secret in the secrets file."""

    account: str
    configured: bool
    missing: Optional[str] = Field(
        None, description="Secret key name when not configured"
    )
