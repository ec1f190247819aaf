"""RFC 6238 TOTP derivation (SHA-1, 30 second step, 6 digits)."""

from __future__ import annotations

import base64
import binascii
import hmac
import struct
import time
from hashlib import sha1
from typing import Optional

from pydantic import BaseModel, Field

PERIOD = 30
DIGITS = 6


class DerivationError(ValueError):
    """Raised when a shared secret cannot produce a code."""


class TotpResult(BaseModel):
    """Current code and the seconds left before it rotates."""

    code: str = Field(..., pattern=r"^\d+$")
    seconds_remaining: int = Field(..., ge=1)


def base32_decode_no_padding(data: str) -> bytes:
    """Decode a possibly unpadded base32 string into bytes.

    Removes whitespace and adds missing padding; case-insensitive.

    Raises:
        DerivationError: if the value is not valid base32 or decodes to
            empty key material.
    """
    value = "".join(data.split()).upper()
    missing = (-len(value)) % 8
    if missing:
        value += "=" * missing
    try:
        key = base64.b32decode(value, casefold=True)
    except (binascii.Error, ValueError) as e:
        raise DerivationError(f"Invalid base32 secret: {e}") from e
    if not key:
        raise DerivationError("Secret decodes to empty key material")
    return key


def hotp(secret: bytes, counter: int, digits: int = DIGITS) -> str:
    """Generate an HOTP code using SHA1.

    Args:
        secret: Raw shared secret bytes.
        counter: Moving factor (8-byte integer).
        digits: Number of digits in the output code.
    """
    counter_bytes = struct.pack("!Q", counter)
    hmac_digest = hmac.new(secret, counter_bytes, sha1).digest()
    offset = hmac_digest[-1] & 0x0F
    code = (
        ((hmac_digest[offset] & 0x7F) << 24)
        | ((hmac_digest[offset + 1] & 0xFF) << 16)
        | ((hmac_digest[offset + 2] & 0xFF) << 8)
        | (hmac_digest[offset + 3] & 0xFF)
    )
    return str(code % (10 ** digits)).zfill(digits)


def totp_from_base32(
    base32_secret: str,
    period: int = PERIOD,
    digits: int = DIGITS,
    now: Optional[int] = None,
) -> str:
    """Generate a TOTP code from a base32 secret.

    Args:
        base32_secret: Base32-encoded shared secret.
        period: Time step in seconds.
        digits: Number of digits.
        now: Optional unix timestamp override for testing.
    """
    unix_time = int(now if now is not None else time.time())
    secret_bytes = base32_decode_no_padding(base32_secret)
    return hotp(secret_bytes, unix_time // period, digits)


def seconds_remaining(now: int, period: int = PERIOD) -> int:
    """Seconds until the code for ``now`` rotates, in ``[1, period]``."""
    return period - (int(now) % period)


def generate(secret: str, now: Optional[float] = None) -> TotpResult:
    """Return the current code for ``secret`` and its remaining lifetime.

    Raises:
        DerivationError: if the secret is malformed.
    """
    unix_time = int(now if now is not None else time.time())
    code = totp_from_base32(secret, now=unix_time)
    return TotpResult(code=code, seconds_remaining=seconds_remaining(unix_time))
