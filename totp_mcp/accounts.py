"""Static account registry mapping account names to secret key names."""

from __future__ import annotations

from typing import Dict, Iterable, List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field


class AccountDefinition(BaseModel):
    """A named account and the secrets-file key holding its shared secret."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., min_length=1)
    secret_key: str = Field(..., pattern=r"^[A-Z_]+$")


ACCOUNTS: Tuple[AccountDefinition, ...] = (
    AccountDefinition(name="google", secret_key="GOOGLE_TOTP_SECRET"),
    AccountDefinition(name="codiedev42", secret_key="GOOGLE_TOTP_SECRET"),  # alias
)


class AccountRegistry:
    """Read-only, case-insensitive view over account definitions."""

    def __init__(self, definitions: Iterable[AccountDefinition] = ACCOUNTS):
        self._definitions: Tuple[AccountDefinition, ...] = tuple(definitions)
        self._by_name: Dict[str, str] = {
            d.name.lower(): d.secret_key for d in self._definitions
        }

    def resolve(self, account: str) -> Optional[str]:
        """Return the secret key name for ``account``, or None if unknown."""
        return self._by_name.get(account.lower())

    def list_all(self) -> List[AccountDefinition]:
        """Return all definitions in definition order."""
        return list(self._definitions)

    def names(self) -> List[str]:
        return [d.name for d in self._definitions]
