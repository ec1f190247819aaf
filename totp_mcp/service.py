"""TOTP service resolving accounts to secrets and codes."""

from __future__ import annotations

import logging
import time
from typing import Callable, List, Optional, Union

from .accounts import AccountRegistry
from .config import TotpSettings, get_settings
from .models import AccountStatus, TotpCode, TotpError
from .secret_store import load_secrets
from .totp import DerivationError, generate

logger = logging.getLogger(__name__)


class TotpService:
    """Answers code and account queries against a fresh read of the secrets file."""

    def __init__(
        self,
        settings: Optional[TotpSettings] = None,
        registry: Optional[AccountRegistry] = None,
        clock: Callable[[], float] = time.time,
    ):
        self.settings = settings or get_settings()
        self.registry = registry or AccountRegistry()
        self.clock = clock

    def generate_code(self, account: str) -> Union[TotpCode, TotpError]:
        """
        Generate the current code for an account.

        Args:
            account: Account name, matched case-insensitively

        Returns:
            TotpCode on success, otherwise TotpError describing the failure
        """
        key_name = self.registry.resolve(account)
        if not key_name:
            available = ", ".join(self.registry.names())
            logger.warning(f"Unknown TOTP account requested: {account}")
            return TotpError(
                message=f"Unknown account: {account}. Available: {available}"
            )

        secret = load_secrets(self.settings.secrets_file).get(key_name)
        if not secret:
            logger.warning(f"No secret configured for {key_name}")
            return TotpError(message=f"No secret found for {key_name} in secrets file")

        try:
            result = generate(secret, now=self.clock())
        except DerivationError as e:
            logger.warning(f"Failed to generate code for {account}: {e}")
            return TotpError(message=f"Failed to generate code: {e}")

        return TotpCode(
            account=account,
            code=result.code,
            seconds_remaining=result.seconds_remaining,
        )

    def list_accounts(self) -> List[AccountStatus]:
        """
        Report which accounts have a secret in the secrets file.

        Returns:
            One status per account, in definition order
        """
        secrets = load_secrets(self.settings.secrets_file)
        statuses: List[AccountStatus] = []
        for definition in self.registry.list_all():
            if secrets.get(definition.secret_key):
                statuses.append(
                    AccountStatus(account=definition.name, configured=True)
                )
            else:
                statuses.append(
                    AccountStatus(
                        account=definition.name,
                        configured=False,
                        missing=definition.secret_key,
                    )
                )
        return statuses
