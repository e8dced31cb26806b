"""Shared-secret access gating."""

from __future__ import annotations

import hashlib
import secrets
from collections.abc import Sequence
from dataclasses import dataclass

from vodgate_config.settings import Settings


@dataclass(frozen=True)
class AccessStatus:
    """Whether clients must present a password."""

    require_password: bool
    multi_user_mode: bool


@dataclass(frozen=True)
class VerificationResult:
    """Outcome of a password check."""

    success: bool
    password_hash: str | None = None


def hash_password(password: str | None) -> str:
    """Hex SHA-256 of the password, the token handed back to clients."""
    return hashlib.sha256((password or "").encode("utf-8")).hexdigest()


class AccessService:
    """Compares a presented password with the configured accepted set.

    With no configured passwords every request is accepted.
    """

    def __init__(self, accepted_passwords: Sequence[str]):
        self._passwords = tuple(accepted_passwords)

    @classmethod
    def from_settings(cls, settings: Settings) -> AccessService:
        return cls(settings.accepted_passwords)

    def status(self) -> AccessStatus:
        return AccessStatus(
            require_password=len(self._passwords) > 0,
            multi_user_mode=len(self._passwords) > 1,
        )

    def verify(self, password: str | None) -> VerificationResult:
        if not self._passwords or self._matches(password):
            return VerificationResult(success=True, password_hash=hash_password(password))
        return VerificationResult(success=False)

    def _matches(self, password: str | None) -> bool:
        if password is None:
            return False
        candidate = password.encode("utf-8")
        # Constant-time comparison against every entry
        matched = False
        for accepted in self._passwords:
            if secrets.compare_digest(candidate, accepted.encode("utf-8")):
                matched = True
        return matched
