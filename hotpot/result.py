"""
result.py — what TotpBuilder.build() hands back.

The caller gets both the ready engine and the secret it was built from, so
it can start generating codes and persist/provision the secret in one step.
"""

from dataclasses import dataclass, field

from hotpot import base32
from hotpot.errors import ArgumentError
from hotpot.otp_core import Totp, secret_bytes
from hotpot.otpauth import format_otpauth_uri


@dataclass(frozen=True)
class TotpCreationResult:
    totp: Totp
    # Store this securely; it is the only copy the caller gets.
    secret_key: bytes = field(repr=False)

    def __post_init__(self):
        if self.totp is None:
            raise ArgumentError("totp is required")
        object.__setattr__(self, "secret_key", secret_bytes(self.secret_key))

    def as_totp(self) -> Totp:
        """Return the built engine. Same object as `.totp`."""
        return self.totp

    @property
    def secret_base32(self) -> str:
        return base32.encode(self.secret_key)

    def provisioning_uri(self, account: str, issuer: str) -> str:
        return format_otpauth_uri(
            self.secret_key,
            account,
            issuer,
            algorithm=self.totp.algorithm,
            digits=self.totp.digits,
            period=self.totp.time_step,
        )
