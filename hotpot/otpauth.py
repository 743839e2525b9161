"""
otpauth.py — build otpauth:// provisioning URIs.

Authenticator apps (Google Authenticator, Authy, ...) import a secret by
scanning a QR code that encodes this URI. Rendering the QR code is left to
the caller; this module only formats the text.
"""

from typing import Union
from urllib.parse import quote

from hotpot import base32
from hotpot.errors import ArgumentError
from hotpot.otp_core import (
    ALLOWED_DIGITS,
    ALLOWED_TIME_STEPS,
    DEFAULT_ALGORITHM,
    DEFAULT_DIGITS,
    DEFAULT_TIME_STEP,
    HashAlgorithm,
    check_int_choice,
)


def format_otpauth_uri(
    secret: Union[bytes, str],
    account: str,
    issuer: str,
    algorithm: Union[HashAlgorithm, str] = DEFAULT_ALGORITHM,
    digits: int = DEFAULT_DIGITS,
    period: int = DEFAULT_TIME_STEP,
) -> str:
    """
    Tạo otpauth:// URI cho TOTP.

    Format:
        otpauth://totp/{account}?secret=...&issuer=...&algorithm=...&digits=...&period=...

    Arguments:
        secret: raw secret (bytes, sẽ được Base32-encode) hoặc Base32 text
        account: label account (ví dụ 'alice@example.com')
        issuer: tên dịch vụ (ví dụ 'MyService')
        algorithm: SHA1 / SHA256 / SHA512
        digits: số chữ số
        period: timestep (giây)

    Raises:
        ArgumentError: secret / account / issuer rỗng
        ValidationError: algorithm / digits / period không hợp lệ
    """
    if isinstance(secret, (bytes, bytearray, memoryview)):
        secret = base32.encode(secret)
    elif secret:
        secret = secret.strip().upper()
    if not secret:
        raise ArgumentError("secret is required")
    if not account:
        raise ArgumentError("account is required")
    if not issuer:
        raise ArgumentError("issuer is required")
    algo = HashAlgorithm.parse(algorithm)
    check_int_choice("digits", digits, ALLOWED_DIGITS)
    check_int_choice("period", period, ALLOWED_TIME_STEPS)
    return (
        f"otpauth://totp/{quote(account, safe='@')}?secret={secret}"
        f"&issuer={quote(issuer, safe='')}"
        f"&algorithm={algo}&digits={digits}&period={period}"
    )
