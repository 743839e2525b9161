"""
hotpot package
==============

Sinh mã OTP theo chuẩn RFC 4226 (HOTP) & RFC 6238 (TOTP), kèm bộ mã hoá
Base32 cho secret.

──────────────────────────────────────────────
Giải thuật cốt lõi
──────────────────────────────────────────────
- HOTP: code = Truncate(HMAC(key=secret, msg=counter)) mod 10^digits
- TOTP: HOTP với counter = floor(unix_time / time_step)
  → time_step = 30 hoặc 60 giây, digits = 6 hoặc 8,
    HMAC dùng SHA1 / SHA256 / SHA512.
- Dynamic Truncation: lấy 4 byte từ HMAC tại offset (last byte & 0x0F).

Engine chỉ tính đúng một counter cho mỗi lần gọi; không có cửa sổ
chấp nhận lệch giờ (drift window).

──────────────────────────────────────────────
Ví dụ sử dụng nhanh
──────────────────────────────────────────────
>>> from hotpot import TotpBuilder
>>> result = TotpBuilder().with_digits(6).build()
>>> code = result.as_totp().generate_otp()
>>> uri = result.provisioning_uri("alice@example", "MyService")

Secret (result.secret_key / result.secret_base32) phải do caller tự lưu
an toàn; hotpot không đọc/ghi file.
"""

from hotpot import base32
from hotpot.builder import DEFAULT_KEY_BITS, TotpBuilder
from hotpot.errors import ArgumentError, FormatError, HotpotError, ValidationError
from hotpot.otp_core import (
    DEFAULT_ALGORITHM,
    DEFAULT_DIGITS,
    DEFAULT_TIME_STEP,
    HashAlgorithm,
    Totp,
    dynamic_truncate,
    int_to_bytes,
)
from hotpot.otpauth import format_otpauth_uri
from hotpot.result import TotpCreationResult

__all__ = [
    "base32",
    "ArgumentError",
    "FormatError",
    "HotpotError",
    "ValidationError",
    "HashAlgorithm",
    "Totp",
    "TotpBuilder",
    "TotpCreationResult",
    "format_otpauth_uri",
    "dynamic_truncate",
    "int_to_bytes",
    "DEFAULT_ALGORITHM",
    "DEFAULT_DIGITS",
    "DEFAULT_TIME_STEP",
    "DEFAULT_KEY_BITS",
]
