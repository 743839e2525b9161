"""
otp_core.py — TOTP / HOTP engine (RFC 6238 on top of RFC 4226).

- HashAlgorithm: the closed set of HMAC digests an engine may use.
- Totp: immutable engine = secret + algorithm + digits + time step.
- int_to_bytes / dynamic_truncate: the two RFC 4226 building blocks.

The engine never stores a counter and never looks at neighbouring time
steps: one call, one counter, one code. Callers that want to tolerate
clock drift query adjacent counters themselves.
"""

import hashlib
import hmac
import logging
import struct
import time
from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Optional, Union

from hotpot.errors import ArgumentError, ValidationError

logger = logging.getLogger(__name__)

# --- Config / constants ----------------------------------------------------
DEFAULT_ALGORITHM = "SHA1"
DEFAULT_DIGITS = 6          # chuẩn: 6 chữ số
DEFAULT_TIME_STEP = 30      # TOTP step (giây)
ALLOWED_DIGITS = (6, 8)
ALLOWED_TIME_STEPS = (30, 60)

Timestamp = Union[datetime, int, float, None]


class HashAlgorithm(Enum):
    SHA1 = ("SHA1", hashlib.sha1)
    SHA256 = ("SHA256", hashlib.sha256)
    SHA512 = ("SHA512", hashlib.sha512)

    def __init__(self, label, digestmod):
        self.label = label
        self.digestmod = digestmod

    @property
    def digest_size(self) -> int:
        return self.digestmod().digest_size

    @classmethod
    def parse(cls, value: Union["HashAlgorithm", str, None]) -> "HashAlgorithm":
        """
        Chuyển tên thuật toán (không phân biệt hoa/thường) sang HashAlgorithm.

        Raises:
            ArgumentError: value là None hoặc chuỗi rỗng
            ValidationError: tên không thuộc SHA1 / SHA256 / SHA512
        """
        if isinstance(value, cls):
            return value
        if value is None or not str(value).strip():
            raise ArgumentError("Algorithm cannot be null or empty.")
        name = str(value).strip().upper()
        try:
            return cls[name]
        except KeyError:
            raise ValidationError(
                f"Invalid algorithm {value!r}; expected one of "
                f"{', '.join(m.name for m in cls)}"
            ) from None

    def __str__(self) -> str:
        return self.label

    def __repr__(self) -> str:
        return f"HashAlgorithm.{self.name}"


# --- RFC helpers -----------------------------------------------------------
def int_to_bytes(i: int) -> bytes:
    """
    Chuyển counter sang 8-byte big-endian như RFC4226 yêu cầu.

    Ví dụ: int_to_bytes(1) -> b'\\x00\\x00\\x00\\x00\\x00\\x00\\x00\\x01'
    """
    return struct.pack(">Q", i)


def dynamic_truncate(hmac_digest: bytes) -> int:
    """
    Dynamic truncation theo RFC4226 §5.3.

    - offset = last_byte & 0x0F
    - lấy 4 bytes từ offset, clear MSB (0x7F) của byte đầu
    - trả về số nguyên 31-bit không âm

    Offset tối đa là 15, nên digest 20/32/64 byte luôn đủ dài.
    """
    offset = hmac_digest[-1] & 0x0F
    return (
        ((hmac_digest[offset] & 0x7F) << 24)
        | ((hmac_digest[offset + 1] & 0xFF) << 16)
        | ((hmac_digest[offset + 2] & 0xFF) << 8)
        | (hmac_digest[offset + 3] & 0xFF)
    )


def _unix_seconds(timestamp: Timestamp) -> int:
    if timestamp is None:
        seconds = time.time()
    elif isinstance(timestamp, datetime):
        # naive datetimes are read as UTC
        if timestamp.tzinfo is None:
            timestamp = timestamp.replace(tzinfo=timezone.utc)
        seconds = timestamp.timestamp()
    elif isinstance(timestamp, bool) or not isinstance(timestamp, (int, float)):
        raise ArgumentError(f"Unsupported timestamp type: {type(timestamp).__name__}")
    else:
        seconds = timestamp
    if seconds < 0:
        raise ValidationError("Timestamp must not be before the Unix epoch")
    return int(seconds)


def check_int_choice(name: str, value, allowed) -> int:
    """digits / time_step: phải là int (không phải bool, float) thuộc `allowed`."""
    if isinstance(value, bool) or not isinstance(value, int) or value not in allowed:
        raise ValidationError(
            f"{name} must be {' or '.join(str(a) for a in allowed)}, got {value!r}"
        )
    return value


def secret_bytes(secret_key) -> bytes:
    """
    Copy a secret into immutable bytes.

    Only bytes-like values are accepted: bytes(20) would silently give a
    20-byte all-zero key.
    """
    if secret_key is None:
        raise ArgumentError("secret_key is required")
    if not isinstance(secret_key, (bytes, bytearray, memoryview)):
        raise ArgumentError(f"secret_key must be bytes, got {type(secret_key).__name__}")
    return bytes(secret_key)


# --- Engine ----------------------------------------------------------------
@dataclass(frozen=True)
class Totp:
    """
    Time-based One-Time Password generator (RFC 6238).

    Mọi tham số được kiểm tra một lần trong constructor; sau đó engine bất
    biến (frozen) và có thể dùng chung giữa nhiều thread.

    Arguments:
        secret_key: shared secret (bytes, không rỗng)
        algorithm: SHA1 / SHA256 / SHA512 (tên hoặc HashAlgorithm)
        digits: số chữ số OTP (6 hoặc 8)
        time_step: chu kỳ (giây), 30 hoặc 60

    Ví dụ:
        >>> totp = Totp(b"12345678901234567890", digits=8)
        >>> totp.generate_otp(59)
        '94287082'
    """

    secret_key: bytes = field(repr=False)
    algorithm: HashAlgorithm = HashAlgorithm.SHA1
    digits: int = DEFAULT_DIGITS
    time_step: int = DEFAULT_TIME_STEP

    def __post_init__(self):
        secret = secret_bytes(self.secret_key)
        if not secret:
            raise ValidationError("secret_key must not be empty")
        object.__setattr__(self, "secret_key", secret)
        object.__setattr__(self, "algorithm", HashAlgorithm.parse(self.algorithm))
        check_int_choice("digits", self.digits, ALLOWED_DIGITS)
        check_int_choice("time_step", self.time_step, ALLOWED_TIME_STEPS)
        logger.debug(
            "Totp ready: algorithm=%s digits=%d time_step=%ds key=%d bytes",
            self.algorithm, self.digits, self.time_step, len(secret),
        )

    def counter_at(self, timestamp: Timestamp = None) -> int:
        """counter = floor(unix_seconds / time_step)"""
        return _unix_seconds(timestamp) // self.time_step

    def remaining_seconds(self, timestamp: Timestamp = None) -> int:
        """Seconds left before the code for `timestamp` rolls over."""
        return self.time_step - (_unix_seconds(timestamp) % self.time_step)

    def generate_otp(self, timestamp: Timestamp = None) -> str:
        """
        Sinh mã TOTP cho một thời điểm.

        Arguments:
            timestamp: datetime (naive = UTC), epoch seconds (int/float),
                       hoặc None -> thời điểm hiện tại

        Trả về:
            str: mã OTP đúng `digits` chữ số, zero-padded

        Raises:
            ValidationError: timestamp trước Unix epoch
        """
        counter = self.counter_at(timestamp)
        logger.debug("TOTP: time step %ds -> counter=%d", self.time_step, counter)
        return self.generate_otp_at_counter(counter)

    def generate_otp_at_counter(self, counter: int) -> str:
        """
        Sinh mã HOTP (RFC4226) cho một counter.

        Steps:
        1. Message = 8-byte counter (big-endian)
        2. HMAC(secret, message) với digest đã cấu hình
        3. Dynamic truncate -> dbc
        4. otp = dbc % 10^digits, zero-pad đủ `digits` chữ số
        """
        if isinstance(counter, bool) or not isinstance(counter, int):
            raise ArgumentError("counter must be an integer")
        if not 0 <= counter < 2 ** 64:
            raise ValidationError("counter must fit in an unsigned 64-bit integer")
        # hmac.new per call: no shared mutable hash state between threads
        digest = hmac.new(self.secret_key, int_to_bytes(counter), self.algorithm.digestmod).digest()
        otp = dynamic_truncate(digest) % (10 ** self.digits)
        return str(otp).zfill(self.digits)
