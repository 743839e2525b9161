"""
builder.py — fluent construction of Totp engines.

    result = (
        TotpBuilder()
        .with_algorithm("SHA256")
        .with_digits(8)
        .build()
    )
    code = result.as_totp().generate_otp()
    save_somewhere(result.secret_base32)

Setters validate their own field immediately; Totp re-validates the whole
set when build() runs. A builder is meant to be used once by one owner.
"""

import logging
import os
from typing import Callable, Optional, Union

from hotpot import base32
from hotpot.errors import ArgumentError, ValidationError
from hotpot.otp_core import (
    ALLOWED_DIGITS,
    ALLOWED_TIME_STEPS,
    DEFAULT_ALGORITHM,
    DEFAULT_DIGITS,
    DEFAULT_TIME_STEP,
    HashAlgorithm,
    Totp,
    check_int_choice,
    secret_bytes,
)
from hotpot.result import TotpCreationResult

logger = logging.getLogger(__name__)

DEFAULT_KEY_BITS = 160      # 160-bit secret (common practice)

RandomSource = Callable[[int], bytes]


class TotpBuilder:
    def __init__(self, random_source: RandomSource = os.urandom):
        """
        Arguments:
            random_source: callable(n) -> n random bytes. Mặc định os.urandom
                           (CSPRNG); test có thể truyền nguồn cố định.
        """
        self._random_source = random_source
        self._secret_key: Optional[bytes] = None
        self._algorithm: Union[HashAlgorithm, str] = DEFAULT_ALGORITHM
        self._digits = DEFAULT_DIGITS
        self._time_step = DEFAULT_TIME_STEP
        self._key_bits = DEFAULT_KEY_BITS

    def with_secret_key(self, secret_key: bytes) -> "TotpBuilder":
        self._secret_key = secret_bytes(secret_key)
        return self

    def with_base32_secret(self, secret_b32: str) -> "TotpBuilder":
        """
        Same as with_secret_key, for a secret the user typed or scanned.

        Raises:
            ArgumentError: text is None or decodes to no bytes ("", "   ", "A")
            FormatError: character outside the Base32 alphabet
        """
        if secret_b32 is None:
            raise ArgumentError("secret is required")
        secret = base32.decode(secret_b32)
        if not secret:
            raise ArgumentError("Base32 secret decodes to an empty key")
        return self.with_secret_key(secret)

    def generate_secret_key(self, bit_length: int = DEFAULT_KEY_BITS) -> "TotpBuilder":
        """
        Sinh secret ngẫu nhiên dài bit_length // 8 bytes, ghi đè secret cũ.

        bit_length cũng là độ dài build() dùng khi phải tự sinh secret.

        Raises:
            ValidationError: bit_length không phải bội số dương của 8
        """
        if isinstance(bit_length, bool) or not isinstance(bit_length, int) \
                or bit_length <= 0 or bit_length % 8:
            raise ValidationError(f"bit_length must be a positive multiple of 8, got {bit_length!r}")
        self._key_bits = bit_length
        self._secret_key = secret_bytes(self._random_source(bit_length // 8))
        logger.debug("Generated %d-bit secret", bit_length)
        return self

    def with_algorithm(self, algorithm: Union[HashAlgorithm, str]) -> "TotpBuilder":
        if algorithm is None or (isinstance(algorithm, str) and not algorithm.strip()):
            raise ArgumentError("Algorithm cannot be null or empty.")
        self._algorithm = algorithm
        return self

    def with_digits(self, digits: int) -> "TotpBuilder":
        self._digits = check_int_choice("digits", digits, ALLOWED_DIGITS)
        return self

    def with_time_step(self, time_step: int) -> "TotpBuilder":
        self._time_step = check_int_choice("time_step", time_step, ALLOWED_TIME_STEPS)
        return self

    def build(self) -> TotpCreationResult:
        if not self._secret_key:
            self.generate_secret_key(self._key_bits)
        totp = Totp(self._secret_key, self._algorithm, self._digits, self._time_step)
        return TotpCreationResult(totp, self._secret_key)
