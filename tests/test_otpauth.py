from __future__ import annotations

from urllib.parse import parse_qs, urlparse

import pyotp
import pytest

from hotpot.errors import ArgumentError, ValidationError
from hotpot.otpauth import format_otpauth_uri

pytestmark = pytest.mark.unit


def test_default_uri_layout() -> None:
    uri = format_otpauth_uri("JBSWY3DPEHPK3PXP", "TestAccount", "ExampleIssuer")
    assert uri == (
        "otpauth://totp/TestAccount?secret=JBSWY3DPEHPK3PXP"
        "&issuer=ExampleIssuer&algorithm=SHA1&digits=6&period=30"
    )


def test_raw_secret_is_base32_encoded() -> None:
    uri = format_otpauth_uri(b"Hello!\xde\xad\xbe\xef", "bob", "Acme", algorithm="sha512", digits=8, period=60)
    query = parse_qs(urlparse(uri).query)
    assert query["secret"] == ["JBSWY3DPEHPK3PXP"]
    assert query["algorithm"] == ["SHA512"]
    assert query["digits"] == ["8"]
    assert query["period"] == ["60"]


def test_labels_are_percent_encoded() -> None:
    uri = format_otpauth_uri("JBSWY3DPEHPK3PXP", "alice smith", "My Co&Sons")
    assert uri.startswith("otpauth://totp/alice%20smith?")
    assert parse_qs(urlparse(uri).query)["issuer"] == ["My Co&Sons"]


def test_uri_is_readable_by_pyotp() -> None:
    uri = format_otpauth_uri("JBSWY3DPEHPK3PXP", "alice@example.com", "MyService", digits=8, period=60)
    parsed = pyotp.parse_uri(uri)
    assert parsed.secret == "JBSWY3DPEHPK3PXP"
    assert parsed.digits == 8
    assert parsed.interval == 60


@pytest.mark.parametrize(
    ("secret", "account", "issuer"),
    [("", "a", "b"), (b"", "a", "b"), ("JBSW", "", "b"), ("JBSW", "a", "")],
)
def test_missing_parts_rejected(secret, account: str, issuer: str) -> None:
    with pytest.raises(ArgumentError):
        format_otpauth_uri(secret, account, issuer)


def test_unknown_algorithm_rejected() -> None:
    with pytest.raises(ValidationError):
        format_otpauth_uri("JBSWY3DPEHPK3PXP", "a", "b", algorithm="MD5")


@pytest.mark.parametrize(("digits", "period"), [(7, 30), (6, 45), (6.0, 30), (8, True)])
def test_digits_and_period_must_match_a_buildable_engine(digits, period) -> None:
    with pytest.raises(ValidationError):
        format_otpauth_uri("JBSWY3DPEHPK3PXP", "a", "b", digits=digits, period=period)


def test_text_secret_is_normalised_to_uppercase() -> None:
    uri = format_otpauth_uri(" jbswy3dpehpk3pxp ", "alice", "Acme")
    assert "?secret=JBSWY3DPEHPK3PXP&" in uri


def test_blank_text_secret_rejected() -> None:
    with pytest.raises(ArgumentError):
        format_otpauth_uri("   ", "alice", "Acme")
