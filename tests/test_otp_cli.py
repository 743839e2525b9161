from __future__ import annotations

import pytest

from hotpot import base32
from hotpot.otp_cli import main

pytestmark = pytest.mark.unit


def test_totp_command_prints_code(capsys: pytest.CaptureFixture[str]) -> None:
    # base32 of the RFC 6238 SHA1 test key
    secret = base32.encode(b"12345678901234567890")
    assert main(["totp", "--secret", secret, "--digits", "8", "--at", "59"]) == 0
    out = capsys.readouterr().out
    assert "TOTP: 94287082" in out
    assert "valid ~ 1s" in out


def test_hotp_command_prints_code(capsys: pytest.CaptureFixture[str]) -> None:
    secret = base32.encode(b"12345678901234567890")
    assert main(["hotp", "--secret", secret, "--counter", "1"]) == 0
    assert "HOTP(counter=1): 287082" in capsys.readouterr().out


def test_uri_command(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["uri", "--secret", "jbswy3dpehpk3pxp", "--account", "alice", "--issuer", "Acme"]) == 0
    assert capsys.readouterr().out.strip() == (
        "otpauth://totp/alice?secret=JBSWY3DPEHPK3PXP&issuer=Acme&algorithm=SHA1&digits=6&period=30"
    )


def test_secret_command_prints_base32(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["secret", "--bits", "80"]) == 0
    secret = capsys.readouterr().out.strip()
    assert len(secret) == 16
    assert len(base32.decode(secret)) == 10


def test_init_command(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["init", "--account", "alice", "--issuer", "Acme", "--digits", "8"]) == 0
    out = capsys.readouterr().out
    assert "Secret (Base32" in out
    assert "otpauth://totp/alice?secret=" in out
    assert "&digits=8&period=30" in out


def test_invalid_option_reports_error(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["totp", "--secret", "JBSWY3DPEHPK3PXP", "--digits", "7"]) == 2
    assert capsys.readouterr().err.startswith("[!] ")


def test_bad_secret_reports_error(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["hotp", "--secret", "ABC!", "--counter", "0"]) == 2
    assert "Invalid Base32 character" in capsys.readouterr().err


def test_no_command_prints_help(capsys: pytest.CaptureFixture[str]) -> None:
    assert main([]) == 0
    out = capsys.readouterr().out
    assert out.startswith("usage: hotpot")
    for command in ("init", "secret", "totp", "hotp", "uri"):
        assert command in out
