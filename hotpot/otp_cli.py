#!/usr/bin/env python3
"""
otp_cli.py — command-line front end for hotpot.

Subcommands:
- init   : generate a secret, print it with the current TOTP and otpauth URI
- secret : print a fresh Base32 secret
- totp   : print the TOTP code for a secret
- hotp   : print the HOTP code for a secret and counter
- uri    : print the otpauth URI for a secret

Secrets are passed on the command line as Base32; hotpot does not store them.

eg..:
    hotpot init --account alice@example --issuer MyService
    hotpot totp --secret JBSWY3DPEHPK3PXP --digits 8 --period 60
    hotpot hotp --secret JBSWY3DPEHPK3PXP --counter 42
    hotpot uri --secret JBSWY3DPEHPK3PXP --account alice@example --issuer MyService
"""

import argparse
import logging
import sys

from hotpot import base32
from hotpot.builder import DEFAULT_KEY_BITS, TotpBuilder
from hotpot.errors import HotpotError
from hotpot.otp_core import DEFAULT_ALGORITHM, DEFAULT_DIGITS, DEFAULT_TIME_STEP, Totp
from hotpot.otpauth import format_otpauth_uri


def _engine(args) -> Totp:
    secret = base32.decode(args.secret)
    return Totp(secret, args.algorithm, args.digits, getattr(args, "period", DEFAULT_TIME_STEP))


# --- CLI command handlers ---
def cmd_init(args):
    result = (
        TotpBuilder()
        .with_algorithm(args.algorithm)
        .with_digits(args.digits)
        .with_time_step(args.period)
        .generate_secret_key(args.bits)
        .build()
    )
    totp = result.as_totp()
    print("[*] Secret (Base32, keep it private):", result.secret_base32)
    print(f"[*] Current TOTP: {totp.generate_otp()}  (valid ~{totp.remaining_seconds():2d}s)")
    print("[*] otpauth URI (import into authenticator apps):")
    print("    " + result.provisioning_uri(args.account, args.issuer))


def cmd_secret(args):
    result = TotpBuilder().generate_secret_key(args.bits).build()
    print(result.secret_base32)


def cmd_totp(args):
    totp = _engine(args)
    code = totp.generate_otp(args.at)
    print(f"TOTP: {code}  (valid ~{totp.remaining_seconds(args.at):2d}s)")


def cmd_hotp(args):
    totp = _engine(args)
    print(f"HOTP(counter={args.counter}): {totp.generate_otp_at_counter(args.counter)}")


def cmd_uri(args):
    totp = _engine(args)
    print(format_otpauth_uri(
        totp.secret_key, args.account, args.issuer,
        algorithm=totp.algorithm, digits=totp.digits, period=totp.time_step,
    ))


# --- Argparse builder ---
def _add_common(p: argparse.ArgumentParser, period: bool = True) -> None:
    p.add_argument("--algorithm", default=DEFAULT_ALGORITHM, help="SHA1, SHA256 or SHA512")
    p.add_argument("--digits", type=int, default=DEFAULT_DIGITS, help="Number of OTP digits (6 or 8)")
    if period:
        p.add_argument("--period", type=int, default=DEFAULT_TIME_STEP, help="TOTP time step (30 or 60 seconds)")
    p.add_argument("--verbose", action="store_true", help="Verbose output")


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="hotpot", description="TOTP/HOTP generator (RFC 6238 / RFC 4226).")
    sub = p.add_subparsers(dest="cmd")
    p.set_defaults(func=None, verbose=False)

    # init
    pi = sub.add_parser("init", help="Generate a secret; print it with the current TOTP and otpauth URI")
    pi.add_argument("--account", default="user@example", help="Account label for otpauth URI")
    pi.add_argument("--issuer", default="hotpot", help="Issuer label for otpauth URI")
    pi.add_argument("--bits", type=int, default=DEFAULT_KEY_BITS, help="Secret length in bits")
    _add_common(pi)
    pi.set_defaults(func=cmd_init)

    # secret
    ps = sub.add_parser("secret", help="Print a new random Base32 secret")
    ps.add_argument("--bits", type=int, default=DEFAULT_KEY_BITS, help="Secret length in bits")
    ps.add_argument("--verbose", action="store_true", help="Verbose output")
    ps.set_defaults(func=cmd_secret)

    # totp
    pt = sub.add_parser("totp", help="Print the TOTP code for a secret")
    pt.add_argument("--secret", required=True, help="Base32 secret")
    pt.add_argument("--at", type=int, default=None, help="Unix time to use instead of now")
    _add_common(pt)
    pt.set_defaults(func=cmd_totp)

    # hotp
    ph = sub.add_parser("hotp", help="Print the HOTP code for a specific counter")
    ph.add_argument("--secret", required=True, help="Base32 secret")
    ph.add_argument("--counter", type=int, required=True)
    _add_common(ph, period=False)
    ph.set_defaults(func=cmd_hotp)

    # uri
    pu = sub.add_parser("uri", help="Print the otpauth URI for a secret")
    pu.add_argument("--secret", required=True, help="Base32 secret")
    pu.add_argument("--account", default="user@example")
    pu.add_argument("--issuer", default="hotpot")
    _add_common(pu)
    pu.set_defaults(func=cmd_uri)

    return p


def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="[+] %(message)s")
    if args.func is None:
        parser.print_help()
        return 0
    try:
        args.func(args)
    except HotpotError as e:
        print(f"[!] {e}", file=sys.stderr)
        return 2
    return 0


if __name__ == "__main__":
    sys.exit(main())
