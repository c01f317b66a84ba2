"""Operator entrypoint for hashing and checking credential records."""

from __future__ import annotations

import argparse
import getpass
import logging
import sys
from collections.abc import Sequence

from salesboard_auth.application.ports.password_hasher_port import DerivationError
from salesboard_auth.config.settings import load_settings
from salesboard_auth.domain.auth.credential_record import MalformedRecordError
from salesboard_auth.infrastructure.logging import configure_logging
from salesboard_auth.infrastructure.security.password_hasher import build_password_hasher

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_MISMATCH = 1
EXIT_MALFORMED_RECORD = 2
EXIT_DERIVATION_FAILED = 3


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for the `hash` and `verify` subcommands."""

    parser = argparse.ArgumentParser(
        prog="salesboard-credentials",
        description="Hash passwords and check them against stored credential records.",
    )
    subcommands = parser.add_subparsers(dest="command", required=True)

    hash_parser = subcommands.add_parser("hash", help="print a new credential record")
    hash_parser.add_argument("password", nargs="?", help="plaintext; prompted when omitted")

    verify_parser = subcommands.add_parser("verify", help="check a password against a record")
    verify_parser.add_argument("record", help="stored `<digest>.<salt>` record")
    verify_parser.add_argument("password", nargs="?", help="plaintext; prompted when omitted")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run one CLI command and return its process exit code."""

    args = build_parser().parse_args(argv)
    settings = load_settings()
    configure_logging(level=settings.log_level)
    hasher = build_password_hasher(settings)

    password = args.password if args.password is not None else getpass.getpass("Password: ")

    try:
        if args.command == "hash":
            print(hasher.hash_password(password))
            return EXIT_OK

        matched = hasher.verify_password(password=password, password_hash=args.record)
    except MalformedRecordError as exc:
        logger.error("credential_record_malformed reason=%s", exc.reason)
        return EXIT_MALFORMED_RECORD
    except DerivationError:
        logger.exception("credential_derivation_failed command=%s", args.command)
        return EXIT_DERIVATION_FAILED

    print("match" if matched else "mismatch")
    return EXIT_OK if matched else EXIT_MISMATCH


if __name__ == "__main__":
    sys.exit(main())
