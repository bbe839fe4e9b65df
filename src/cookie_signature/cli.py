"""Command-line helpers for producing and checking signed cookie values."""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys
from collections.abc import Sequence

from cookie_signature.application.accessors import encode_signed_value
from cookie_signature.application.verify_cookies import verify_cookie
from cookie_signature.config.settings import CookieSignatureSettings
from cookie_signature.observability.logging import configure_logging

logger = logging.getLogger("cookie_signature.cli")


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="cookie-signature",
        description="Sign or verify cookie values with COOKIE_SIGNATURE_SECRET.",
    )
    commands = parser.add_subparsers(dest="command", required=True)

    sign_parser = commands.add_parser("sign", help="Print the signed wire value for --value.")
    sign_parser.add_argument("--value", required=True, help="Plaintext cookie value.")

    verify_parser = commands.add_parser("verify", help="Verify a raw signed cookie value.")
    verify_parser.add_argument("--cookie", required=True, help="Raw '<value>.<signature>' string.")
    verify_parser.add_argument("--name", default="cookie", help="Cookie name used in messages.")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    args = _build_parser().parse_args(list(argv) if argv is not None else None)
    settings = CookieSignatureSettings.load()
    configure_logging(root_default=settings.log_level)
    key = settings.secret_key()

    if args.command == "sign":
        raw_value, _ = asyncio.run(encode_signed_value(key, args.value))
        print(raw_value)
        return 0

    check = asyncio.run(verify_cookie(args.name, args.cookie, key))
    if check.value is None:
        logger.info("cookie_rejected", extra={"data": {"cookie": args.name, "state": check.state.value}})
        print(check.message, file=sys.stderr)
        return 1
    print(check.value)
    return 0


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
