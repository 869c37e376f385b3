"""
Register a portal account from the command line (same policy as the API). Run from project root:
  python -m portal.scripts.create_account {student|faculty} EMAIL PASSWORD USERNAME [--representative]
Example:
  python -m portal.scripts.create_account faculty dean@rguktsklm.ac.in 'a-long-password' 'Dr. Rao'
"""
import argparse
import logging
import sys

from portal.core.config import get_settings
from portal.core.database import SessionLocal
from portal.services.credential_store import CredentialStore
from portal.services.errors import AccountError
from portal.services.registration import register
from portal.services.variants import VARIANTS, get_variant


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Create a student or faculty portal account.")
    parser.add_argument("variant", choices=sorted(VARIANTS), help="Account type")
    parser.add_argument("email", help="Institutional email address")
    parser.add_argument("password", help="Password (at least PASSWORD_MIN_LENGTH chars)")
    parser.add_argument("user_name", help="Display name")
    parser.add_argument(
        "--representative",
        action="store_true",
        help="Flag a student account as class representative",
    )
    return parser


def main(argv: list[str] | None = None, session_factory=SessionLocal) -> int:
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%SZ",
    )
    args = build_parser().parse_args(argv)
    variant = get_variant(args.variant)
    if args.representative and variant.name != "student":
        print("--representative applies to student accounts only.", file=sys.stderr)
        return 2

    db = session_factory()
    try:
        message = register(
            CredentialStore(db),
            variant,
            get_settings(),
            email=args.email.strip(),
            password=args.password,
            user_name=args.user_name.strip(),
            is_representative=args.representative,
        )
    except AccountError as e:
        print(e.message, file=sys.stderr)
        return 1
    finally:
        db.close()
    print(message)
    return 0


if __name__ == "__main__":
    sys.exit(main())
