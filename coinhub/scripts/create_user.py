"""
Create a user (e.g. an extra admin). Run from project root:
  python -m coinhub.scripts.create_user USERNAME EMAIL PASSWORD [role] [--coins N]
Example:
  python -m coinhub.scripts.create_user alice alice@example.com your-secure-password admin
"""
import argparse
import logging
import sys

from coinhub.core.config import get_settings
from coinhub.core.database import SessionLocal
from coinhub.core.logging import configure_logging
from coinhub.core.security import EMAIL_MAX_LEN, PASSWORD_MAX_LEN, USERNAME_MAX_LEN
from coinhub.models.user import ROLES
from coinhub.services.accounts import DuplicateUserError, create_user

logger = logging.getLogger(__name__)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Create a coinhub user.")
    parser.add_argument("username", help=f"Username (1-{USERNAME_MAX_LEN} chars)")
    parser.add_argument("email", help="Email address")
    parser.add_argument("password", help=f"Password (1-{PASSWORD_MAX_LEN} chars)")
    parser.add_argument("role", nargs="?", default="user", choices=ROLES)
    parser.add_argument(
        "--coins",
        type=int,
        default=None,
        help="Starting balance (default: DEFAULT_COINS, or ADMIN_COINS for admins)",
    )
    args = parser.parse_args(argv)
    configure_logging()
    settings = get_settings()

    username = args.username.strip()
    email = args.email.strip()
    if not username or len(username) > USERNAME_MAX_LEN:
        print("Invalid username length.", file=sys.stderr)
        return 1
    if "@" not in email or len(email) > EMAIL_MAX_LEN:
        print("Invalid email address.", file=sys.stderr)
        return 1
    if not args.password or len(args.password) > PASSWORD_MAX_LEN:
        print(f"Password must be 1-{PASSWORD_MAX_LEN} characters.", file=sys.stderr)
        return 1
    coins = args.coins
    if coins is None:
        coins = settings.ADMIN_COINS if args.role == "admin" else settings.DEFAULT_COINS
    if coins < 0:
        print("Coins must not be negative.", file=sys.stderr)
        return 1

    db = SessionLocal()
    try:
        user = create_user(db, username, email, args.password, coins=coins, role=args.role)
    except DuplicateUserError as e:
        print(f"{e.message}.", file=sys.stderr)
        return 1
    finally:
        db.close()
    logger.info("Created user '%s' (%s) with role '%s'.", user.username, user.user_id, user.role)
    print(f"Created user '{user.username}' with role '{user.role}' and {user.coins} coins.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
