"""
Create an account from the command line. Run from project root:
  python -m lostfound.scripts.create_user USERNAME EMAIL PASSWORD
Example:
  python -m lostfound.scripts.create_user alice alice@example.com your-secure-password
"""
import argparse
import logging
import sys

from lostfound.core.config import get_settings
from lostfound.core.database import SessionLocal
from lostfound.services.auth import register_user
from lostfound.services.errors import ServiceError

logger = logging.getLogger(__name__)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Create a Lost & Found user account.")
    parser.add_argument("username", help="Username (1-255 chars)")
    parser.add_argument("email", help="Email address (unique)")
    parser.add_argument("password", help="Password (8-128 chars, at most 72 bytes UTF-8)")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%SZ",
    )

    db = SessionLocal()
    try:
        user = register_user(db, get_settings(), args.username, args.email, args.password)
    except ServiceError as e:
        print(e.message, file=sys.stderr)
        return 1
    finally:
        db.close()
    print(f"Created user '{user.username}' (id={user.id}).")
    return 0


if __name__ == "__main__":
    sys.exit(main())
