"""
Create a user in a file-backed database. Run from project root:
  python -m app.scripts.create_user USERNAME PASSWORD [role]
Example:
  DATABASE_URL=sqlite:///./catalog.db python -m app.scripts.create_user alice s3cret admin
"""
import argparse
import logging
import sys

from app.core.config import get_settings
from app.core.database import Database, StoreError
from app.core.security import USERNAME_MAX_LEN, hash_password
from app.services.credential_store import CredentialStore

logger = logging.getLogger(__name__)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Create a Catalog API user.")
    parser.add_argument("username", help="Username (1-255 chars)")
    parser.add_argument("password", help="Password")
    parser.add_argument("role", nargs="?", default="user")
    args = parser.parse_args(argv)

    username = args.username.strip()
    if not username or len(username) > USERNAME_MAX_LEN:
        print("Invalid username length.", file=sys.stderr)
        return 1
    if not args.password:
        print("Password must be non-empty.", file=sys.stderr)
        return 1

    settings = get_settings()
    db = Database(settings.DATABASE_URL)
    try:
        db.create_all()
        store = CredentialStore(db)
        if store.find_by_username(username) is not None:
            print(
                f"Note: username '{username}' already exists; adding another account.",
                file=sys.stderr,
            )
        store.create(
            username,
            hash_password(args.password, rounds=settings.BCRYPT_ROUNDS),
            role=args.role,
        )
    except StoreError as e:
        logger.error("Could not create user: %s", e.message)
        print(f"Could not create user: {e.message}", file=sys.stderr)
        return 1
    finally:
        db.dispose()
    print(f"Created user '{username}' with role '{args.role}'.")
    return 0


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s %(message)s")
    sys.exit(main())
