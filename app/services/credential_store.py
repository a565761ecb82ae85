"""User persistence: create, look up by username, reset password, seed the admin."""

import logging

from app.core.database import Database
from app.models import User

logger = logging.getLogger(__name__)

ADMIN_USERNAME = "admin"
ADMIN_ROLE = "admin"


class CredentialStore:
    """
    Repository for User rows.

    Usernames are the lookup key but are not unique; find_by_username returns
    the oldest match and update_password touches every match.
    """

    def __init__(self, db: Database) -> None:
        self._db = db

    def create(self, username: str, password_hash: str, role: str = "user") -> User:
        """Insert a user and return it with its assigned id."""
        with self._db.session() as db:
            user = User(username=username, password_hash=password_hash, role=role)
            db.add(user)
            db.flush()
        logger.info("Created user id=%s username=%s role=%s", user.id, username, role)
        return user

    def find_by_username(self, username: str) -> User | None:
        with self._db.session() as db:
            return (
                db.query(User)
                .filter(User.username == username)
                .order_by(User.id)
                .first()
            )

    def update_password(self, username: str, new_hash: str) -> int:
        """Replace the password hash of every user with this username; return rows updated."""
        with self._db.session() as db:
            updated = (
                db.query(User)
                .filter(User.username == username)
                .update({User.password_hash: new_hash}, synchronize_session=False)
            )
        if updated == 0:
            logger.warning("Password reset matched no user: username=%s", username)
        elif updated > 1:
            logger.warning(
                "Password reset updated %s users sharing username=%s", updated, username
            )
        return updated

    def seed_admin(self, password_hash: str) -> User | None:
        """
        Create the bootstrap 'admin' account unless one already exists.

        Returns the new user, or None when an admin row was already present.
        """
        if self.find_by_username(ADMIN_USERNAME) is not None:
            return None
        user = self.create(ADMIN_USERNAME, password_hash, role=ADMIN_ROLE)
        logger.warning(
            "Seeded bootstrap user '%s' with the configured default password; "
            "reset it via POST /reset-password",
            ADMIN_USERNAME,
        )
        return user
