"""ORM model for application users (auth and role)."""

from sqlalchemy import Column, Integer, String

from app.models.base import Base


class User(Base):
    """
    User account for JWT authentication.

    username is indexed but not unique: duplicate registrations are accepted.
    role: free-form string, 'admin' or 'user' in practice
    """

    __tablename__ = "users"

    id = Column(Integer, primary_key=True, autoincrement=True)
    username = Column(String(255), nullable=False, index=True)
    password_hash = Column(String(255), nullable=False)
    role = Column(String(32), nullable=False, default="user", server_default="user")
