"""
Account registration and login.
"""

import sqlite3

from passlib.context import CryptContext

from api.models.responses import ErrorCodes
from core.config import PASSWORD_SCHEMES
from core.database import create_user, get_user_by_email

pwd_context = CryptContext(schemes=PASSWORD_SCHEMES, deprecated="auto")


class AccountError(Exception):
    """Registration or login refused. `code` is one of ErrorCodes."""

    def __init__(self, message: str, code: str):
        super().__init__(message)
        self.code = code


def normalize_email(email: str) -> str:
    return email.strip().lower()


def register_user(conn: sqlite3.Connection, email: str, password: str) -> int:
    """Create an account and return the new user id."""
    email = normalize_email(email)
    if get_user_by_email(conn, email):
        raise AccountError("Email already registered", ErrorCodes.USER_EXISTS)

    try:
        return create_user(conn, email, pwd_context.hash(password))
    except sqlite3.IntegrityError as e:
        # Lost a race with a concurrent registration
        raise AccountError("Email already registered", ErrorCodes.USER_EXISTS) from e


def authenticate_user(conn: sqlite3.Connection, email: str, password: str) -> int:
    """Check credentials and return the user id."""
    user = get_user_by_email(conn, normalize_email(email))
    if not user:
        raise AccountError("User not found", ErrorCodes.USER_NOT_FOUND)
    if not pwd_context.verify(password, user["password"]):
        raise AccountError("Incorrect password", ErrorCodes.INVALID_PASSWORD)
    return user["id"]
