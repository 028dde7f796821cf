"""
User write functions.

update_user() is the regular profile update path. Like the CMS it stands in
for, it never renames an account: user_login is skipped even when present in
the fields. update_user_login() writes the login straight to the users table.
"""

import hashlib
import logging
import os
from typing import Dict, Any

from sqlalchemy import update
from sqlalchemy.orm import Session

from cms.base import parse_datetime
from cms.core.users import User
from cms.manage.transaction import management_transaction


__all__ = [
    'hash_password',
    'update_user',
    'update_user_login',
]

logger = logging.getLogger(__name__)

PBKDF2_ITERATIONS = 100_000

# Columns the profile update path does not touch
IMMUTABLE_COLUMNS = ('user_login',)


def hash_password(password: str) -> str:
    """Salted PBKDF2-SHA256 hash, stored as $pbkdf2-sha256$<iterations>$<salt>$<digest>."""
    salt = os.urandom(16)
    digest = hashlib.pbkdf2_hmac('sha256', password.encode('utf-8'), salt, PBKDF2_ITERATIONS)
    return f"$pbkdf2-sha256${PBKDF2_ITERATIONS}${salt.hex()}${digest.hex()}"


def update_user(session: Session, user: User, fields: Dict[str, Any]) -> User:
    """
    Write profile fields to a user and commit.

    Column names update the users table, every other key is stored as user
    metadata. 'user_pass' is hashed before it is stored, 'user_registered'
    accepts text in DATETIME_FORMAT.

    Args:
        session: SQLAlchemy session
        user: User to update
        fields: Mapping of column or metadata key to new value

    Returns:
        User: The updated user
    """
    with management_transaction(session):
        for key, value in fields.items():
            if key in IMMUTABLE_COLUMNS:
                continue
            if key == 'user_pass':
                user.user_pass = hash_password(value)
            elif key == 'user_registered':
                user.user_registered = parse_datetime(value)
            elif key in User.PROFILE_COLUMNS:
                setattr(user, key, value)
            else:
                user.set_meta(key, value)

    logger.debug(f"Updated user {user.user_id} ({len(fields)} fields)")
    return user


def update_user_login(session: Session, user_id: int, new_login: str) -> None:
    """
    Rename an account directly on the users table.

    Args:
        session: SQLAlchemy session
        user_id: Account to rename
        new_login: New login name (caller guarantees it is unused)
    """
    with management_transaction(session):
        session.execute(
            update(User.__table__)
            .where(User.__table__.c.ID == user_id)
            .values(user_login=new_login)
        )

    # The core UPDATE bypassed the ORM; drop any loaded copy of the row
    user = session.get(User, user_id)
    if user is not None:
        session.expire(user, ['user_login'])
    logger.debug(f"Set login of user {user_id} to {new_login}")
