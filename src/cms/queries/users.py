"""
User query functions for CMS database.

Functions:
    get_users: Users of the installation or of one site, minus exclusions
    find_user_id_by: Resolve an id, login or email to an existing user id
"""

from typing import Iterable, List, Optional

from sqlalchemy.orm import Session

from cms.core.sites import SiteUser
from cms.core.users import User


# Searchable columns for find_user_id_by()
USER_SEARCH_FIELDS = {
    'id': User.user_id,
    'login': User.user_login,
    'email': User.user_email,
}


def get_users(session: Session, site_id: Optional[int] = None,
              exclude: Iterable[int] = ()) -> List[User]:
    """
    List users in id order.

    Args:
        session: SQLAlchemy session
        site_id: Only members of this site (None = every user)
        exclude: User ids to leave out; they are never loaded

    Returns:
        List of User objects
    """
    query = session.query(User)

    if site_id is not None:
        query = query.join(SiteUser, SiteUser.user_id == User.user_id)\
            .filter(SiteUser.blog_id == site_id)

    exclude = list(exclude)
    if exclude:
        query = query.filter(User.user_id.notin_(exclude))

    return query.order_by(User.user_id).all()


def find_user_id_by(session: Session, field: str, value: str) -> Optional[int]:
    """
    Look a user up directly on the users table.

    Args:
        session: SQLAlchemy session
        field: 'id', 'login' or 'email'
        value: Exact value to match

    Returns:
        User id if found, None otherwise

    Raises:
        ValueError: If field is not searchable
    """
    column = USER_SEARCH_FIELDS.get(field)
    if column is None:
        raise ValueError(f"Unrecognized user search field: {field}")

    row = session.query(User.user_id).filter(column == value).first()
    return row.user_id if row else None
