"""
Comment query functions for CMS database.

All functions read the comments of the current site (see cms.context);
outside any site switch they read every comment.
"""

from typing import List, Optional, Sequence

from sqlalchemy.orm import Session

from cms.context import get_current_site_id
from cms.core.comments import Comment


def get_comments(session: Session, statuses: Optional[Sequence[str]] = None) -> List[Comment]:
    """
    List comments of the current site in id order.

    Args:
        session: SQLAlchemy session
        statuses: comment_approved values to include
                  (default: Comment.REGULAR_STATUSES, i.e. approved and held)

    Returns:
        List of Comment objects
    """
    if statuses is None:
        statuses = Comment.REGULAR_STATUSES

    query = session.query(Comment).filter(Comment.comment_approved.in_(list(statuses)))

    site_id = get_current_site_id()
    if site_id is not None:
        query = query.filter(Comment.blog_id == site_id)

    return query.order_by(Comment.comment_ID).all()


def gather_comments(session: Session) -> List[Comment]:
    """Regular, then trashed, then spam comments of the current site."""
    regular = get_comments(session)
    trash = get_comments(session, [Comment.TRASH])
    spam = get_comments(session, [Comment.SPAM])
    return regular + trash + spam
