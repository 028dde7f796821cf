"""
Comment write functions.
"""

import logging
from typing import Dict, Any

from sqlalchemy.orm import Session

from cms.core.comments import Comment
from cms.manage.transaction import management_transaction


__all__ = [
    'update_comment',
]

logger = logging.getLogger(__name__)


def update_comment(session: Session, comment: Comment, fields: Dict[str, Any]) -> Comment:
    """
    Write fields to a comment and commit.

    Keys that are not comment columns, and the primary key, are ignored.

    Args:
        session: SQLAlchemy session
        comment: Comment to update
        fields: Mapping of column name to new value

    Returns:
        Comment: The updated comment
    """
    columns = {attr.key for attr in Comment.__mapper__.column_attrs}

    with management_transaction(session):
        for key, value in fields.items():
            if key in columns and key != 'comment_ID':
                setattr(comment, key, value)

    logger.debug(f"Updated comment {comment.comment_ID}")
    return comment
