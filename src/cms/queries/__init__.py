"""
CMS Query Helpers

Usage:
    from cms.queries import get_users, gather_comments

Modules:
    users: User listing and lookups
    comments: Site-scoped comment listing
"""

from .users import get_users, find_user_id_by
from .comments import get_comments, gather_comments

__all__ = [
    'get_users',
    'find_user_id_by',
    'get_comments',
    'gather_comments',
]
