"""
CMS Models Package

Import order matters! Follow dependency chain:
1. Base classes (no dependencies)
2. Sites
3. Users (membership depends on sites)
4. Comments (depends on sites)
"""

# 1. Base classes first
from .base import Base, DATETIME_FORMAT, SessionMixin, parse_datetime

# 2. Sites
from .core.sites import Site, SiteUser

# 3. Users
from .core.users import User, UserMeta

# 4. Comments
from .core.comments import Comment

__all__ = [
    'Base', 'DATETIME_FORMAT', 'SessionMixin', 'parse_datetime',
    'Site', 'SiteUser',
    'User', 'UserMeta',
    'Comment',
]
