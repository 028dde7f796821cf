"""
CMS write functions.

Each function commits its own change through management_transaction().
"""

from .transaction import management_transaction
from .users import hash_password, update_user, update_user_login
from .comments import update_comment

__all__ = [
    'management_transaction',
    'hash_password',
    'update_user',
    'update_user_login',
    'update_comment',
]
