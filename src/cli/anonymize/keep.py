"""Resolution of --keep entries to user ids."""

import logging
from typing import FrozenSet, Optional

from cms.queries.users import find_user_id_by
from cli.core.exceptions import ResolutionError
from cli.core.utils import split_csv

logger = logging.getLogger(__name__)


def _not_found(ctx, message: str, skip_not_found: bool) -> None:
    if not skip_not_found:
        raise ResolutionError(message)
    ctx.warning(message)


def resolve_keep_token(ctx, token: str, skip_not_found: bool = False) -> Optional[int]:
    """
    Map one --keep entry to a user id.

    A decimal number is a user id, an entry with '@' is looked up by email,
    anything else by login. All three must match an existing user.

    Returns:
        The user id, or None when the user was not found and skip_not_found is set

    Raises:
        ResolutionError: User not found and skip_not_found is not set
    """
    token = token.strip()
    if token.isdigit():
        user_id = find_user_id_by(ctx.session, 'id', int(token))
        if user_id is None:
            _not_found(ctx, f"user id not found: {token}", skip_not_found)
        return user_id

    if '@' in token:
        user_id = find_user_id_by(ctx.session, 'email', token)
        if user_id is None:
            _not_found(ctx, f"user email not found: {token}", skip_not_found)
        return user_id

    user_id = find_user_id_by(ctx.session, 'login', token)
    if user_id is None:
        _not_found(ctx, f"username to keep not found: {token}", skip_not_found)
    return user_id


def resolve_excluded_user_ids(ctx, keep, skip_not_found: bool = False) -> FrozenSet[int]:
    """Resolve a comma-separated --keep value; unresolved entries are dropped."""
    excluded = set()
    for token in split_csv(keep):
        user_id = resolve_keep_token(ctx, token, skip_not_found)
        if user_id is not None:
            excluded.add(user_id)

    if excluded:
        logger.debug(f"Keeping users: {sorted(excluded)}")
    return frozenset(excluded)
