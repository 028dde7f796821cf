"""The 'anonymize users' command handler."""

import logging
from dataclasses import dataclass, field
from typing import FrozenSet, Mapping, Optional

from cli.anonymize.comments import obfuscate_comments
from cli.anonymize.generator import FakeDataGenerator
from cli.anonymize.options import build_run_configuration
from cli.anonymize.users import obfuscate_users
from cli.core.registry import register_command

logger = logging.getLogger(__name__)

CONFIRM_MESSAGE = 'Rewrite all user data?'


@dataclass(frozen=True)
class AnonymizeSummary:
    """What a run rewrote."""
    users_updated: int = 0
    comments_updated: int = 0
    excluded_user_ids: FrozenSet[int] = field(default_factory=frozenset)
    site_id: Optional[int] = None

    def success_message(self) -> str:
        if self.excluded_user_ids:
            ids = ','.join(str(user_id) for user_id in sorted(self.excluded_user_ids))
            if self.site_id is not None:
                return f"All comments and users except: '{ids}' on site '{self.site_id}' rewritten."
            return f"All comments and users except: '{ids}' rewritten."
        if self.site_id is not None:
            return f"All comments and users on site '{self.site_id}' rewritten."
        return 'All comments and users rewritten.'


@register_command('anonymize users')
def anonymize_users(ctx, options: Mapping) -> AnonymizeSummary:
    """
    Rewrite personal information in user profiles and comments.

    Args:
        ctx: CLI Context with an open database session
        options: Raw option values (see build_run_configuration), plus
                 'args' (positional arguments, ignored) and 'yes'
                 (skip the confirmation prompt)

    Returns:
        AnonymizeSummary

    Raises:
        AnonymizerError: Any fatal condition; records already written stay written
        click.Abort: The confirmation prompt was declined (nothing written)
    """
    if options.get('args'):
        ctx.warning('unknown argument')

    config = build_run_configuration(ctx, options)
    generator = FakeDataGenerator(config.locale, config.seed)
    generator.validate_methods(config.generator_methods)

    ctx.confirm(CONFIRM_MESSAGE, assume_yes=bool(options.get('yes')))

    users_updated = obfuscate_users(ctx, config, generator)

    # The seed advanced once per user
    comment_seed = None if config.seed is None else config.seed + users_updated
    comments_updated = obfuscate_comments(ctx, config, generator, seed=comment_seed)

    logger.debug(f"Rewrote {users_updated} users and {comments_updated} comments")
    return AnonymizeSummary(
        users_updated=users_updated,
        comments_updated=comments_updated,
        excluded_user_ids=config.excluded_user_ids,
        site_id=config.site_id,
    )
