"""
Rewriting of comment author data.

Comments are never filtered by author: every comment of the targeted
site(s), including trashed and spam ones, gets a new author name, email,
URL, IP address and user agent.
"""

import logging
from contextlib import nullcontext
from typing import Dict, List, Optional, Tuple

from rich.progress import Progress

from cms.context import switch_to_site
from cms.hooks import PRE_UPDATE_COMMENT, POST_UPDATE_COMMENT
from cms.manage.comments import update_comment
from cms.queries.comments import gather_comments
from cli.anonymize.scope import target_sites

logger = logging.getLogger(__name__)


def gather_all_comments(ctx, config) -> List[Tuple[Optional[int], List]]:
    """
    Comments per site, as (site_id, comments) pairs.

    A single-site install yields one pair with site_id None.
    """
    if not ctx.multisite:
        return [(None, gather_comments(ctx.session))]

    all_comments = []
    for site in target_sites(ctx.session, config.site_id):
        with switch_to_site(site.blog_id):
            all_comments.append((site.blog_id, gather_comments(ctx.session)))
    return all_comments


def fake_comment_data(generator) -> Dict[str, str]:
    return {
        'comment_author': generator.name(),
        'comment_author_email': generator.safe_email(),
        'comment_author_url': generator.url(),
        'comment_author_IP': generator.ipv4(),
        'comment_agent': generator.user_agent(),
    }


def obfuscate_comment(ctx, generator, comment) -> Dict:
    fields = fake_comment_data(generator)
    ctx.hooks.fire(PRE_UPDATE_COMMENT, comment, fields, generator)
    update_comment(ctx.session, comment, fields)
    ctx.hooks.fire(POST_UPDATE_COMMENT, comment, fields, generator)
    return fields


def obfuscate_comments(ctx, config, generator, seed: Optional[int] = None) -> int:
    """
    Rewrite the personal data found in comments.

    Args:
        ctx: CLI Context
        config: RunConfiguration
        generator: FakeDataGenerator
        seed: Re-seed the generator once before the first comment

    Returns:
        int: Number of comments updated
    """
    if seed is not None:
        generator.seed(seed)

    all_comments = gather_all_comments(ctx, config)
    count = sum(len(comments) for _, comments in all_comments)
    logger.debug(f"Rewriting {count} comments on {len(all_comments)} site(s)")

    with Progress(console=ctx.console, transient=False) as progress:
        task = progress.add_task('Rewriting comments...', total=count)
        for site_id, comments in all_comments:
            # Single-site installs keep whatever scope is current
            scope = switch_to_site(site_id) if site_id is not None else nullcontext()
            with scope:
                for comment in comments:
                    obfuscate_comment(ctx, generator, comment)
                    progress.advance(task)

    return count
