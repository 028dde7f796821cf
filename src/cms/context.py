"""
Current-site state for multi-site installations.

Site-scoped queries (comments) read the site that is "current" for the whole
process. Only one site is current at a time; switch_to_site() makes one
current for the duration of a block and restores the previous one afterwards.
"""
from contextlib import contextmanager
from typing import Optional
import logging

logger = logging.getLogger(__name__)

_current_site_id: Optional[int] = None


def get_current_site_id() -> Optional[int]:
    """Site id in effect, or None when no site has been switched to."""
    return _current_site_id


@contextmanager
def switch_to_site(site_id: Optional[int]):
    """
    Context manager making site_id the current site.

    Usage:
        with switch_to_site(3):
            comments = gather_comments(session)
        # previous site restored, also when the block raised

    Args:
        site_id: Site to switch to (None leaves the single-site scope)

    Yields:
        int: The site id now in effect
    """
    global _current_site_id
    previous = _current_site_id
    _current_site_id = site_id
    logger.debug(f"Switched to site {site_id} (previous: {previous})")
    try:
        yield site_id
    finally:
        _current_site_id = previous
        logger.debug(f"Restored site {previous}")
