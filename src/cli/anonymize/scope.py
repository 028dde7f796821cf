"""Which sites a run touches."""

from typing import List, Optional

from cms.core.sites import Site
from cli.core.exceptions import ConfigurationError


def target_sites(session, site_id: Optional[int] = None) -> List[Site]:
    """
    Sites of a multi-site run: the selected one, or all of them.

    Raises:
        ConfigurationError: The selected site does not exist
    """
    if site_id is None:
        return Site.get_all(session)

    site = Site.get_by_id(session, site_id)
    if site is None:
        raise ConfigurationError('Site not found.')
    return [site]
