"""Run configuration for 'anonymize users'."""

import logging
from dataclasses import dataclass, field
from typing import Dict, FrozenSet, Mapping, Optional, Tuple

from cms.core.users import User
from cli.anonymize.generator import DEFAULT_LOCALE
from cli.anonymize.keep import resolve_excluded_user_ids
from cli.core.exceptions import ConfigurationError
from cli.core.utils import split_csv

logger = logging.getLogger(__name__)

CUSTOM_FIELD_SEPARATOR = '::'

# Profile fields the anonymizer always generates itself
RESERVED_CUSTOM_FIELDS = User.PROFILE_COLUMNS + ('nickname', 'first_name', 'last_name', 'description')


@dataclass(frozen=True)
class RunConfiguration:
    """Options of one anonymization run; built once, never modified."""
    excluded_user_ids: FrozenSet[int] = frozenset()
    skip_not_found_users: bool = False
    site_id: Optional[int] = None
    ignore_empty_fields: bool = False
    locale: str = DEFAULT_LOCALE
    seed: Optional[int] = None
    custom_email_domains: Tuple[str, ...] = ()
    # field name -> generator method name (None = default text)
    custom_fields: Dict[str, Optional[str]] = field(default_factory=dict)

    @property
    def generator_methods(self):
        return [method for method in self.custom_fields.values() if method]


def parse_site(value, multisite: bool) -> Optional[int]:
    """Validate --site against the deployment; None when not given."""
    if value is None or value == '':
        return None
    if not multisite:
        raise ConfigurationError('site parameter only valid on multi-site installs.')
    try:
        return int(str(value).strip())
    except ValueError:
        raise ConfigurationError('site must be a number') from None


def parse_seed(value) -> Optional[int]:
    if value is None or value == '':
        return None
    try:
        return int(str(value).strip())
    except ValueError:
        raise ConfigurationError('seed must be a number') from None


def parse_custom_fields(value) -> Dict[str, Optional[str]]:
    """
    Parse 'name' / 'name::method' tokens into an ordered mapping.

    Example:
        >>> parse_custom_fields('user_phone::phone_number,user_company')
        {'user_phone': 'phone_number', 'user_company': None}
    """
    custom_fields = {}
    for token in split_csv(value):
        name, _, method = token.partition(CUSTOM_FIELD_SEPARATOR)
        name = name.strip()
        if not name:
            raise ConfigurationError(f"custom field '{token}' has no field name")
        if name in RESERVED_CUSTOM_FIELDS:
            raise ConfigurationError(f"custom field '{name}' is a profile field and cannot be customized")
        custom_fields[name] = method.strip() or None
    return custom_fields


def build_run_configuration(ctx, options: Mapping) -> RunConfiguration:
    """
    Validate raw command options into a RunConfiguration.

    Args:
        ctx: CLI Context (deployment settings, database session)
        options: Raw option values keyed by option name (keep, skip_not_found,
                 site, ignore_empty_fields, language, seed,
                 custom_email_domains, custom_fields)

    Returns:
        RunConfiguration

    Raises:
        ConfigurationError: Invalid --site, --seed or --custom-fields value
        ResolutionError: A --keep entry matches no user (without --skip-not-found)
    """
    skip_not_found = bool(options.get('skip_not_found'))

    # Cheap validation first: nothing is read from the database for a bad --site
    site_id = parse_site(options.get('site'), ctx.multisite)
    seed = parse_seed(options.get('seed'))
    custom_fields = parse_custom_fields(options.get('custom_fields'))

    excluded = resolve_excluded_user_ids(ctx, options.get('keep'), skip_not_found)

    config = RunConfiguration(
        excluded_user_ids=excluded,
        skip_not_found_users=skip_not_found,
        site_id=site_id,
        ignore_empty_fields=bool(options.get('ignore_empty_fields')),
        locale=options.get('language') or DEFAULT_LOCALE,
        seed=seed,
        custom_email_domains=tuple(split_csv(options.get('custom_email_domains'))),
        custom_fields=custom_fields,
    )
    logger.debug(f"Run configuration: {config}")
    return config
