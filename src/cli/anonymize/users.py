"""
Rewriting of user profiles.

Each user gets a complete fake profile (name, login, email, password, URL,
registration date, description, contact methods, custom fields). Only the
fields the user actually has are written.
"""

import logging
from typing import Dict, List

from rich.progress import track

from cms.formatting import sanitize_title
from cms.hooks import PRE_UPDATE_USER, POST_UPDATE_USER
from cms.manage.users import update_user, update_user_login
from cms.queries.users import get_users
from cli.anonymize.logins import generate_unused_user_login
from cli.anonymize.scope import target_sites

logger = logging.getLogger(__name__)


def is_empty(value) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


def gather_users(ctx, config) -> List:
    """
    Users to rewrite, excluded ids left out.

    On a multi-site install users are listed per site (the selected one or
    all of them); a member of several sites is returned once.
    """
    exclude = config.excluded_user_ids

    if not ctx.multisite:
        return get_users(ctx.session, exclude=exclude)

    users = []
    seen = set()
    for site in target_sites(ctx.session, config.site_id):
        for user in get_users(ctx.session, site_id=site.blog_id, exclude=exclude):
            if user.user_id in seen:
                continue
            seen.add(user.user_id)
            users.append(user)
    return users


def fake_email(config, generator, user_login: str) -> str:
    if config.custom_email_domains:
        domain = generator.shuffle(config.custom_email_domains)[0]
        # A bare name like 'example' gets a random top-level domain
        if '.' not in domain[1:]:
            domain = f"{domain}.{generator.tld()}"
        return f"{user_login}@{domain}"
    return f"{user_login}@{generator.safe_domain_name()}"


def fake_user_profile_data(ctx, config, generator) -> Dict[str, str]:
    """Generate a complete replacement profile for one user."""
    first_name = generator.first_name()
    last_name = generator.last_name()
    display_name = f"{first_name} {last_name}"

    user_login = sanitize_title(f"{last_name} {first_name}").replace('-', '.').lower()
    user_login = generate_unused_user_login(ctx.session, generator, user_login)
    user_nicename = sanitize_title(user_login)
    user_email = fake_email(config, generator, user_login)

    profile_fields = {
        # Fields from the users table
        'user_pass': generator.password(),
        'user_nicename': user_nicename,
        'user_email': user_email,
        'user_url': generator.url(),
        'display_name': display_name,
        'user_login': user_login,
        'user_registered': generator.registration_date(),

        # Fields from the usermeta table
        'nickname': user_login,
        'first_name': first_name,
        'last_name': last_name,
        'description': generator.real_text_between(100, 200),
    }

    for method_key, method_label in ctx.contact_methods.items():
        label = sanitize_title(method_label).replace('-', '.')
        profile_fields[method_key] = f"{user_login}.{label}"

    for field_name, method_name in config.custom_fields.items():
        if method_name:
            profile_fields[field_name] = generator.generate_by_method_name(method_name)
        else:
            profile_fields[field_name] = generator.default_custom_field()

    return profile_fields


def select_fields(user, new_data: Dict, ignore_empty_fields: bool) -> Dict:
    """
    Keep the fields to write: properties the user has, minus, with
    ignore_empty_fields, those that are currently empty.
    """
    fields = {}
    for key, value in new_data.items():
        if not user.has_prop(key):
            continue
        if ignore_empty_fields and is_empty(user.get(key)):
            continue
        fields[key] = value
    return fields


def obfuscate_user(ctx, config, generator, user) -> Dict:
    """
    Replace one user's personal data.

    Returns:
        dict: The fields written
    """
    new_data = fake_user_profile_data(ctx, config, generator)
    fields = select_fields(user, new_data, config.ignore_empty_fields)

    ctx.hooks.fire(PRE_UPDATE_USER, user, fields, generator)
    update_user(ctx.session, user, fields)

    # The profile update never renames accounts
    if 'user_login' in fields:
        update_user_login(ctx.session, user.user_id, fields['user_login'])

    ctx.hooks.fire(POST_UPDATE_USER, user, fields, generator)
    return fields


def obfuscate_users(ctx, config, generator) -> int:
    """
    Loop over all the users found and replace their personal data.

    With a seed, user number i (from 0) is generated with seed + i.

    Returns:
        int: Number of users updated
    """
    users = gather_users(ctx, config)
    if not users:
        ctx.warning('No users changed (did you exclude them all?)')
        return 0

    count = len(users)
    logger.debug(f"Rewriting {count} users")

    for index, user in enumerate(track(users, description='Rewriting users...', console=ctx.console)):
        if config.seed is not None:
            generator.seed(config.seed + index)
        obfuscate_user(ctx, config, generator, user)

    return count
