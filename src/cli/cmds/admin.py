#!/usr/bin/env python3
"""
CMS Admin CLI - Administrative commands.

    cms-admin anonymize users [OPTIONS]
"""

import sys
import click
from sqlalchemy.exc import SQLAlchemyError

from cli.core.base import handle_exception, open_session
from cli.core.config import CmsConfig
from cli.core.context import Context
from cli.core.exceptions import AnonymizerError
from cli.core.logging_utils import setup_logging
from cli.core.registry import get_command
# Importing the package registers the 'anonymize users' handler
from cli.anonymize.display import display_summary


pass_context = click.make_pass_decorator(Context, ensure=True)
CONTEXT_SETTINGS = dict(help_option_names=['-h', '--help'])


@click.group(context_settings=CONTEXT_SETTINGS)
@click.option('--verbose', '-v', is_flag=True, help='Show detailed information')
@click.option('--log-file', type=click.Path(dir_okay=False), help='Also write log messages to this file')
@click.option('--config', 'config_file', type=click.Path(dir_okay=False),
              help='YAML settings file (default: $CMS_ANONYMIZER_CONFIG)')
@pass_context
def cli(ctx: Context, verbose: bool, log_file, config_file):
    """Administrative commands for the CMS database"""
    ctx.verbose = verbose
    setup_logging(log_file=log_file, verbose=verbose)

    try:
        ctx.apply_settings(CmsConfig(config_file))
    except (AnonymizerError, ImportError, AttributeError, ValueError) as e:
        sys.exit(handle_exception(ctx, e))


@cli.group()
def anonymize():
    """Rewrite personal information with realistic fake data."""


@anonymize.command('users')
@click.argument('args', nargs=-1)
@click.option('--keep', type=str, help='User ids, logins and/or emails to skip, separated by commas')
@click.option('--skip-not-found', is_flag=True, help='Warn about --keep users that do not exist instead of failing')
@click.option('--site', type=str, help='Site id to limit rewrites to (multi-site installs only)')
@click.option('--ignore-empty-fields', is_flag=True,
              help='Do not fill fields that are currently empty; only overwrite fields holding a value')
@click.option('--language', type=str, help="Language of the fake content (default: 'en_US')")
@click.option('--seed', type=str, help='Number used to generate the same fake content again')
@click.option('--custom-email-domains', type=str,
              help='Domains for fake emails, separated by commas (e.g. test.com,test.org)')
@click.option('--custom-fields', type=str,
              help='Extra user meta fields to fake: name or name::method, separated by commas '
                   '(e.g. user_phone::phone_number,user_company)')
@click.option('--yes', '-y', is_flag=True, help='Do not ask for confirmation')
@pass_context
def users(ctx: Context, args, keep, skip_not_found, site, ignore_empty_fields, language, seed,
          custom_email_domains, custom_fields, yes):
    """Rewrite personal information in user profiles and comments.

    \b
    Examples:
        cms-admin anonymize users
        cms-admin anonymize users --keep="2,admin,test@example.com" --skip-not-found
        cms-admin anonymize users --site=3
        cms-admin anonymize users --language=fr_FR --seed=1000
        cms-admin anonymize users --custom-email-domains=test.com,test.org
        cms-admin anonymize users --custom-fields=user_phone::phone_number,user_company
    """
    options = {
        'args': args,
        'keep': keep,
        'skip_not_found': skip_not_found,
        'site': site,
        'ignore_empty_fields': ignore_empty_fields,
        'language': language or ctx.option_default('language'),
        'seed': seed,
        'custom_email_domains': custom_email_domains or ctx.option_default('custom_email_domains'),
        'custom_fields': custom_fields or ctx.option_default('custom_fields'),
        'yes': yes,
    }

    try:
        open_session(ctx)
    except Exception as e:
        ctx.stderr_console.print(f"Error connecting to database: {e}", style="bold red", markup=False)
        sys.exit(1)

    try:
        summary = get_command('anonymize users')(ctx, options)
    except (AnonymizerError, SQLAlchemyError) as e:
        sys.exit(handle_exception(ctx, e))
    finally:
        ctx.session.close()

    display_summary(ctx, summary)


if __name__ == '__main__':
    cli()
