"""
Unit tests for option parsing, --keep resolution and login generation.
"""
from unittest.mock import MagicMock

import pytest

from cli.anonymize.keep import resolve_excluded_user_ids, resolve_keep_token
from cli.anonymize.logins import MAX_ATTEMPTS, generate_unused_user_login
from cli.anonymize.options import (
    RunConfiguration, build_run_configuration, parse_custom_fields, parse_seed, parse_site,
)
from cli.core.exceptions import ConfigurationError, ExhaustionError, ResolutionError


class TestParseSite:

    def test_not_given(self):
        assert parse_site(None, multisite=False) is None
        assert parse_site('', multisite=True) is None

    def test_single_site_install(self):
        with pytest.raises(ConfigurationError, match="site parameter only valid on multi-site installs."):
            parse_site('2', multisite=False)

    def test_multisite(self):
        assert parse_site('2', multisite=True) == 2

    def test_not_a_number(self):
        with pytest.raises(ConfigurationError, match="site must be a number"):
            parse_site('blog', multisite=True)


class TestParseSeedAndFields:

    def test_seed(self):
        assert parse_seed(None) is None
        assert parse_seed('0') == 0
        assert parse_seed(' 1000 ') == 1000
        with pytest.raises(ConfigurationError, match="seed must be a number"):
            parse_seed('abc')

    def test_custom_fields(self):
        assert parse_custom_fields('user_phone::phone_number, user_company') == {
            'user_phone': 'phone_number',
            'user_company': None,
        }

    def test_custom_fields_from_list(self):
        assert parse_custom_fields(['user_city::city']) == {'user_city': 'city'}

    def test_custom_field_without_name(self):
        with pytest.raises(ConfigurationError, match="has no field name"):
            parse_custom_fields('::phone_number')

    @pytest.mark.parametrize('value', [
        'user_login',
        'user_registered::date_time',
        'user_phone,description::paragraph',
        'first_name::first_name',
    ])
    def test_custom_field_cannot_be_profile_field(self, value):
        with pytest.raises(ConfigurationError, match="is a profile field and cannot be customized"):
            parse_custom_fields(value)


class TestKeep:

    def test_numeric_id(self, ctx):
        assert resolve_keep_token(ctx, '3') == 3

    def test_unknown_numeric_id(self, ctx):
        with pytest.raises(ResolutionError, match="user id not found: 999"):
            resolve_keep_token(ctx, '999')
        assert resolve_keep_token(ctx, '999', skip_not_found=True) is None

    def test_login_and_email(self, ctx):
        assert resolve_keep_token(ctx, 'admin') == 1
        assert resolve_keep_token(ctx, 'editor@example.com') == 2

    def test_unknown_login(self, ctx):
        with pytest.raises(ResolutionError, match="username to keep not found: ghost"):
            resolve_keep_token(ctx, 'ghost')

    def test_unknown_email(self, ctx):
        with pytest.raises(ResolutionError, match="user email not found: ghost@example.com"):
            resolve_keep_token(ctx, 'ghost@example.com')

    def test_skip_not_found_warns(self, ctx):
        assert resolve_keep_token(ctx, 'ghost', skip_not_found=True) is None
        assert 'Warning: username to keep not found: ghost' in ctx.stderr_console.file.getvalue()

    def test_resolve_excluded_user_ids(self, ctx):
        excluded = resolve_excluded_user_ids(ctx, '2, admin, ghost, reader@example.org', skip_not_found=True)
        assert excluded == frozenset({1, 2, 4})

    def test_nothing_to_keep(self, ctx):
        assert resolve_excluded_user_ids(ctx, None) == frozenset()


class TestBuildRunConfiguration:

    def test_defaults(self, ctx):
        config = build_run_configuration(ctx, {})
        assert config == RunConfiguration()
        assert config.locale == 'en_US'
        assert config.generator_methods == []

    def test_all_options(self, multisite_ctx):
        config = build_run_configuration(multisite_ctx, {
            'keep': 'admin,3',
            'skip_not_found': True,
            'site': '2',
            'ignore_empty_fields': True,
            'language': 'fr_FR',
            'seed': '1000',
            'custom_email_domains': 'test.com,test.org',
            'custom_fields': 'user_phone::phone_number,user_company',
        })

        assert config.excluded_user_ids == frozenset({1, 3})
        assert config.skip_not_found_users is True
        assert config.site_id == 2
        assert config.ignore_empty_fields is True
        assert config.locale == 'fr_FR'
        assert config.seed == 1000
        assert config.custom_email_domains == ('test.com', 'test.org')
        assert config.generator_methods == ['phone_number']

    def test_site_checked_before_keep(self, ctx):
        # The bad --site is reported, not the unknown --keep user
        with pytest.raises(ConfigurationError):
            build_run_configuration(ctx, {'site': '2', 'keep': 'ghost'})

    def test_is_frozen(self):
        config = RunConfiguration()
        with pytest.raises(AttributeError):
            config.seed = 5


class TestUnusedLogin:

    def test_proposed_login_free(self, session, generator):
        assert generate_unused_user_login(session, generator, 'new.login') == 'new.login'

    def test_taken_login_gets_numeric_suffix(self, session, generator):
        login = generate_unused_user_login(session, generator, 'admin')
        assert login.startswith('admin')
        assert login[5:].isdigit() and len(login[5:]) == 5

    def test_no_proposal_uses_random_user_name(self, session):
        generator = MagicMock()
        generator.user_name.return_value = 'random.name'

        assert generate_unused_user_login(session, generator) == 'random.name'

    def test_exhaustion(self, session):
        generator = MagicMock()
        generator.user_name.return_value = 'admin'
        generator.numerify.return_value = 'editor'

        with pytest.raises(ExhaustionError, match="Unable to find a fake username that was not already in use"):
            generate_unused_user_login(session, generator, 'author')

        assert generator.numerify.call_count == MAX_ATTEMPTS
