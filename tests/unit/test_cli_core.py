"""
Unit tests for the CLI plumbing: settings, command registry, hooks, helpers.
"""
import logging
import sys
import types

import pytest

from cli.core.config import CmsConfig, env_flag
from cli.core.context import Context
from cli.core.exceptions import AnonymizerError, ConfigurationError
from cli.core.logging_utils import setup_logging
from cli.core import registry
from cli.core.utils import split_csv
from cms.hooks import (
    HOOK_NAMES, POST_UPDATE_USER, PRE_UPDATE_USER, UpdateHooks, load_hook_modules,
)


class TestSplitCsv:

    @pytest.mark.parametrize('value,expected', [
        (None, []),
        ('', []),
        ('1, admin ,, a@b.c', ['1', 'admin', 'a@b.c']),
        (['test.com', ' test.org '], ['test.com', 'test.org']),
    ])
    def test_split(self, value, expected):
        assert split_csv(value) == expected


class TestCmsConfig:

    def test_defaults(self):
        config = CmsConfig()
        assert config.multisite is False
        assert config.contact_methods == {}
        assert config.hooks == []
        assert config.get_option_default('language', 'en_US') == 'en_US'

    def test_multisite_from_environment(self, monkeypatch):
        monkeypatch.setenv('CMS_MULTISITE', 'yes')
        assert CmsConfig().multisite is True
        assert env_flag('CMS_MULTISITE')

    def test_yaml_file(self, tmp_path):
        config_file = tmp_path / 'anonymizer.yaml'
        config_file.write_text(
            "multisite: true\n"
            "contact_methods:\n"
            "  twitter: X username\n"
            "anonymize:\n"
            "  language: fr_FR\n"
            "  custom_email_domains: [test.com, test.org]\n"
        )

        config = CmsConfig(str(config_file))

        assert config.multisite is True
        assert config.contact_methods == {'twitter': 'X username'}
        assert config.get_option_default('language') == 'fr_FR'
        assert config.get_option_default('custom_email_domains') == ['test.com', 'test.org']
        assert config.get_option_default('custom_fields') is None

    def test_yaml_file_from_environment(self, tmp_path, monkeypatch):
        config_file = tmp_path / 'anonymizer.yaml'
        config_file.write_text("multisite: true\n")
        monkeypatch.setenv('CMS_ANONYMIZER_CONFIG', str(config_file))

        assert CmsConfig().multisite is True

    def test_missing_file(self, tmp_path):
        with pytest.raises(ConfigurationError, match="Config file not found"):
            CmsConfig(str(tmp_path / 'missing.yaml'))

    def test_not_a_mapping(self, tmp_path):
        config_file = tmp_path / 'anonymizer.yaml'
        config_file.write_text("- just\n- a list\n")
        with pytest.raises(ConfigurationError, match="must contain a mapping"):
            CmsConfig(str(config_file))

    def test_invalid_yaml(self, tmp_path):
        config_file = tmp_path / 'anonymizer.yaml'
        config_file.write_text("multisite: [unclosed\n")
        with pytest.raises(ConfigurationError, match="Could not parse"):
            CmsConfig(str(config_file))

    def test_bad_contact_methods(self, tmp_path):
        config_file = tmp_path / 'anonymizer.yaml'
        config_file.write_text("contact_methods: [twitter]\n")
        with pytest.raises(ConfigurationError, match="contact_methods"):
            CmsConfig(str(config_file))

    def test_configuration_errors_are_anonymizer_errors(self):
        assert issubclass(ConfigurationError, AnonymizerError)


class TestRegistry:

    def test_anonymize_users_registered(self):
        import cli.anonymize  # noqa: F401
        assert 'anonymize users' in registry.list_commands()
        assert registry.get_command('anonymize users').__name__ == 'anonymize_users'

    def test_unknown_command(self):
        with pytest.raises(KeyError, match="Unknown command 'nope'"):
            registry.get_command('nope')

    def test_duplicate_name(self):
        @registry.register_command('test duplicate')
        def first(ctx, options):
            return 1

        try:
            # Re-registering the same function is harmless
            registry.register_command('test duplicate')(first)

            with pytest.raises(ValueError, match="already registered"):
                @registry.register_command('test duplicate')
                def second(ctx, options):
                    return 2
        finally:
            registry._COMMANDS.pop('test duplicate', None)


class TestUpdateHooks:

    def test_fire_in_registration_order(self):
        hooks = UpdateHooks()
        calls = []
        hooks.register(PRE_UPDATE_USER, lambda record, fields, gen: calls.append(('a', record)))
        hooks.register(PRE_UPDATE_USER, lambda record, fields, gen: calls.append(('b', record)))

        hooks.fire(PRE_UPDATE_USER, 'user', {}, None)
        hooks.fire(POST_UPDATE_USER, 'user', {}, None)

        assert calls == [('a', 'user'), ('b', 'user')]
        assert len(hooks) == 2

    def test_observer_can_change_fields(self):
        hooks = UpdateHooks()
        hooks.register(PRE_UPDATE_USER, lambda record, fields, gen: fields.update(display_name='Hooked'))

        fields = {'display_name': 'Original'}
        hooks.fire(PRE_UPDATE_USER, None, fields, None)
        assert fields['display_name'] == 'Hooked'

    def test_unknown_hook(self):
        hooks = UpdateHooks()
        with pytest.raises(KeyError, match="Unknown hook"):
            hooks.register('pre_update_post', print)

    def test_every_hook_starts_empty(self):
        hooks = UpdateHooks()
        assert all(hooks.observers(name) == [] for name in HOOK_NAMES)

    def test_load_hook_modules(self, monkeypatch):
        module = types.ModuleType('fake_cms_plugin')

        def register(hooks):
            hooks.register(POST_UPDATE_USER, lambda record, fields, gen: None)

        module.register = register
        monkeypatch.setitem(sys.modules, 'fake_cms_plugin', module)

        hooks = load_hook_modules(UpdateHooks(), ['fake_cms_plugin:register'])
        assert len(hooks.observers(POST_UPDATE_USER)) == 1

    def test_load_hook_modules_malformed_path(self):
        with pytest.raises(ValueError, match="module:function"):
            load_hook_modules(UpdateHooks(), ['no_function_here'])


class TestContext:

    def test_warning_and_success(self, ctx):
        ctx.warning('careful')
        ctx.success('done')
        assert 'Warning: careful' in ctx.stderr_console.file.getvalue()
        assert 'Success: done' in ctx.console.file.getvalue()

    def test_confirm_assume_yes(self, ctx):
        assert ctx.confirm('Really?', assume_yes=True) is True

    def test_apply_settings(self, tmp_path):
        config_file = tmp_path / 'anonymizer.yaml'
        config_file.write_text(
            "multisite: true\n"
            "contact_methods: {facebook: Facebook profile}\n"
            "anonymize: {language: de_DE}\n"
        )

        context = Context()
        context.apply_settings(CmsConfig(str(config_file)))

        assert context.multisite is True
        assert context.contact_methods == {'facebook': 'Facebook profile'}
        assert context.option_default('language') == 'de_DE'


class TestLogging:

    @pytest.fixture(autouse=True)
    def restore_root_logger(self):
        root = logging.getLogger()
        handlers, level = root.handlers[:], root.level
        yield
        for handler in root.handlers:
            if handler not in handlers:
                handler.close()
        root.handlers[:] = handlers
        root.setLevel(level)

    def test_verbose_sets_debug(self):
        setup_logging(verbose=True)
        assert logging.getLogger().level == logging.DEBUG

    def test_default_level_and_log_file(self, tmp_path):
        log_file = tmp_path / 'anonymizer.log'
        setup_logging(log_file=str(log_file))

        logging.getLogger('cms.test').warning('written to file')
        for handler in logging.getLogger().handlers:
            handler.flush()

        assert logging.getLogger().level == logging.WARNING
        assert 'written to file' in log_file.read_text()
