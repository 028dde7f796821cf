"""
Configuration management for the anonymizer CLI.

Settings come from the environment (optionally a .env file) and an optional
YAML file:

    multisite: true
    contact_methods:
      facebook: Facebook profile
      twitter: X username
    hooks:
      - myplugin.hooks:register
    anonymize:
      language: fr_FR
      custom_email_domains: [example.com, example.org]
      custom_fields: [user_phone::phone_number, user_city::city]
"""

import os
import yaml
import logging
from dotenv import load_dotenv, find_dotenv

from cli.core.exceptions import ConfigurationError

TRUE_VALUES = ('true', '1', 'yes', 'on')

# Option defaults the YAML 'anonymize' section may provide
ANONYMIZE_DEFAULT_KEYS = ('language', 'custom_email_domains', 'custom_fields')


def env_flag(name: str, default: bool = False) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in TRUE_VALUES


class CmsConfig:
    """Configuration loader for the anonymizer."""

    def __init__(self, config_file=None):
        self.config_file = config_file or os.getenv('CMS_ANONYMIZER_CONFIG')
        self.logger = logging.getLogger(__name__)

        self._load_env()
        self._load_yaml()

    def _load_env(self):
        """Load environment variables from .env file."""
        env_file = find_dotenv(usecwd=True)
        load_dotenv(env_file)
        self.logger.debug(f"Loaded environment from {env_file or '(no .env file)'}")

        self.multisite = env_flag('CMS_MULTISITE')
        self.contact_methods = {}
        self.hooks = []
        self.anonymize_defaults = {}

    def _load_yaml(self):
        """Load the optional YAML configuration."""
        if not self.config_file:
            return

        if not os.path.exists(self.config_file):
            raise ConfigurationError(f"Config file not found: {self.config_file}")

        try:
            with open(self.config_file, 'r') as f:
                self.yaml_config = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ConfigurationError(f"Could not parse {self.config_file}: {e}") from e

        if not isinstance(self.yaml_config, dict):
            raise ConfigurationError(f"Config file {self.config_file} must contain a mapping")

        if 'multisite' in self.yaml_config:
            self.multisite = bool(self.yaml_config['multisite'])

        contact_methods = self.yaml_config.get('contact_methods') or {}
        if not isinstance(contact_methods, dict):
            raise ConfigurationError("contact_methods must map field names to labels")
        self.contact_methods = {str(k): str(v) for k, v in contact_methods.items()}

        self.hooks = list(self.yaml_config.get('hooks') or [])

        anonymize = self.yaml_config.get('anonymize') or {}
        self.anonymize_defaults = {
            key: anonymize[key] for key in ANONYMIZE_DEFAULT_KEYS if anonymize.get(key)
        }

        self.logger.debug(f"Loaded config from {self.config_file}")

    def get_option_default(self, name: str, default=None):
        """Default for an 'anonymize users' option, from the YAML file."""
        return self.anonymize_defaults.get(name, default)
