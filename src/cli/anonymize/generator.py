"""
Fake data generation for the anonymizer.

FakeDataGenerator wraps a Faker instance for one locale. Seeding it makes
every value it produces reproducible; the anonymizer re-seeds it once per
user so that each user's values depend only on the seed and the user's
position in the run.

Generator methods can also be looked up by name (used by --custom-fields).
Names may be given in snake_case ('phone_number') or camelCase
('phoneNumber'), with or without trailing parentheses.
"""

import logging
import re
from typing import Iterable, List, Optional

from faker import Faker

from cli.core.exceptions import ConfigurationError, UnknownGeneratorMethodError

logger = logging.getLogger(__name__)

DEFAULT_LOCALE = 'en_US'

# Faker plumbing that must not be reachable through method-name lookup
RESERVED_FAKER_ATTRIBUTES = {
    'seed', 'seed_instance', 'seed_locale', 'add_provider', 'get_providers',
    'provider', 'format', 'get_formatter', 'set_formatter', 'set_arguments',
    'del_arguments', 'get_arguments', 'parse', 'random', 'locales', 'weights',
    'factories', 'items', 'unique', 'optional', 'cache_pattern', 'generator_attrs',
}

# Methods of this class reachable through method-name lookup
GENERATOR_METHODS = (
    'first_name', 'last_name', 'name', 'user_name', 'password', 'url',
    'safe_email', 'safe_domain_name', 'tld', 'ipv4', 'user_agent',
    'date_time_this_decade', 'registration_date', 'real_text', 'real_text_between',
)


def to_snake_case(name: str) -> str:
    """'phoneNumber' -> 'phone_number'; snake_case passes through."""
    return re.sub(r'(?<=[a-z0-9])([A-Z])', r'_\1', name).lower()


def normalize_method_name(name: str) -> str:
    """Strip call parentheses and surrounding blanks from a method name."""
    return (name or '').replace('(', '').replace(')', '').strip()


class FakeDataGenerator:
    """Seedable, locale-specific provider of realistic fake values."""

    def __init__(self, locale: str = DEFAULT_LOCALE, seed: Optional[int] = None):
        self.locale = locale or DEFAULT_LOCALE
        try:
            self.faker = Faker(self.locale)
        except AttributeError as e:
            raise ConfigurationError(f"Unknown language '{self.locale}'") from e
        if seed is not None:
            self.seed(seed)

    def seed(self, seed: int):
        """Reset the random state; equal seeds give equal value sequences."""
        self.faker.seed_instance(seed)
        logger.debug(f"Seeded generator with {seed}")

    @property
    def random(self):
        return self.faker.random

    # ------------------------------------------------------------------
    # People and accounts
    # ------------------------------------------------------------------

    def first_name(self) -> str:
        return self.faker.first_name()

    def last_name(self) -> str:
        return self.faker.last_name()

    def name(self) -> str:
        return self.faker.name()

    def user_name(self) -> str:
        return self.faker.user_name()

    def password(self) -> str:
        return self.faker.password()

    # ------------------------------------------------------------------
    # Internet
    # ------------------------------------------------------------------

    def url(self) -> str:
        return self.faker.url()

    def safe_email(self) -> str:
        return self.faker.safe_email()

    def safe_domain_name(self) -> str:
        return self.faker.safe_domain_name()

    def tld(self) -> str:
        return self.faker.tld()

    def ipv4(self) -> str:
        return self.faker.ipv4()

    def user_agent(self) -> str:
        return self.faker.user_agent()

    # ------------------------------------------------------------------
    # Dates, numbers, text
    # ------------------------------------------------------------------

    def date_time_this_decade(self):
        return self.faker.date_time_this_decade()

    def registration_date(self) -> str:
        """A date-time within the current decade as 'YYYY-MM-DD HH:MM:SS'."""
        return self.date_time_this_decade().strftime('%Y-%m-%d %H:%M:%S')

    def numerify(self, text: str) -> str:
        """Replace every '#' in text with a random digit."""
        return self.faker.numerify(text)

    def shuffle(self, items: Iterable) -> List:
        """Shuffled copy of items."""
        shuffled = list(items)
        self.random.shuffle(shuffled)
        return shuffled

    def real_text(self, max_chars: int = 200) -> str:
        return self.faker.text(max_nb_chars=max_chars)

    def real_text_between(self, min_chars: int = 160, max_chars: int = 200) -> str:
        """Readable text whose length lies between min_chars and max_chars."""
        text = self.faker.text(max_nb_chars=max_chars)
        while len(text) < min_chars:
            # Faker needs room for at least one short word
            remaining = max_chars - len(text) - 1
            if remaining < 5:
                break
            text = f"{text} {self.faker.text(max_nb_chars=remaining)}"
        return text

    def default_custom_field(self) -> str:
        """Value for a custom field configured without a generator method."""
        return self.real_text_between(10, 20)

    # ------------------------------------------------------------------
    # Lookup by name
    # ------------------------------------------------------------------

    def _resolve(self, method_name: str):
        name = normalize_method_name(method_name)
        if not name or name.startswith('_'):
            return None

        for candidate in dict.fromkeys((name, to_snake_case(name))):
            if candidate in GENERATOR_METHODS:
                return getattr(self, candidate)
            if candidate in RESERVED_FAKER_ATTRIBUTES:
                continue
            try:
                attr = getattr(self.faker, candidate)
            except AttributeError:
                continue
            if callable(attr):
                return attr
        return None

    def has_method(self, method_name: str) -> bool:
        return self._resolve(method_name) is not None

    def validate_methods(self, method_names: Iterable[Optional[str]]):
        """Raise UnknownGeneratorMethodError for the first unknown, non-empty name."""
        for method_name in method_names:
            if method_name and not self.has_method(method_name):
                raise UnknownGeneratorMethodError(
                    f"Unknown fake data method '{method_name}' for language '{self.locale}'"
                )

    def generate_by_method_name(self, method_name: str):
        """
        Call a generator method given its name.

        Raises:
            UnknownGeneratorMethodError: If no such method exists
        """
        method = self._resolve(method_name)
        if method is None:
            raise UnknownGeneratorMethodError(
                f"Unknown fake data method '{method_name}' for language '{self.locale}'"
            )
        return method()
