"""Generation of login names that are not in use yet."""

import logging

from cms.core.users import User
from cli.core.exceptions import ExhaustionError

logger = logging.getLogger(__name__)

# After this many attempts the proposed login is dropped for random user names
MAX_PROPOSED_ATTEMPTS = 5
MAX_ATTEMPTS = 30
NUMERIC_SUFFIX = '#####'


def generate_unused_user_login(session, generator, user_login_to_check: str = '') -> str:
    """
    Return a login that no user currently has.

    The proposed login is tried first. From the second attempt on, a taken
    candidate also gets a random 5-digit suffix before giving up on it; after
    MAX_PROPOSED_ATTEMPTS (or without a proposal) candidates are fresh random
    user names.

    Args:
        session: SQLAlchemy session, checked against the live users table
        generator: FakeDataGenerator
        user_login_to_check: Proposed login

    Returns:
        str: An unused login

    Raises:
        ExhaustionError: No unused login after MAX_ATTEMPTS attempts
    """
    candidate = user_login_to_check
    attempt = 0

    while True:
        if attempt > MAX_PROPOSED_ATTEMPTS or not candidate:
            candidate = generator.user_name()

        if not User.login_exists(session, candidate):
            return candidate

        if attempt > 0:
            candidate = generator.numerify(candidate + NUMERIC_SUFFIX)
            if not User.login_exists(session, candidate):
                return candidate

        attempt += 1
        logger.debug(f"Login collision, attempt {attempt}: {candidate}")
        if attempt > MAX_ATTEMPTS:
            raise ExhaustionError('Unable to find a fake username that was not already in use')
