#-------------------------------------------------------------------------bh-
# pytest configuration and fixtures for CMS anonymizer tests
#-------------------------------------------------------------------------eh-

import pytest
import sys
from io import StringIO
from pathlib import Path

from rich.console import Console

# Add project root and src to path for imports
PROJ_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJ_ROOT / 'src'))
sys.path.insert(0, str(PROJ_ROOT / 'tests'))

from fixtures.test_config import (
    create_test_engine,
    create_test_session_factory,
    seed_test_data,
)


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Keep deployment settings of the developer's shell out of the tests."""
    for name in ('CMS_MULTISITE', 'CMS_ANONYMIZER_CONFIG', 'CMS_DB_URL'):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def engine():
    """Fresh in-memory database with the CMS schema, one per test."""
    engine = create_test_engine()
    yield engine
    engine.dispose()


@pytest.fixture
def SessionFactory(engine):
    """Create a session factory for the test database."""
    return create_test_session_factory(engine)


@pytest.fixture
def session(SessionFactory):
    """
    Provide a session on a seeded database.

    See fixtures/test_config.py for the seeded sites, users and comments.
    """
    session = SessionFactory()
    seed_test_data(session)
    try:
        yield session
    finally:
        session.rollback()
        session.close()


@pytest.fixture
def ctx(session):
    """
    CLI Context for a single-site install, bound to the seeded session.

    Console output is captured: read ctx.console.file.getvalue() and
    ctx.stderr_console.file.getvalue().
    """
    from cli.core.context import Context

    context = Context()
    context.session = session
    context.console = Console(file=StringIO(), width=200)
    context.stderr_console = Console(file=StringIO(), width=200)
    return context


@pytest.fixture
def multisite_ctx(ctx):
    """Same as ctx, on a multi-site install."""
    ctx.multisite = True
    return ctx


@pytest.fixture
def generator():
    from cli.anonymize.generator import FakeDataGenerator
    return FakeDataGenerator('en_US', seed=1000)


# Common test data fixtures
@pytest.fixture
def admin_user(session):
    """Get known test user (admin, id 1)."""
    from cms import User
    return User.get_by_login(session, 'admin')


@pytest.fixture
def author_user(session):
    """Get known test user with empty fields (author, id 3)."""
    from cms import User
    return User.get_by_login(session, 'author')
