"""
Transaction management utilities for CMS write functions.

Every record write in an anonymization run is committed on its own;
management_transaction() wraps one such write.
"""
from contextlib import contextmanager
from sqlalchemy.orm import Session


@contextmanager
def management_transaction(session: Session):
    """
    Context manager ensuring commit/rollback for a single record write.

    Usage:
        with management_transaction(session):
            user.user_email = 'new@example.com'
        # Auto-commits on success, rolls back on exception

    Args:
        session: SQLAlchemy session

    Yields:
        Session: The same session (for convenience)

    Raises:
        Any exception raised within the context block (after rollback)
    """
    try:
        yield session
        session.commit()
    except Exception:
        session.rollback()
        raise
