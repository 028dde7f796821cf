"""
Rewriting of personal information in user profiles and comments.

Importing this package registers the 'anonymize users' command handler.
"""

from .commands import AnonymizeSummary, anonymize_users
from .generator import FakeDataGenerator
from .options import RunConfiguration, build_run_configuration

__all__ = [
    'AnonymizeSummary',
    'anonymize_users',
    'FakeDataGenerator',
    'RunConfiguration',
    'build_run_configuration',
]
