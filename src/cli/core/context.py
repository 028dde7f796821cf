"""Context class for the CMS admin CLI."""

import sys
from typing import Dict, Optional

import click
from sqlalchemy.orm import Session
from rich.console import Console

from cms.hooks import UpdateHooks, load_hook_modules


class Context:
    """Shared context for CLI commands."""

    def __init__(self):
        self.session: Optional[Session] = None
        self.verbose: bool = False
        self.console = Console()
        self.stderr_console = Console(file=sys.stderr)

        # Deployment settings, see apply_settings()
        self.settings = None
        self.multisite: bool = False
        self.contact_methods: Dict[str, str] = {}
        self.hooks = UpdateHooks()

    def apply_settings(self, settings):
        """Take deployment settings from a CmsConfig."""
        self.settings = settings
        self.multisite = settings.multisite
        self.contact_methods = dict(settings.contact_methods)
        load_hook_modules(self.hooks, settings.hooks)

    def option_default(self, name: str, default=None):
        if self.settings is None:
            return default
        return self.settings.get_option_default(name, default)

    def warning(self, message: str):
        self.stderr_console.print(f"Warning: {message}", style="yellow", markup=False, soft_wrap=True)

    def success(self, message: str):
        self.console.print(f"Success: {message}", style="green", markup=False, soft_wrap=True)

    def confirm(self, message: str, assume_yes: bool = False):
        """Ask before mutating data; raises click.Abort when declined."""
        if assume_yes:
            return True
        return click.confirm(message, abort=True)
