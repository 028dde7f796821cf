"""Shared command plumbing for the CMS admin CLI."""

import traceback

from sqlalchemy.orm import Session

from cli.core.context import Context
from cli.core.utils import EXIT_ERROR


def open_session(ctx: Context) -> Session:
    """Connect to the CMS database unless the context already has a session."""
    if ctx.session is None:
        from cms.session import create_cms_engine
        engine, _ = create_cms_engine()
        ctx.session = Session(engine)
    return ctx.session


def handle_exception(ctx: Context, e: Exception) -> int:
    """Common error handling. Returns the exit code."""
    ctx.stderr_console.print(f"❌ Error: {e}", style="bold red", markup=False, soft_wrap=True)
    if ctx.verbose:
        ctx.stderr_console.print(traceback.format_exc(), style="dim", markup=False)
    return EXIT_ERROR
