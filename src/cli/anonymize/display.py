"""Display functions for the anonymize command."""

from rich.table import Table
from rich import box

from cli.core.context import Context


def display_summary(ctx: Context, summary):
    """Print the updated-records table and the success line."""
    table = Table(box=box.SIMPLE_HEAD)
    table.add_column("Updated", style="cyan bold")
    table.add_column("Count", justify="right")

    table.add_row("Users", str(summary.users_updated))
    table.add_row("Comments", str(summary.comments_updated))

    ctx.console.print(table)
    ctx.success(summary.success_message())
