# -*- coding: utf-8 -*-
import asyncio

import click
from rich.markup import escape

from shared.errors import CalendarSyncError
from .config import load_settings
from .pipeline import sync_calendar
from .utils import display_json, error_console


@click.command(context_settings={"help_option_names": ["-h", "--help"]})
@click.option("--verbose", "-v", is_flag=True, help="Print the created tasks after syncing.")
def main(verbose: bool) -> None:
    """Download the academic calendar, extract its events and sync them to Todoist."""
    try:
        settings = load_settings()
        result = asyncio.run(sync_calendar(settings))
    except CalendarSyncError as e:
        error_console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise SystemExit(1)

    if verbose:
        display_json(
            "Tasks criadas",
            [{"content": task.content, "due": task.due_string, "labels": task.labels} for task in result.created],
        )


if __name__ == "__main__":
    main()
