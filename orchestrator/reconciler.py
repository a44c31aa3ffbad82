"""
Rebuilds the Todoist section from the extracted calendar.

Every task in the section is deleted, then one task is created per upcoming
event. Nothing is diffed and nothing is rolled back if a request fails midway.
"""
from __future__ import annotations

import typing as t
from dataclasses import dataclass, field
from datetime import date, datetime

from rich.markup import escape

from shared.models import Calendar, CalendarEvent
from tasks_server.client import TodoistClient
from tasks_server.models import NewTask, RemoteTask
from .utils import console


@dataclass
class ReconcileResult:
    """Counts of what one reconciliation run did."""
    deleted: int = 0
    skipped: int = 0
    created: list[RemoteTask] = field(default_factory=list)

    @property
    def created_count(self) -> int:
        return len(self.created)


def parse_start_date(event: CalendarEvent) -> t.Optional[date]:
    """Return the event's start date, or None when absent or unparseable."""
    if not event.start_date:
        return None
    try:
        return datetime.fromisoformat(event.start_date).date()
    except ValueError:
        return None


def is_upcoming(event: CalendarEvent, today: date) -> bool:
    """True when the event starts today or later."""
    start = parse_start_date(event)
    return start is not None and start >= today


def build_task(event: CalendarEvent, project_id: str, section_id: str) -> NewTask:
    return NewTask(
        content=event.description,
        due_string=event.start_date,
        project_id=project_id,
        section_id=section_id,
        labels=[event.category],
    )


async def reconcile_tasks(
        client: TodoistClient,
        calendar: Calendar,
        project_id: str,
        section_id: str,
        today: t.Optional[date] = None,
) -> ReconcileResult:
    """Replace every task in the section with the calendar's upcoming events.

    Args:
        client: Todoist client.
        calendar: Parsed calendar.
        project_id: Todoist project the section belongs to.
        section_id: Section that is wiped and refilled.
        today: Reference date for skipping past events. Defaults to today.

    Returns:
        What was deleted, skipped and created.
    """
    today = today or date.today()
    result = ReconcileResult()

    for task in await client.list_tasks(project_id, section_id):
        console.print(f"Deletando task (#{task.id}) = {escape(task.content)}")
        await client.delete_task(task.id)
        result.deleted += 1

    for event in calendar.iter_events():
        if parse_start_date(event) is None:
            console.print(f"[yellow]Ignorando task {escape(event.description)}, pois não tem data de início válida.[/yellow]")
            result.skipped += 1
            continue
        if not is_upcoming(event, today):
            console.print(f"[dim]Ignorando task {escape(event.description)}, pois a data já passou![/dim]")
            result.skipped += 1
            continue

        created = await client.add_task(build_task(event, project_id, section_id))
        result.created.append(created)

    return result
