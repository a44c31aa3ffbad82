"""
Data models for tasks in the Todoist tracker.

``RemoteTask`` mirrors what the tracker returns; ``NewTask`` is the payload
sent when creating one.
"""
from __future__ import annotations

from dataclasses import dataclass, field
import typing as t


@dataclass
class RemoteTask:
    """A task as stored by the tracker, identified by an opaque id."""
    id: str
    content: str
    due_string: t.Optional[str] = None
    project_id: str = ""
    section_id: t.Optional[str] = None
    labels: list[str] = field(default_factory=list)

    @classmethod
    def from_api(cls, data: dict[str, t.Any]) -> "RemoteTask":
        due = data.get("due") or {}
        return cls(
            id=str(data["id"]),
            content=data.get("content", "") or "",
            due_string=due.get("string") or due.get("date"),
            project_id=data.get("project_id", "") or "",
            section_id=data.get("section_id"),
            labels=data.get("labels", []) or [],
        )


@dataclass
class NewTask:
    """Payload for creating a task inside a project section."""
    content: str
    due_string: t.Optional[str]
    project_id: str
    section_id: str
    labels: list[str] = field(default_factory=list)

    def to_api(self) -> dict[str, t.Any]:
        payload: dict[str, t.Any] = {
            "content": self.content,
            "project_id": self.project_id,
            "section_id": self.section_id,
            "labels": self.labels,
        }
        if self.due_string:
            payload["due_string"] = self.due_string
        return payload
