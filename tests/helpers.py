"""Helpers for building fake HTTP, PDF and model responses."""
import json
import typing as t
from unittest.mock import MagicMock

import httpx

from tasks_server.client import TodoistClient


def build_minimal_pdf(page_count: int = 1) -> bytes:
    """Build a small but well-formed PDF with blank pages."""
    kids = " ".join(f"{3 + i} 0 R" for i in range(page_count))
    objects = [
        b"<< /Type /Catalog /Pages 2 0 R >>",
        f"<< /Type /Pages /Kids [{kids}] /Count {page_count} >>".encode("ascii"),
    ]
    objects += [b"<< /Type /Page /Parent 2 0 R /MediaBox [0 0 612 792] >>"] * page_count

    out = bytearray(b"%PDF-1.4\n")
    offsets = []
    for number, body in enumerate(objects, 1):
        offsets.append(len(out))
        out += b"%d 0 obj\n" % number + body + b"\nendobj\n"
    xref_at = len(out)
    out += b"xref\n0 %d\n" % (len(objects) + 1)
    out += b"0000000000 65535 f \n"
    for offset in offsets:
        out += b"%010d 00000 n \n" % offset
    out += b"trailer\n<< /Size %d /Root 1 0 R >>\nstartxref\n%d\n%%%%EOF\n" % (len(objects) + 1, xref_at)
    return bytes(out)


def make_response(status_code: int = 200, text: str = "", content: bytes = b"") -> MagicMock:
    """Fake ``requests.Response`` with the attributes the code reads."""
    response = MagicMock()
    response.status_code = status_code
    response.ok = 200 <= status_code < 300
    response.reason = "OK" if response.ok else "Not Found"
    response.text = text
    response.content = content
    return response


def make_completion(content: t.Optional[str]) -> MagicMock:
    """Fake chat completion whose first choice carries ``content``."""
    completion = MagicMock()
    completion.choices = [MagicMock()]
    completion.choices[0].message.content = content
    return completion


class FakeTodoist:
    """In-memory stand-in for the Todoist API, served through ``httpx.MockTransport``."""

    def __init__(self, tasks: t.Optional[list[dict[str, t.Any]]] = None, page_size: int = 50) -> None:
        self.tasks = list(tasks or [])
        self.page_size = page_size
        self.requests: list[httpx.Request] = []
        self.deleted: list[str] = []
        self.created: list[dict[str, t.Any]] = []
        self.fail_on: t.Optional[str] = None
        self._next_id = 1000

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.fail_on == request.method:
            return httpx.Response(500, text="internal error")

        if request.method == "GET":
            start = int(request.url.params.get("cursor", "0"))
            page = self.tasks[start:start + self.page_size]
            end = start + len(page)
            next_cursor = str(end) if end < len(self.tasks) else None
            return httpx.Response(200, json={"results": page, "next_cursor": next_cursor})

        if request.method == "DELETE":
            task_id = request.url.path.rsplit("/", 1)[-1]
            self.deleted.append(task_id)
            self.tasks = [task for task in self.tasks if task["id"] != task_id]
            return httpx.Response(204)

        if request.method == "POST":
            payload = json.loads(request.content)
            self._next_id += 1
            task = {
                "id": str(self._next_id),
                "content": payload["content"],
                "project_id": payload["project_id"],
                "section_id": payload["section_id"],
                "labels": payload.get("labels", []),
                "due": {"string": payload.get("due_string"), "date": payload.get("due_string")},
            }
            self.created.append(payload)
            self.tasks.append(task)
            return httpx.Response(200, json=task)

        return httpx.Response(405)

    def client(self) -> TodoistClient:
        http_client = httpx.AsyncClient(transport=httpx.MockTransport(self.handler))
        return TodoistClient("todoist-test-key", http_client=http_client)
