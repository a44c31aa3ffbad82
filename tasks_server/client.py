"""
Async client for the Todoist REST API.

Only the three calls the reconciler needs are implemented: list the tasks of
a section, delete a task, create a task. Requests are issued one at a time.
"""
from __future__ import annotations

import typing as t

import httpx

from shared.errors import ExternalApiError
from .models import NewTask, RemoteTask

TODOIST_API_URL = "https://api.todoist.com/api/v1"


class TodoistClient:
    """Thin wrapper over ``httpx.AsyncClient`` with bearer authentication."""

    def __init__(
            self,
            api_key: str,
            base_url: str = TODOIST_API_URL,
            http_client: t.Optional[httpx.AsyncClient] = None,
    ) -> None:
        self._client = http_client or httpx.AsyncClient()
        self._client.base_url = base_url
        self._client.headers["Authorization"] = f"Bearer {api_key}"

    async def __aenter__(self) -> "TodoistClient":
        return self

    async def __aexit__(self, *exc_info: t.Any) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._client.aclose()

    async def _request(self, method: str, path: str, **kwargs: t.Any) -> httpx.Response:
        try:
            response = await self._client.request(method, path, **kwargs)
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            raise ExternalApiError(
                f"HTTP error from Todoist: {e.response.status_code} {e.response.text}"
            ) from e
        except httpx.HTTPError as e:
            raise ExternalApiError(f"Error calling Todoist: {e}") from e
        return response

    async def list_tasks(self, project_id: str, section_id: str) -> list[RemoteTask]:
        """List every task of a section, following pagination cursors."""
        tasks: list[RemoteTask] = []
        params: dict[str, str] = {"project_id": project_id, "section_id": section_id}
        while True:
            response = await self._request("GET", "/tasks", params=params)
            body = response.json()
            tasks.extend(RemoteTask.from_api(item) for item in body.get("results", []))
            cursor = body.get("next_cursor")
            if not cursor:
                return tasks
            params = {**params, "cursor": cursor}

    async def delete_task(self, task_id: str) -> None:
        await self._request("DELETE", f"/tasks/{task_id}")

    async def add_task(self, task: NewTask) -> RemoteTask:
        response = await self._request("POST", "/tasks", json=task.to_api())
        return RemoteTask.from_api(response.json())
