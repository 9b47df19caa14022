"""
Async HTTP client for the Taskboard API.

Unwraps the response envelope: successful calls return `data` (and
`pagination` for lists); anything else raises ApiError carrying the
status code, the server's message and its field errors.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

import httpx


class ApiError(Exception):
    """A failed API call. `status_code` is 0 when no response was received."""

    def __init__(self, status_code: int, message: str, errors: Optional[Dict[str, List[str]]] = None):
        super().__init__(message)
        self.status_code = status_code
        self.message = message
        self.errors = errors or {}


@dataclass
class Page:
    """One page of a list endpoint."""

    items: List[Dict[str, Any]]
    pagination: Dict[str, int] = field(default_factory=dict)


class TaskboardClient:
    """
    Thin wrapper over httpx.AsyncClient.

    Usage:
        async with TaskboardClient("http://localhost:8000") as client:
            await client.login("demo@example.com", "password123")
            page = await client.list_tasks(status="TODO")
    """

    def __init__(
        self,
        base_url: str = "http://localhost:8000",
        token: Optional[str] = None,
        http: Optional[httpx.AsyncClient] = None,
    ):
        self._http = http or httpx.AsyncClient(base_url=base_url, timeout=10.0)
        self._owns_http = http is None
        self.token = token

    async def __aenter__(self) -> "TaskboardClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        if self._owns_http:
            await self._http.aclose()

    def _headers(self) -> Dict[str, str]:
        if not self.token:
            return {}
        return {"Authorization": f"Bearer {self.token}"}

    async def _request(
        self,
        method: str,
        path: str,
        json: Optional[Dict[str, Any]] = None,
        params: Optional[Dict[str, Any]] = None,
    ) -> Dict[str, Any]:
        if params:
            params = {key: value for key, value in params.items() if value is not None}
        try:
            response = await self._http.request(
                method, path, json=json, params=params, headers=self._headers()
            )
        except httpx.HTTPError as exc:
            raise ApiError(0, str(exc) or "Network error") from exc

        try:
            body = response.json()
        except ValueError:
            body = {}

        if response.is_error or not body.get("success"):
            raise ApiError(
                response.status_code,
                body.get("error") or response.reason_phrase or "Request failed",
                body.get("errors"),
            )
        return body

    # Auth

    async def register(self, email: str, password: str, name: Optional[str] = None) -> Dict[str, Any]:
        body = await self._request("POST", "/auth/register", json={"email": email, "password": password, "name": name})
        return body["data"]

    async def login(self, email: str, password: str) -> Dict[str, Any]:
        """Log in and keep the token for subsequent calls."""
        body = await self._request("POST", "/auth/login", json={"email": email, "password": password})
        self.token = body["data"]["accessToken"]
        return body["data"]["user"]

    async def me(self) -> Dict[str, Any]:
        return (await self._request("GET", "/auth/me"))["data"]

    # Projects

    async def list_projects(self, **params: Any) -> Page:
        body = await self._request("GET", "/projects", params=params)
        return Page(items=body["data"], pagination=body.get("pagination", {}))

    async def get_project(self, project_id: str) -> Dict[str, Any]:
        return (await self._request("GET", f"/projects/{project_id}"))["data"]

    async def create_project(self, **fields: Any) -> Dict[str, Any]:
        return (await self._request("POST", "/projects", json=fields))["data"]

    async def update_project(self, project_id: str, **changes: Any) -> Dict[str, Any]:
        return (await self._request("PUT", f"/projects/{project_id}", json=changes))["data"]

    async def delete_project(self, project_id: str) -> None:
        await self._request("DELETE", f"/projects/{project_id}")

    # Tasks

    async def list_tasks(self, **params: Any) -> Page:
        body = await self._request("GET", "/tasks", params=params)
        return Page(items=body["data"], pagination=body.get("pagination", {}))

    async def get_task(self, task_id: str) -> Dict[str, Any]:
        return (await self._request("GET", f"/tasks/{task_id}"))["data"]

    async def create_task(self, project_id: str, **fields: Any) -> Dict[str, Any]:
        path = f"/projects/{project_id}/tasks"
        return (await self._request("POST", path, json=fields))["data"]

    async def update_task(self, task_id: str, **changes: Any) -> Dict[str, Any]:
        """PUT only the given fields; pass None to clear a nullable field."""
        return (await self._request("PUT", f"/tasks/{task_id}", json=changes))["data"]

    async def set_task_status(self, task_id: str, status: str) -> Dict[str, Any]:
        return await self.update_task(task_id, status=str(getattr(status, "value", status)))

    async def delete_task(self, task_id: str) -> None:
        await self._request("DELETE", f"/tasks/{task_id}")

    # Dashboard

    async def dashboard(self) -> Dict[str, Any]:
        return (await self._request("GET", "/dashboard"))["data"]
