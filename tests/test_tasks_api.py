"""HTTP tests for the task endpoints."""

import uuid

import pytest

from conftest import create_project, create_task

pytestmark = pytest.mark.db


async def test_create_task_in_project_defaults(http, alice):
    project = await create_project(http, alice, name="Launch")

    response = await http.post(f"/projects/{project['id']}/tasks", json={"title": "Design"}, headers=alice)

    assert response.status_code == 201
    task = response.json()["data"]
    assert task["title"] == "Design"
    assert task["status"] == "TODO"
    assert task["priority"] == "MEDIUM"
    assert task["dueDate"] is None
    assert task["projectId"] == project["id"]
    assert task["project"] == {"id": project["id"], "name": "Launch", "status": "ACTIVE"}


async def test_nested_create_uses_project_from_url(http, alice):
    project = await create_project(http, alice, name="Here")
    elsewhere = await create_project(http, alice, name="Elsewhere")

    task = await create_task(http, alice, project["id"], projectId=elsewhere["id"])

    assert task["projectId"] == project["id"]


async def test_create_task_flat_route(http, alice):
    project = await create_project(http, alice)

    response = await http.post(
        "/tasks",
        json={
            "title": "Ship it",
            "projectId": project["id"],
            "status": "IN_PROGRESS",
            "priority": "HIGH",
            "dueDate": "2030-01-15T09:30:00Z",
            "description": "Final release",
        },
        headers=alice,
    )

    assert response.status_code == 201
    task = response.json()["data"]
    assert task["status"] == "IN_PROGRESS"
    assert task["priority"] == "HIGH"
    assert task["description"] == "Final release"
    assert task["dueDate"].startswith("2030-01-15T09:30:00")


async def test_create_task_in_foreign_or_missing_project(http, alice, bob):
    foreign = await create_project(http, bob)

    for project_id in (foreign["id"], str(uuid.uuid4())):
        flat = await http.post("/tasks", json={"title": "Sneaky", "projectId": project_id}, headers=alice)
        nested = await http.post(f"/projects/{project_id}/tasks", json={"title": "Sneaky"}, headers=alice)
        for response in (flat, nested):
            assert response.status_code == 404
            assert response.json()["error"] == "Project not found"

    detail = (await http.get(f"/projects/{foreign['id']}", headers=bob)).json()["data"]
    assert detail["tasks"] == []


async def test_create_task_validation(http, alice):
    project = await create_project(http, alice)

    response = await http.post(
        f"/projects/{project['id']}/tasks",
        json={"title": "", "priority": "URGENT", "dueDate": "tomorrow"},
        headers=alice,
    )

    assert response.status_code == 400
    body = response.json()
    assert body["error"] == "Validation failed"
    assert set(body["errors"]) == {"title", "priority", "dueDate"}


async def test_list_tasks_filters(http, alice):
    launch = await create_project(http, alice, name="Launch")
    ops = await create_project(http, alice, name="Ops")
    await create_task(http, alice, launch["id"], title="Write copy", priority="HIGH")
    await create_task(http, alice, launch["id"], title="Review copy", status="DONE")
    await create_task(http, alice, ops["id"], title="Rotate keys", priority="HIGH", description="Copy the new keys")

    async def titles(**params):
        body = (await http.get("/tasks", params=params, headers=alice)).json()
        return sorted(t["title"] for t in body["data"])

    assert await titles(priority="HIGH") == ["Rotate keys", "Write copy"]
    assert await titles(status="DONE") == ["Review copy"]
    assert await titles(projectId=launch["id"]) == ["Review copy", "Write copy"]
    assert await titles(search="COPY") == ["Review copy", "Rotate keys", "Write copy"]
    assert await titles(search="copy", projectId=ops["id"]) == ["Rotate keys"]
    assert await titles(status="", priority="") == ["Review copy", "Rotate keys", "Write copy"]


async def test_list_tasks_project_filter_cannot_reach_foreign_tasks(http, alice, bob):
    foreign = await create_project(http, bob)
    await create_task(http, bob, foreign["id"], title="Bob's secret")

    body = (await http.get("/tasks", params={"projectId": foreign["id"]}, headers=alice)).json()

    assert body["data"] == []
    assert body["pagination"]["total"] == 0


async def test_list_tasks_sorted_by_priority(http, alice):
    project = await create_project(http, alice)
    for title, priority in (("a", "LOW"), ("b", "HIGH"), ("c", "MEDIUM")):
        await create_task(http, alice, project["id"], title=title, priority=priority)

    desc = (await http.get("/tasks", params={"sortBy": "priority"}, headers=alice)).json()
    asc = (await http.get("/tasks", params={"sortBy": "priority", "sortOrder": "asc"}, headers=alice)).json()

    assert [t["priority"] for t in desc["data"]] == ["HIGH", "MEDIUM", "LOW"]
    assert [t["priority"] for t in asc["data"]] == ["LOW", "MEDIUM", "HIGH"]


async def test_list_tasks_sorted_by_title_with_pagination(http, alice):
    project = await create_project(http, alice)
    for title in ("delta", "alpha", "charlie", "bravo"):
        await create_task(http, alice, project["id"], title=title)

    body = (await http.get("/tasks", params={"sortBy": "title", "sortOrder": "asc", "limit": 3}, headers=alice)).json()

    assert [t["title"] for t in body["data"]] == ["alpha", "bravo", "charlie"]
    assert body["pagination"] == {"page": 1, "limit": 3, "total": 4, "totalPages": 2}


async def test_list_tasks_bad_sort_field(http, alice):
    response = await http.get("/tasks", params={"sortBy": "owner"}, headers=alice)

    assert response.status_code == 400
    assert "sortBy" in response.json()["errors"]


async def test_foreign_task_is_indistinguishable_from_missing(http, alice, bob):
    project = await create_project(http, bob)
    task = await create_task(http, bob, project["id"])

    for task_id in (task["id"], str(uuid.uuid4())):
        get = await http.get(f"/tasks/{task_id}", headers=alice)
        put = await http.put(f"/tasks/{task_id}", json={"status": "DONE"}, headers=alice)
        delete = await http.delete(f"/tasks/{task_id}", headers=alice)
        for response in (get, put, delete):
            assert response.status_code == 404
            assert response.json() == {"success": False, "error": "Task not found"}

    unchanged = (await http.get(f"/tasks/{task['id']}", headers=bob)).json()["data"]
    assert unchanged["status"] == "TODO"


async def test_update_task_partial(http, alice):
    project = await create_project(http, alice)
    task = await create_task(http, alice, project["id"], title="Design", description="Wireframes", priority="LOW")

    response = await http.put(f"/tasks/{task['id']}", json={"status": "IN_PROGRESS"}, headers=alice)

    assert response.status_code == 200
    updated = response.json()["data"]
    assert updated["status"] == "IN_PROGRESS"
    assert updated["title"] == "Design"
    assert updated["description"] == "Wireframes"
    assert updated["priority"] == "LOW"


async def test_update_task_clears_nullable_fields(http, alice):
    project = await create_project(http, alice)
    task = await create_task(http, alice, project["id"], description="Temp", dueDate="2030-01-01T00:00:00Z")

    updated = (await http.put(f"/tasks/{task['id']}", json={"description": None, "dueDate": None}, headers=alice)).json()["data"]

    assert updated["description"] is None
    assert updated["dueDate"] is None


async def test_update_task_rejects_null_title(http, alice):
    project = await create_project(http, alice)
    task = await create_task(http, alice, project["id"])

    response = await http.put(f"/tasks/{task['id']}", json={"title": None}, headers=alice)

    assert response.status_code == 400
    assert response.json()["errors"] == {"title": ["Field cannot be null"]}


async def test_create_task_rejects_null_description(http, alice):
    project = await create_project(http, alice)

    response = await http.post(
        f"/projects/{project['id']}/tasks",
        json={"title": "Design", "description": None},
        headers=alice,
    )

    assert response.status_code == 400
    assert response.json()["errors"] == {"description": ["Field cannot be null"]}


async def test_empty_update_leaves_task_identical(http, alice):
    project = await create_project(http, alice)
    task = await create_task(http, alice, project["id"])
    before = (await http.get(f"/tasks/{task['id']}", headers=alice)).json()["data"]

    response = await http.put(f"/tasks/{task['id']}", json={}, headers=alice)

    assert response.status_code == 200
    assert response.json()["data"] == before
    assert (await http.get(f"/tasks/{task['id']}", headers=alice)).json()["data"] == before


async def test_reassign_task_between_own_projects(http, alice):
    source = await create_project(http, alice, name="Source")
    target = await create_project(http, alice, name="Target")
    task = await create_task(http, alice, source["id"])

    updated = (await http.put(f"/tasks/{task['id']}", json={"projectId": target["id"]}, headers=alice)).json()["data"]

    assert updated["projectId"] == target["id"]
    assert updated["project"]["name"] == "Target"
    source_detail = (await http.get(f"/projects/{source['id']}", headers=alice)).json()["data"]
    assert source_detail["tasks"] == []


async def test_reassign_task_to_foreign_project_is_rejected(http, alice, bob):
    mine = await create_project(http, alice)
    theirs = await create_project(http, bob)
    task = await create_task(http, alice, mine["id"])

    response = await http.put(
        f"/tasks/{task['id']}",
        json={"projectId": theirs["id"], "title": "Moved"},
        headers=alice,
    )

    assert response.status_code == 404
    assert response.json()["error"] == "Target project not found"
    unchanged = (await http.get(f"/tasks/{task['id']}", headers=alice)).json()["data"]
    assert unchanged["projectId"] == mine["id"]
    assert unchanged["title"] == task["title"]
    assert (await http.get(f"/projects/{theirs['id']}", headers=bob)).json()["data"]["tasks"] == []


async def test_delete_task(http, alice):
    project = await create_project(http, alice)
    task = await create_task(http, alice, project["id"])

    response = await http.delete(f"/tasks/{task['id']}", headers=alice)

    assert response.status_code == 200
    assert response.json()["data"] == {"message": "Task deleted"}
    assert (await http.get(f"/tasks/{task['id']}", headers=alice)).status_code == 404
    assert (await http.delete(f"/tasks/{task['id']}", headers=alice)).status_code == 404


async def test_launch_scenario(http, alice):
    project = await create_project(http, alice, name="Launch")
    assert project["status"] == "ACTIVE"

    task = await create_task(http, alice, project["id"], title="Design")
    assert (task["status"], task["priority"]) == ("TODO", "MEDIUM")

    moved = await http.put(f"/tasks/{task['id']}", json={"status": "IN_PROGRESS"}, headers=alice)
    assert moved.status_code == 200

    fetched = (await http.get(f"/tasks/{task['id']}", headers=alice)).json()["data"]
    assert fetched["status"] == "IN_PROGRESS"

    assert (await http.delete(f"/projects/{project['id']}", headers=alice)).status_code == 200
    gone = await http.get(f"/tasks/{task['id']}", headers=alice)
    assert gone.status_code == 404
    assert gone.json()["error"] == "Task not found"
