"""Dashboard statistics, over HTTP and at the service level."""

from datetime import timedelta

import pytest

from conftest import create_project, create_task
from taskboard.models.enums import TaskStatus
from taskboard.repositories.project_repository import ProjectRepository
from taskboard.repositories.task_repository import TaskRepository
from taskboard.repositories.user_repository import UserRepository
from taskboard.schemas.project import ProjectCreate
from taskboard.schemas.task import TaskCreate
from taskboard.schemas.user import RegisterRequest
from taskboard.services.dashboard_service import DashboardService
from taskboard.utils.time import utc_now

pytestmark = pytest.mark.db


async def test_dashboard_for_new_user_is_zero_filled(http, alice):
    response = await http.get("/dashboard", headers=alice)

    assert response.status_code == 200
    stats = response.json()["data"]
    assert stats == {
        "projectCount": 0,
        "taskCounts": {"TODO": 0, "IN_PROGRESS": 0, "DONE": 0},
        "totalTasks": 0,
        "overdueCount": 0,
        "recentTasks": [],
    }


async def test_dashboard_counts(http, alice, bob):
    project = await create_project(http, alice)
    await create_project(http, alice, name="Empty")
    past = (utc_now() - timedelta(days=2)).isoformat()
    await create_task(http, alice, project["id"], title="Late", dueDate=past)
    await create_task(http, alice, project["id"], title="Late but done", dueDate=past, status="DONE")
    await create_task(http, alice, project["id"], title="Busy", status="IN_PROGRESS")
    foreign = await create_project(http, bob)
    await create_task(http, bob, foreign["id"], title="Not counted", dueDate=past)

    stats = (await http.get("/dashboard", headers=alice)).json()["data"]

    assert stats["projectCount"] == 2
    assert stats["taskCounts"] == {"TODO": 1, "IN_PROGRESS": 1, "DONE": 1}
    assert stats["totalTasks"] == 3
    assert stats["overdueCount"] == 1
    assert {t["title"] for t in stats["recentTasks"]} == {"Late", "Late but done", "Busy"}
    assert all("project" in t for t in stats["recentTasks"])


async def test_dashboard_requires_authentication(http):
    assert (await http.get("/dashboard")).status_code == 401


async def test_recent_tasks_are_most_recently_updated_and_capped(db):
    user = await UserRepository(db).create(RegisterRequest(email="zoe@example.com", password="password123"))
    project = await ProjectRepository(db).create(user.id, ProjectCreate(name="Busy"))
    tasks = TaskRepository(db)
    created = [
        await tasks.create(TaskCreate(title=f"Task {index}", project_id=project.id))
        for index in range(7)
    ]
    await db.commit()

    stats = await DashboardService(db).get_stats(user.id)

    assert stats.project_count == 1
    assert stats.task_counts[TaskStatus.TODO.value] == 7
    assert len(stats.recent_tasks) == 5
    assert [t.id for t in stats.recent_tasks] == [t.id for t in reversed(created)][:5]
