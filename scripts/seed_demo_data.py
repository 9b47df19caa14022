"""
Seed script to create a demo user with sample projects and tasks.

Usage:
    python scripts/seed_demo_data.py

Demo login: demo@example.com / password123
"""

import asyncio
from datetime import timedelta

from taskboard.db.session import session_scope
from taskboard.models.enums import ProjectStatus, TaskPriority, TaskStatus
from taskboard.repositories.project_repository import ProjectRepository
from taskboard.repositories.task_repository import TaskRepository
from taskboard.repositories.user_repository import UserRepository
from taskboard.schemas.project import ProjectCreate
from taskboard.schemas.task import TaskCreate
from taskboard.schemas.user import RegisterRequest
from taskboard.utils.time import utc_now

DEMO_EMAIL = "demo@example.com"
DEMO_PASSWORD = "password123"

PROJECTS = [
    {
        "name": "Website Redesign",
        "description": "Complete overhaul of the company website with modern design principles and improved UX.",
        "status": ProjectStatus.ACTIVE,
        "tasks": [
            ("Create wireframes", TaskStatus.DONE, TaskPriority.HIGH, -10),
            ("Design system components", TaskStatus.IN_PROGRESS, TaskPriority.HIGH, 5),
            ("Implement homepage", TaskStatus.TODO, TaskPriority.MEDIUM, 14),
            ("Accessibility audit", TaskStatus.TODO, TaskPriority.LOW, None),
        ],
    },
    {
        "name": "Mobile App Development",
        "description": "Native mobile application for iOS and Android platforms.",
        "status": ProjectStatus.ACTIVE,
        "tasks": [
            ("Set up CI pipeline", TaskStatus.DONE, TaskPriority.MEDIUM, None),
            ("Offline sync", TaskStatus.TODO, TaskPriority.HIGH, 21),
        ],
    },
    {
        "name": "API Integration",
        "description": "Integrate third-party APIs for payment processing and analytics.",
        "status": ProjectStatus.ACTIVE,
        "tasks": [
            ("Payment provider sandbox", TaskStatus.IN_PROGRESS, TaskPriority.HIGH, -1),
        ],
    },
    {
        "name": "Legacy System Migration",
        "description": "Migrate data and functionality from legacy systems to new platform.",
        "status": ProjectStatus.ARCHIVED,
        "tasks": [],
    },
]


async def seed_demo_data():
    """Create the demo user and sample data if the user does not exist yet."""
    
    async with session_scope() as db:
        users = UserRepository(db)
        demo = await users.get_by_email(DEMO_EMAIL)
        if demo:
            print(f"[OK] Found existing demo user: {demo.email} (nothing to do)")
            return
        
        demo = await users.create(
            RegisterRequest(email=DEMO_EMAIL, password=DEMO_PASSWORD, name="Demo User")
        )
        print(f"[OK] Created demo user: {DEMO_EMAIL} / {DEMO_PASSWORD}")
        
        projects = ProjectRepository(db)
        tasks = TaskRepository(db)
        now = utc_now()
        
        for entry in PROJECTS:
            project = await projects.create(
                demo.id,
                ProjectCreate(
                    name=entry["name"],
                    description=entry["description"],
                    status=entry["status"],
                ),
            )
            for title, status, priority, due_in_days in entry["tasks"]:
                due_date = now + timedelta(days=due_in_days) if due_in_days is not None else None
                await tasks.create(
                    TaskCreate(
                        title=title,
                        status=status,
                        priority=priority,
                        due_date=due_date,
                        project_id=project.id,
                    )
                )
            print(f"[OK] Created project: {project.name} ({len(entry['tasks'])} tasks)")
    
    print("\n[OK] Seed complete")


if __name__ == "__main__":
    asyncio.run(seed_demo_data())
