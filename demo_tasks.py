"""
Demo Tasks Data for the Taskini application
Tasks reference demo users by email so the data does not depend on database ids
"""

from datetime import datetime, timedelta, timezone

from app.models.task import TaskPriority, TaskStatus

NOW = datetime.now(timezone.utc)

# Demo Tasks Data
# Structure: title, description, owner email, assignee email, status, priority, due date
DEMO_TASKS = [
    {
        "title": "Write quarterly report",
        "description": "Summarise delivery metrics and open risks for the quarter",
        "owner": "ananya.rao@taskini.test",
        "assigned_to": "kwame.mensah@taskini.test",
        "status": TaskStatus.IN_PROGRESS,
        "priority": TaskPriority.HIGH,
        "due_date": NOW + timedelta(days=5),
    },
    {
        "title": "Redesign task calendar view",
        "description": "Month grid with due-date markers and a compact mobile layout",
        "owner": "marco.bianchi@taskini.test",
        "assigned_to": None,
        "status": TaskStatus.PENDING,
        "priority": TaskPriority.MEDIUM,
        "due_date": NOW + timedelta(days=14),
    },
    {
        "title": "Add index on task status",
        "description": "Profile history queries filter on status; add an index",
        "owner": "ananya.rao@taskini.test",
        "assigned_to": "ananya.rao@taskini.test",
        "status": TaskStatus.COMPLETED,
        "priority": TaskPriority.LOW,
        "due_date": NOW - timedelta(days=2),
    },
    {
        "title": "Plan product launch newsletter",
        "description": None,
        "owner": "sofia.lindqvist@taskini.test",
        "assigned_to": "marco.bianchi@taskini.test",
        "status": TaskStatus.PENDING,
        "priority": TaskPriority.HIGH,
        "due_date": None,
    },
    {
        "title": "Reconcile team expenses",
        "description": "Match receipts against card statements for last month",
        "owner": "kwame.mensah@taskini.test",
        "assigned_to": None,
        "status": TaskStatus.COMPLETED,
        "priority": TaskPriority.MEDIUM,
        "due_date": NOW - timedelta(days=7),
    },
]


def get_tasks_by_status():
    """Return tasks grouped by status"""
    grouped = {}
    for task in DEMO_TASKS:
        grouped.setdefault(task["status"].value, []).append(task)
    return grouped


if __name__ == "__main__":
    print("Demo Tasks Data")
    print("===============")
    print(f"Total Tasks: {len(DEMO_TASKS)}")
    for status, tasks in get_tasks_by_status().items():
        print(f"  {status}: {len(tasks)}")
