"""Tests for workshop tasks."""

from datetime import date, datetime, timedelta
from decimal import Decimal

import pytest

from bazaar.domain.catalog import ALL_TASKS, TASK_ACTIVE
from bazaar.domain.entities import Task
from bazaar.domain.errors import NotFoundError, ValidationError
from bazaar.domain.workshop import filter_tasks


def make_task(task_id, status=TASK_ACTIVE, completed=False):
    now = datetime(2026, 1, 1)
    return Task(
        id=task_id,
        user_id="u1",
        name="Screen swap",
        client="Ali",
        price=Decimal("100000"),
        due_date=date(2026, 1, 10),
        status=status,
        completed=completed,
        created_at=now,
        updated_at=now,
    )


def test_filter_tasks_by_tab():
    """Test the all, active and per-status tabs."""
    tasks = [
        make_task("open"),
        make_task("done", completed=True),
        make_task("urgent", status="Срочные"),
        make_task("urgent-done", status="Срочные", completed=True),
    ]

    assert [t.id for t in filter_tasks(tasks, ALL_TASKS)] == [
        "open",
        "done",
        "urgent",
        "urgent-done",
    ]
    assert [t.id for t in filter_tasks(tasks, TASK_ACTIVE)] == ["open", "urgent"]
    assert [t.id for t in filter_tasks(tasks, "Срочные")] == ["urgent", "urgent-done"]
    assert filter_tasks(tasks, "Готов") == []


def test_create_task(task_service):
    """Test creating a task with a parsed date."""
    task_id = task_service.create_task(
        "u1", name="Replace battery", client="Dilshod", price="150 000", due_date="2026-11-01"
    )
    task = task_service.get_task(task_id)

    assert task.name == "Replace battery"
    assert task.price == Decimal("150000")
    assert task.due_date == date(2026, 11, 1)
    assert task.status == TASK_ACTIVE
    assert task.completed is False


def test_create_task_with_relative_date(task_service):
    """Test relative due dates."""
    task_id = task_service.create_task(
        "u1", name="Glass", client="Aziz", price="50000", due_date="tomorrow"
    )
    assert task_service.get_task(task_id).due_date == date.today() + timedelta(days=1)


def test_create_task_missing_fields(task_service):
    """Test the missing field message."""
    with pytest.raises(ValidationError, match="Required fields are missing: name, client"):
        task_service.create_task("u1", name="", client="", price="1", due_date="today")


def test_create_task_rejects_unknown_status(task_service):
    """Test that a status outside the known set is rejected."""
    with pytest.raises(ValidationError, match="Unknown task status"):
        task_service.create_task(
            "u1", name="X", client="Y", price="1", due_date="today", status="Lost"
        )


def test_create_task_rejects_bad_date(task_service):
    """Test an unparseable due date."""
    with pytest.raises(ValidationError, match="Could not parse date"):
        task_service.create_task("u1", name="X", client="Y", price="1", due_date="someday")


def test_complete_and_reopen(task_service):
    """Test that completion does not touch the status."""
    task_id = task_service.create_task(
        "u1", name="X", client="Y", price="1", due_date="today", status="В работе"
    )

    task_service.set_completed("u1", task_id, True)
    task = task_service.get_task(task_id)
    assert task.completed is True
    assert task.status == "В работе"
    assert task_service.list_tasks("u1", TASK_ACTIVE) == []
    assert [t.id for t in task_service.list_tasks("u1", "В работе")] == [task_id]

    task_service.set_completed("u1", task_id, False)
    assert [t.id for t in task_service.list_tasks("u1", TASK_ACTIVE)] == [task_id]


def test_set_completed_of_other_user_fails(task_service):
    """Test that a task can only be closed by its owner."""
    task_id = task_service.create_task("u1", name="X", client="Y", price="1", due_date="today")
    with pytest.raises(NotFoundError):
        task_service.set_completed("u2", task_id, True)


def test_list_tasks_unknown_tab(task_service):
    """Test listing with an unknown tab."""
    with pytest.raises(ValidationError, match="Unknown task tab"):
        task_service.list_tasks("u1", "Archive")
