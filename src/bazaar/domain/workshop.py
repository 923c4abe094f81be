"""Workshop task domain service."""

from datetime import date
from decimal import Decimal
from typing import Optional, Union

from bazaar.database.base import Database
from bazaar.domain.catalog import ALL_TASKS, TASK_ACTIVE, TASK_STATUSES
from bazaar.domain.entities import Task
from bazaar.domain.errors import NotFoundError, ValidationError, missing_fields, task_not_found
from bazaar.utils.amount_parser import parse_amount
from bazaar.utils.date_parser import parse_date


def filter_tasks(tasks: list[Task], tab: str) -> list[Task]:
    """Tasks shown under a workshop tab.

    "Все задачи" shows everything, "Активные" shows tasks that are not
    completed, any other tab shows tasks with that status.
    """
    if tab == ALL_TASKS:
        return list(tasks)
    if tab == TASK_ACTIVE:
        return [task for task in tasks if not task.completed]
    return [task for task in tasks if task.status == tab]


class TaskService:
    """Service for workshop jobs.

    ``status`` (the workflow stage) and ``completed`` (open or closed) are
    independent. Completing a task does not change its status.
    """

    def __init__(self, db: Database):
        """Initialize task service.

        Args:
            db: Database instance
        """
        self.db = db

    def create_task(
        self,
        user_id: str,
        name: str,
        client: str,
        price: Union[str, Decimal, int, float],
        due_date: Union[str, date],
        status: str = TASK_ACTIVE,
    ) -> str:
        """Create an open task.

        Raises:
            ValidationError: If a required field is missing or malformed
        """
        missing = []
        if not name or not name.strip():
            missing.append("name")
        if not client or not client.strip():
            missing.append("client")
        if price is None or (isinstance(price, str) and not price.strip()):
            missing.append("price")
        if not due_date:
            missing.append("date")
        if missing:
            raise ValidationError(missing_fields(missing))

        if status not in TASK_STATUSES:
            raise ValidationError(
                f"Unknown task status '{status}'. Choose one of: {', '.join(TASK_STATUSES)}"
            )

        try:
            price_value = parse_amount(price) if isinstance(price, str) else Decimal(str(price))
        except (ValueError, ArithmeticError):
            raise ValidationError(f"Price must be a number, got '{price}'")

        if isinstance(due_date, str):
            try:
                due_date = parse_date(due_date)
            except ValueError as e:
                raise ValidationError(str(e))

        return self.db.create_task(
            user_id=user_id,
            name=name.strip(),
            client=client.strip(),
            price=price_value,
            due_date=due_date,
            status=status,
        )

    def get_task(self, task_id: str) -> Optional[Task]:
        return self.db.get_task(task_id)

    def list_tasks(self, user_id: str, tab: str = TASK_ACTIVE) -> list[Task]:
        """List a user's tasks under a tab.

        Raises:
            ValidationError: If tab is unknown
        """
        if tab != ALL_TASKS and tab not in TASK_STATUSES:
            raise ValidationError(f"Unknown task tab '{tab}'")
        return filter_tasks(self.db.list_tasks(user_id), tab)

    def set_completed(self, user_id: str, task_id: str, completed: bool) -> None:
        """Close or reopen a task.

        Raises:
            NotFoundError: If the task doesn't exist or belongs to another user
        """
        task = self.db.get_task(task_id)
        if task is None or task.user_id != user_id:
            raise NotFoundError(task_not_found(task_id))
        self.db.update_task_completed(task_id, completed)
