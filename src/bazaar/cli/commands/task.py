"""Workshop task commands."""

import click
from bazaar.cli.error_handling import handle_domain_error, require_user_or_exit
from bazaar.domain.catalog import TASK_ACTIVE, TASK_STATUSES, TASK_TABS
from bazaar.domain.errors import DomainError
from bazaar.domain.workshop import TaskService


@click.group()
def task_group():
    """Track workshop repair jobs."""
    pass


@task_group.command("add")
@click.argument("name")
@click.option("--client", required=True, help="Client name")
@click.option("--price", required=True, help="Agreed price")
@click.option("--date", "due_date", required=True, help="Due date (e.g., 2026-11-01, tomorrow)")
@click.option(
    "--status",
    type=click.Choice(TASK_STATUSES),
    default=TASK_ACTIVE,
    show_default=True,
    help="Workflow status",
)
@click.pass_context
def add_task(ctx, name: str, client: str, price: str, due_date: str, status: str):
    """Add a workshop task."""
    user_id = require_user_or_exit(ctx)

    try:
        task_id = TaskService(ctx.obj["db"]).create_task(
            user_id, name=name, client=client, price=price, due_date=due_date, status=status
        )
    except DomainError as e:
        handle_domain_error(ctx, e)
    click.echo(f"Created task '{name}' (ID: {task_id})")


@task_group.command("list")
@click.option(
    "--tab",
    type=click.Choice(TASK_TABS),
    default=TASK_ACTIVE,
    show_default=True,
    help="Which tasks to show",
)
@click.pass_context
def list_tasks(ctx, tab: str):
    """List your tasks under a tab."""
    user_id = require_user_or_exit(ctx)

    try:
        tasks = TaskService(ctx.obj["db"]).list_tasks(user_id, tab=tab)
    except DomainError as e:
        handle_domain_error(ctx, e)

    if not tasks:
        click.echo("No tasks found.")
        return

    for task in tasks:
        mark = "x" if task.completed else " "
        click.echo(
            f"[{mark}] {task.id} | {task.due_date:%Y-%m-%d} | {task.name} | "
            f"{task.client} | {task.price:,.2f} | {task.status}"
        )


@task_group.command("complete")
@click.argument("task_id")
@click.pass_context
def complete_task(ctx, task_id: str):
    """Mark a task as done."""
    _set_completed(ctx, task_id, True)
    click.echo(f"Completed task {task_id}")


@task_group.command("reopen")
@click.argument("task_id")
@click.pass_context
def reopen_task(ctx, task_id: str):
    """Mark a task as not done."""
    _set_completed(ctx, task_id, False)
    click.echo(f"Reopened task {task_id}")


def _set_completed(ctx, task_id: str, completed: bool) -> None:
    user_id = require_user_or_exit(ctx)
    try:
        TaskService(ctx.obj["db"]).set_completed(user_id, task_id, completed)
    except DomainError as e:
        handle_domain_error(ctx, e)


def register_commands(cli):
    """Register task commands with main CLI."""
    cli.add_command(task_group, name="task")
