"""Ledger (cash-flow) commands."""

import click
from bazaar.cli.error_handling import handle_domain_error, require_user_or_exit
from bazaar.domain.entities import EntryType, PaymentMethod
from bazaar.domain.errors import DomainError
from bazaar.domain.ledger import LedgerService, suggested_categories

ENTRY_TYPES = [item.value for item in EntryType]
PAYMENT_METHODS = [item.value for item in PaymentMethod]


@click.group()
def ledger_group():
    """Track income and expenses."""
    pass


@ledger_group.command("add")
@click.option("--type", "entry_type", required=True, type=click.Choice(ENTRY_TYPES))
@click.option("--amount", required=True, help="Amount (e.g., 120000 or '120 000 сум')")
@click.option("--method", required=True, type=click.Choice(PAYMENT_METHODS))
@click.option("--category", required=True, help="Category (see 'ledger categories')")
@click.option("--comment", help="Optional comment")
@click.pass_context
def add_entry(
    ctx, entry_type: str, amount: str, method: str, category: str, comment: str | None
):
    """Record an income or expense."""
    user_id = require_user_or_exit(ctx)

    try:
        entry_id = LedgerService(ctx.obj["db"]).add_entry(
            user_id,
            entry_type=entry_type,
            amount=amount,
            method=method,
            category=category,
            comment=comment,
        )
    except DomainError as e:
        handle_domain_error(ctx, e)
    click.echo(f"Recorded {entry_type} (ID: {entry_id})")


@ledger_group.command("list")
@click.option("--method", type=click.Choice(PAYMENT_METHODS), help="Only card or only cash")
@click.pass_context
def list_entries(ctx, method: str | None):
    """List your transactions, newest first."""
    user_id = require_user_or_exit(ctx)
    try:
        entries = LedgerService(ctx.obj["db"]).list_entries(user_id, method=method)
    except DomainError as e:
        handle_domain_error(ctx, e)

    if not entries:
        click.echo("No transactions found.")
        return

    click.echo(f"\nFound {len(entries)} transaction(s):")
    click.echo("-" * 90)
    for entry in entries:
        sign = "+" if entry.type == EntryType.INCOME else "-"
        comment = f" | {entry.comment}" if entry.comment else ""
        click.echo(
            f"{entry.id} | {entry.created_at:%Y-%m-%d} | {sign}{entry.amount:,.2f} | "
            f"{entry.method.value:4s} | {entry.category}{comment}"
        )


@ledger_group.command("delete")
@click.argument("entry_id")
@click.option("--yes", is_flag=True, help="Skip confirmation")
@click.pass_context
def delete_entry(ctx, entry_id: str, yes: bool):
    """Delete one of your transactions."""
    user_id = require_user_or_exit(ctx)

    if not yes and not click.confirm(f"Delete transaction {entry_id}?"):
        click.echo("Cancelled")
        return

    try:
        LedgerService(ctx.obj["db"]).delete_entry(user_id, entry_id)
    except DomainError as e:
        handle_domain_error(ctx, e)
    click.echo(f"Deleted transaction {entry_id}")


@ledger_group.command("totals")
@click.pass_context
def show_totals(ctx):
    """Show income, expense and balance."""
    user_id = require_user_or_exit(ctx)
    try:
        totals = LedgerService(ctx.obj["db"]).totals(user_id)
    except DomainError as e:
        handle_domain_error(ctx, e)

    click.echo(f"Income:  {totals.income:>14,.2f}")
    click.echo(f"Expense: {totals.expense:>14,.2f}")
    click.echo(f"Balance: {totals.balance:>14,.2f}")


@ledger_group.command("categories")
@click.option("--type", "entry_type", required=True, type=click.Choice(ENTRY_TYPES))
def list_categories(entry_type: str):
    """Show suggested categories for a transaction type."""
    for category in suggested_categories(entry_type):
        click.echo(category)


def register_commands(cli):
    """Register ledger commands with main CLI."""
    cli.add_command(ledger_group, name="ledger")
