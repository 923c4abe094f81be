"""Chat commands."""

import click
from bazaar.cli.error_handling import handle_domain_error, require_user_or_exit
from bazaar.domain.chat import ChatService
from bazaar.domain.errors import DomainError, NotFoundError, chat_not_found
from bazaar.domain.listing import ListingService


@click.group()
def chat_group():
    """Talk to sellers and buyers about a listing."""
    pass


@chat_group.command("start")
@click.argument("listing_id")
@click.pass_context
def start_chat(ctx, listing_id: str):
    """Open a chat with the seller of a listing.

    Reuses the existing chat if you already contacted the seller about it.
    """
    user_id = require_user_or_exit(ctx)
    db = ctx.obj["db"]

    try:
        listing = ListingService(db).require_listing(listing_id)
        chat_id = ChatService(db).get_or_create_chat(user_id, listing.shop_id, listing_id)
    except DomainError as e:
        handle_domain_error(ctx, e)
    click.echo(f"Chat ID: {chat_id}")


@chat_group.command("send")
@click.argument("chat_id")
@click.argument("text")
@click.pass_context
def send_message(ctx, chat_id: str, text: str):
    """Send a message to a chat."""
    user_id = require_user_or_exit(ctx)
    db = ctx.obj["db"]

    try:
        chat = db.get_chat(chat_id)
        if chat is None or user_id not in (chat.buyer_id, chat.seller_id):
            raise NotFoundError(chat_not_found(chat_id))
        ChatService(db).send_message(chat_id, user_id, text)
    except DomainError as e:
        handle_domain_error(ctx, e)
    click.echo("Message sent")


@chat_group.command("show")
@click.argument("chat_id")
@click.pass_context
def show_chat(ctx, chat_id: str):
    """Show the messages of a chat."""
    user_id = require_user_or_exit(ctx)
    db = ctx.obj["db"]

    try:
        chat = db.get_chat(chat_id)
        if chat is None or user_id not in (chat.buyer_id, chat.seller_id):
            raise NotFoundError(chat_not_found(chat_id))
        messages = ChatService(db).get_messages(chat_id)
    except DomainError as e:
        handle_domain_error(ctx, e)

    if not messages:
        click.echo("No messages yet.")
        return

    for message in messages:
        sender = "you" if message.sender_id == user_id else message.sender_id
        click.echo(f"[{message.timestamp:%Y-%m-%d %H:%M}] {sender}: {message.content}")


@chat_group.command("list")
@click.pass_context
def list_chats(ctx):
    """List your chats, most recent first."""
    user_id = require_user_or_exit(ctx)
    try:
        summaries = ChatService(ctx.obj["db"]).list_user_chats(user_id)
    except DomainError as e:
        handle_domain_error(ctx, e)

    if not summaries:
        click.echo("No chats found.")
        return

    for summary in summaries:
        chat = summary.chat
        role = "selling" if summary.is_owner else "buying"
        other = chat.buyer_id if summary.is_owner else chat.seller_id
        click.echo(
            f"{chat.id} | {role:7s} | listing {chat.listing_id} | with {other} | "
            f"{chat.updated_at:%Y-%m-%d %H:%M}"
        )


def register_commands(cli):
    """Register chat commands with main CLI."""
    cli.add_command(chat_group, name="chat")
