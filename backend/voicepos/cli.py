# Overview: Flask CLI command group for seeding, inspecting and driving the store.

# backend/voicepos/cli.py
# Commands Legend (run from the backend directory):
# - flask --app voicepos store seed
#   Drop every record and reload the demo data.
# - flask --app voicepos store say "Rahim 100 taka baki"
#   Process one command and print the transaction it produced.
# - flask --app voicepos store listen [--timeout 15]
#   Capture one spoken command from the microphone and process it.
# - flask --app voicepos store products | customers | feed [--limit 10]
#   Print the current collections.
#
# The store is memory-resident, so state only lives for the duration of
# one CLI invocation (or one `flask run` process).

import threading

import click
from flask import current_app
from flask.cli import with_appcontext

from .errors import CommandError
from .services.command_service import process_command
from .services.numerals import to_bengali_digits
from .services.speech_service import RecognizerCapture, VoiceCommandSession
from .services.store_service import list_products, list_customers, list_transactions, reset_store


def _echo_transaction(t: dict) -> None:
    parts = [f"#{t['id']}", t["kind"], f"amount={t['amount']}"]
    if t.get("customer_name"):
        parts.append(f"customer={t['customer_name']}")
    if t.get("product_name"):
        parts.append(f"product={t['product_name']}")
    if t.get("quantity") is not None:
        parts.append(f"qty={t['quantity']}")
    click.echo("  ".join(parts))
    click.echo(f"    {t['description']}")


@click.group('store')
def store_group():
    """Voice POS record store commands."""


@store_group.command('seed')
@with_appcontext
def seed_store():
    """Reset the store to the demo records."""
    reset_store(seed=True)
    click.echo(f"PASS Seeded {len(list_products())} products, {len(list_customers())} customers, "
               f"{len(list_transactions())} transactions")


@store_group.command('say')
@click.argument('text')
@with_appcontext
def say(text):
    """Process one typed command."""
    try:
        transaction = process_command(text)
    except CommandError as e:
        raise click.ClickException(str(e))
    _echo_transaction(transaction.to_dict())


@store_group.command('listen')
@click.option('--timeout', default=15.0, show_default=True, help='Seconds to wait for a transcript')
@with_appcontext
def listen(timeout):
    """Capture one spoken command and process it."""
    app = current_app._get_current_object()
    done = threading.Event()
    notices = []

    def _on_notice(error):
        notices.append(error)
        done.set()

    capture = RecognizerCapture(language=app.config.get("SPEECH_LANGUAGE", "bn-BD"))
    session = VoiceCommandSession(
        capture,
        app=app,
        on_notice=_on_notice,
        on_processed=lambda _t: done.set(),
    )
    if not session.start():
        raise click.ClickException(str(notices[-1]))

    click.echo("Listening... Speak now (শুনছি... এখন বলুন)")
    done.wait(timeout)
    if session.transaction is None:
        session.stop()
        if notices:
            raise click.ClickException(str(notices[-1]))
        raise click.ClickException("No command heard")

    click.echo(f"Heard: {session.transcript}")
    _echo_transaction(session.transaction)


@store_group.command('products')
@with_appcontext
def show_products():
    """List inventory."""
    for p in list_products():
        click.echo(f"{p.id:>3}  {p.name:<16} {p.name_bn:<6} "
                   f"{p.quantity:>8g} {p.unit:<6} @{p.price}")


@store_group.command('customers')
@with_appcontext
def show_customers():
    """List customers and their outstanding baki."""
    for c in list_customers():
        click.echo(f"{c.id:>3}  {c.name:<16} {c.phone or '-':<14} "
                   f"৳{c.total_baki} ({to_bengali_digits(c.total_baki)})  {len(c.entries)} entries")


@store_group.command('feed')
@click.option('--limit', default=10, show_default=True, type=int)
@with_appcontext
def show_feed(limit):
    """Most recent transactions first."""
    for t in list_transactions(limit=limit):
        _echo_transaction(t.to_dict())


def register_commands(app):
    """Register all CLI commands with Flask app."""
    app.cli.add_command(store_group)
