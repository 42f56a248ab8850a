"""Recurring bill commands."""

from datetime import date

import click
from ledgerbook.cli.error_handling import handle_domain_error
from ledgerbook.domain.bill import BillService
from ledgerbook.domain.bill_matcher import BillMatcher
from ledgerbook.domain.bill_scheduler import BillScheduler
from ledgerbook.domain.entities import RepeatFrequency
from ledgerbook.domain.errors import DomainError
from ledgerbook.utils.amount_parser import parse_amount
from ledgerbook.utils.date_parser import parse_date


def _parse_date_or_exit(ctx, value: str, label: str) -> date:
    try:
        return parse_date(value)
    except ValueError as e:
        click.echo(f"Error: Invalid {label}: {e}", err=True)
        ctx.exit(1)


@click.group()
def bill_group():
    """Manage recurring bills."""
    pass


@bill_group.command("create")
@click.argument("name")
@click.option("--match", required=True, help="Comma-separated keywords, e.g. 'grocery,market'")
@click.option("--min", "amount_min", required=True, help="Lowest expected amount")
@click.option("--max", "amount_max", required=True, help="Highest expected amount")
@click.option("--date", "date_str", required=True, help="First due date (YYYY-MM-DD)")
@click.option(
    "--repeat",
    type=click.Choice([f.value for f in RepeatFrequency], case_sensitive=False),
    default=RepeatFrequency.MONTHLY.value,
    show_default=True,
    help="Repeat frequency",
)
@click.option("--skip", type=int, default=0, show_default=True, help="Periods to skip between due periods")
@click.option("--inactive", is_flag=True, help="Create the bill as inactive")
@click.option("--no-automatch", is_flag=True, help="Do not match new journals automatically")
@click.pass_context
def create_bill(
    ctx,
    name: str,
    match: str,
    amount_min: str,
    amount_max: str,
    date_str: str,
    repeat: str,
    skip: int,
    inactive: bool,
    no_automatch: bool,
):
    """Create a recurring bill.

    Examples:
        ledgerbook bill create "Groceries" --match grocery,market --min 10 --max 50 \\
            --date 2024-01-01 --repeat weekly
    """
    anchor = _parse_date_or_exit(ctx, date_str, "date")
    try:
        bill_id = BillService(ctx.obj["db"]).create_bill(
            name=name,
            match=match,
            amount_min=parse_amount(amount_min),
            amount_max=parse_amount(amount_max),
            date=anchor,
            repeat_freq=repeat,
            skip=skip,
            automatch=not no_automatch,
            active=not inactive,
        )
    except ValueError as e:
        handle_domain_error(ctx, e)
    click.echo(f"Created bill '{name}' (ID: {bill_id})")


@bill_group.command("list")
@click.pass_context
def list_bills(ctx):
    """List all bills."""
    bills = BillService(ctx.obj["db"]).list_bills()
    if not bills:
        click.echo("No bills found.")
        return

    click.echo("\nBills:")
    click.echo("-" * 100)
    for bill in bills:
        state = "active" if bill.active else "inactive"
        click.echo(
            f"ID: {bill.id:3d} | {bill.name:20s} | {bill.amount_min:,.2f} - {bill.amount_max:,.2f} | "
            f"{bill.repeat_freq.value} (skip {bill.skip}) | {state} | match: {bill.match}"
        )


@bill_group.command("ranges")
@click.argument("bill_id", type=int)
@click.option("--start-date", required=True, help="Window start (YYYY-MM-DD)")
@click.option("--end-date", required=True, help="Window end (YYYY-MM-DD)")
@click.pass_context
def bill_ranges(ctx, bill_id: int, start_date: str, end_date: str):
    """Show the bill periods that fall within a date window."""
    db = ctx.obj["db"]
    start = _parse_date_or_exit(ctx, start_date, "start date")
    end = _parse_date_or_exit(ctx, end_date, "end date")

    try:
        bill = BillService(db).get_bill_or_raise(bill_id)
        periods = list(BillScheduler(db).occurrences_overlapping(bill, start, end))
    except DomainError as e:
        handle_domain_error(ctx, e)

    if not periods:
        click.echo("No periods in this window.")
        return
    for period in periods:
        click.echo(f"{period.start} - {period.end}")


@bill_group.command("next")
@click.argument("bill_id", type=int)
@click.option("--today", "today_str", help="Reference date (defaults to today)")
@click.pass_context
def next_match(ctx, bill_id: int, today_str: str | None):
    """Show the next period in which a bill is expected but not yet paid."""
    db = ctx.obj["db"]
    now = _parse_date_or_exit(ctx, today_str, "date") if today_str else date.today()

    try:
        bill = BillService(db).get_bill_or_raise(bill_id)
        expected = BillScheduler(db).next_unmatched_occurrence(bill, now)
    except DomainError as e:
        handle_domain_error(ctx, e)

    if expected is None:
        click.echo(f"No payment expected for bill '{bill.name}'.")
    else:
        click.echo(f"Bill '{bill.name}' is expected in the period starting {expected}.")


@bill_group.command("scan")
@click.argument("bill_id", type=int)
@click.argument("journal_id", type=int)
@click.pass_context
def scan_journal(ctx, bill_id: int, journal_id: int):
    """Check a journal against a bill and link them if it matches."""
    db = ctx.obj["db"]
    try:
        bill = BillService(db).get_bill_or_raise(bill_id)
        matched = BillMatcher(db).scan(bill, journal_id)
    except DomainError as e:
        handle_domain_error(ctx, e)

    if matched:
        click.echo(f"Journal {journal_id} matches bill '{bill.name}' and is now linked.")
    else:
        click.echo(f"Journal {journal_id} does not match bill '{bill.name}'.")


@bill_group.command("delete")
@click.argument("bill_id", type=int)
@click.pass_context
def delete_bill(ctx, bill_id: int):
    """Delete a bill."""
    try:
        BillService(ctx.obj["db"]).delete_bill(bill_id)
    except DomainError as e:
        handle_domain_error(ctx, e)
    click.echo(f"Deleted bill {bill_id}")


def register_commands(cli):
    """Register bill commands with main CLI."""
    cli.add_command(bill_group, name="bill")
