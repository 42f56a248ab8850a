"""Journal recording and viewing commands."""

import click
from ledgerbook.cli.account_resolution import resolve_account_or_exit
from ledgerbook.cli.error_handling import handle_domain_error
from ledgerbook.domain.account import AccountService
from ledgerbook.domain.balance import BalanceService
from ledgerbook.domain.entities import JournalType
from ledgerbook.domain.errors import DomainError
from ledgerbook.domain.journal import JournalService
from ledgerbook.utils.amount_parser import parse_amount
from ledgerbook.utils.date_parser import parse_date

TYPE_CHOICES = {t.value.lower(): t for t in JournalType}


@click.group()
def journal_group():
    """Record and inspect journals."""
    pass


@journal_group.command("add")
@click.option("--date", "date_str", required=True, help="Journal date (YYYY-MM-DD or today/yesterday)")
@click.option("--description", required=True, help="Journal description")
@click.option("--from", "source", required=True, help="Source account name or ID")
@click.option("--to", "destination", required=True, help="Destination account name or ID")
@click.option("--amount", "amount_str", required=True, help="Positive amount moved")
@click.option("--order", type=int, default=0, show_default=True, help="Same-day order (higher comes first)")
@click.option("--no-automatch", is_flag=True, help="Do not link the journal to a matching bill")
@click.pass_context
def add_journal(
    ctx,
    date_str: str,
    description: str,
    source: str,
    destination: str,
    amount_str: str,
    order: int,
    no_automatch: bool,
):
    """Record a journal moving money from one account to another.

    Examples:
        ledgerbook journal add --date 2024-01-15 --description "Weekly groceries" \\
            --from Checking --to SuperMart --amount 45.00
    """
    db = ctx.obj["db"]
    account_service = AccountService(db)
    service = JournalService(db)

    try:
        journal_date = parse_date(date_str)
        amount = parse_amount(amount_str)
    except ValueError as e:
        click.echo(f"Error: {e}", err=True)
        ctx.exit(1)

    source_id = resolve_account_or_exit(ctx, account_service, source)
    destination_id = resolve_account_or_exit(ctx, account_service, destination)

    try:
        journal_id, bill = service.create_transfer(
            date=journal_date,
            description=description,
            source_account_id=source_id,
            destination_account_id=destination_id,
            amount=amount,
            order=order,
            automatch=not no_automatch,
        )
    except DomainError as e:
        handle_domain_error(ctx, e)

    click.echo(f"Created journal {journal_id}: {description} ({amount:,.2f})")
    if bill is not None:
        click.echo(f"Linked to bill '{bill.name}' (ID: {bill.id})")


@journal_group.command("show")
@click.argument("journal_id", type=int)
@click.pass_context
def show_journal(ctx, journal_id: int):
    """Show the legs of a journal with balances before and after."""
    db = ctx.obj["db"]
    journal = JournalService(db).get_journal(journal_id)
    if journal is None:
        click.echo(f"Error: Journal {journal_id} not found", err=True)
        ctx.exit(1)

    try:
        pairs = BalanceService(db).transactions_overview(journal_id)
    except DomainError as e:
        handle_domain_error(ctx, e)

    click.echo(f"\nJournal {journal.id}: {journal.description}")
    click.echo(f"  Date: {journal.date}  Type: {journal.journal_type.value}  Order: {journal.order}")
    if journal.bill_id is not None:
        click.echo(f"  Bill: {journal.bill_id}")
    click.echo("-" * 100)
    for pair in pairs:
        click.echo(
            f"  {pair.source_account_name:<20} {pair.source_amount:>12,.2f}  "
            f"{pair.source_before:>12,.2f} -> {pair.source_after:>12,.2f}"
        )
        if pair.destination_id is not None:
            click.echo(
                f"  {pair.destination_account_name:<20} {pair.destination_amount:>12,.2f}  "
                f"{pair.destination_before:>12,.2f} -> {pair.destination_after:>12,.2f}"
            )


@journal_group.command("list")
@click.option("--account", "accounts", multiple=True, help="Account name or ID (repeatable)")
@click.option(
    "--type",
    "types",
    multiple=True,
    type=click.Choice(sorted(TYPE_CHOICES), case_sensitive=False),
    help="Journal type (repeatable)",
)
@click.option("--start-date", help="Start date (YYYY-MM-DD)")
@click.option("--end-date", help="End date (YYYY-MM-DD)")
@click.option("--page", type=int, default=1, show_default=True, help="Page number")
@click.option("--page-size", type=int, help="Journals per page (default: all)")
@click.pass_context
def list_journals(
    ctx,
    accounts: tuple[str, ...],
    types: tuple[str, ...],
    start_date: str | None,
    end_date: str | None,
    page: int,
    page_size: int | None,
):
    """List journals, most recent first.

    Examples:
        ledgerbook journal list --account Checking --account Savings --type transfer
        ledgerbook journal list --page 2 --page-size 20
    """
    db = ctx.obj["db"]

    try:
        start = parse_date(start_date) if start_date else None
        end = parse_date(end_date) if end_date else None
    except ValueError as e:
        click.echo(f"Error: Invalid date: {e}", err=True)
        ctx.exit(1)

    account_ids = None
    if accounts:
        account_service = AccountService(db)
        account_ids = [resolve_account_or_exit(ctx, account_service, a) for a in accounts]

    try:
        journals = JournalService(db).list_journals(
            start_date=start,
            end_date=end,
            account_ids=account_ids,
            journal_types=[TYPE_CHOICES[t.lower()] for t in types] or None,
            page=page,
            page_size=page_size,
        )
    except DomainError as e:
        handle_domain_error(ctx, e)

    if not journals:
        click.echo("No journals found.")
        return

    click.echo(f"\nFound {len(journals)} journal(s):")
    click.echo("-" * 92)
    click.echo(f"{'ID':<6} {'Date':<12} {'Type':<11} {'Order':<6} {'Bill':<6} {'Description':<40}")
    click.echo("-" * 92)
    for journal in journals:
        bill = str(journal.bill_id) if journal.bill_id is not None else ""
        click.echo(
            f"{journal.id:<6} {str(journal.date):<12} {journal.journal_type.value:<11} {journal.order:<6} {bill:<6} "
            f"{journal.description[:40]:<40}"
        )


@journal_group.command("delete")
@click.argument("journal_id", type=int)
@click.pass_context
def delete_journal(ctx, journal_id: int):
    """Delete a journal and its legs."""
    try:
        JournalService(ctx.obj["db"]).delete_journal(journal_id)
    except DomainError as e:
        handle_domain_error(ctx, e)
    click.echo(f"Deleted journal {journal_id}")


def register_commands(cli):
    """Register journal commands with main CLI."""
    cli.add_command(journal_group, name="journal")
