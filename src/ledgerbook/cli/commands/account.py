"""Account management commands."""

import click
from ledgerbook.cli.error_handling import handle_domain_error
from ledgerbook.domain.account import AccountService
from ledgerbook.domain.entities import AccountType
from ledgerbook.domain.errors import DomainError

# Short names accepted on the command line
TYPE_CHOICES = {
    "asset": AccountType.ASSET,
    "expense": AccountType.EXPENSE,
    "beneficiary": AccountType.BENEFICIARY,
    "revenue": AccountType.REVENUE,
    "cash": AccountType.CASH,
    "default": AccountType.DEFAULT,
}


@click.group()
def account_group():
    """Manage accounts."""
    pass


@account_group.command("create")
@click.argument("name", metavar="ACCOUNT_NAME")
@click.option(
    "--type",
    "account_type",
    type=click.Choice(sorted(TYPE_CHOICES), case_sensitive=False),
    default="asset",
    show_default=True,
    help="Account type",
)
@click.pass_context
def create_account(ctx, name: str, account_type: str):
    """Create a new account.

    Examples:
        ledgerbook account create "Checking"
        ledgerbook account create "SuperMart" --type expense
    """
    service = AccountService(ctx.obj["db"])
    try:
        account_id = service.create_account(name=name, account_type=TYPE_CHOICES[account_type.lower()])
    except DomainError as e:
        handle_domain_error(ctx, e)
    click.echo(f"Created account '{name}' (ID: {account_id})")


@account_group.command("list")
@click.pass_context
def list_accounts(ctx):
    """List all accounts."""
    service = AccountService(ctx.obj["db"])

    accounts = service.list_accounts()
    if not accounts:
        click.echo("No accounts found.")
        return

    click.echo("\nAccounts:")
    click.echo("-" * 60)
    for acc in accounts:
        click.echo(f"ID: {acc.id:3d} | {acc.name:20s} | {acc.account_type.value}")


def register_commands(cli):
    """Register account commands with main CLI."""
    cli.add_command(account_group, name="account")
