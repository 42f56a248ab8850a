"""Mapper functions to convert between domain models and SQLAlchemy models.

This layer isolates the conversion logic, so the balance and bill logic never
touch ORM instances.
"""

from decimal import Decimal

from ledgerbook.domain import entities as domain
from ledgerbook.database.models import (
    Account as ORMAccount,
    Bill as ORMBill,
    Journal as ORMJournal,
    Transaction as ORMTransaction,
)


def account_to_domain(orm_account: ORMAccount) -> domain.Account:
    """Convert SQLAlchemy Account model to domain Account entity."""
    return domain.Account(
        id=orm_account.id,
        name=orm_account.name,
        account_type=domain.AccountType(orm_account.account_type),
        created_at=orm_account.created_at,
    )


def journal_to_domain(orm_journal: ORMJournal) -> domain.Journal:
    """Convert SQLAlchemy Journal model to domain Journal entity."""
    return domain.Journal(
        id=orm_journal.id,
        description=orm_journal.description,
        date=orm_journal.date,
        order=orm_journal.order,
        journal_type=domain.JournalType(orm_journal.journal_type),
        completed=orm_journal.completed,
        bill_id=orm_journal.bill_id,
        created_at=orm_journal.created_at,
    )


def transaction_to_domain(orm_transaction: ORMTransaction) -> domain.Transaction:
    """Convert SQLAlchemy Transaction model to domain Transaction entity."""
    return domain.Transaction(
        id=orm_transaction.id,
        journal_id=orm_transaction.journal_id,
        account_id=orm_transaction.account_id,
        amount=Decimal(orm_transaction.amount),
        identifier=orm_transaction.identifier,
        description=orm_transaction.description,
    )


def bill_to_domain(orm_bill: ORMBill) -> domain.Bill:
    """Convert SQLAlchemy Bill model to domain Bill entity."""
    return domain.Bill(
        id=orm_bill.id,
        name=orm_bill.name,
        match=orm_bill.match,
        amount_min=Decimal(orm_bill.amount_min),
        amount_max=Decimal(orm_bill.amount_max),
        date=orm_bill.date,
        repeat_freq=domain.RepeatFrequency(orm_bill.repeat_freq),
        skip=orm_bill.skip,
        automatch=orm_bill.automatch,
        active=orm_bill.active,
    )

