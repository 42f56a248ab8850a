"""Shared domain error messages and error types."""


class DomainError(ValueError):
    """Base class for domain-level errors.

    Subclasses provide semantic categories while preserving ValueError
    compatibility for existing error handling.
    """


class ValidationError(DomainError):
    """Invalid input or failed validation in domain logic."""


class NotFoundError(DomainError):
    """Requested transaction, journal, account or bill does not exist."""


class ConflictError(DomainError):
    """Domain conflict, such as uniqueness violations."""


class InvalidRuleError(DomainError):
    """Recurrence rule cannot advance or names an unknown frequency."""


class StoreUnavailableError(DomainError):
    """The backing store failed to answer a request."""


def account_not_found(account_id: int) -> str:
    """Return message for missing account."""
    return f"Account {account_id} not found"


def transaction_not_found(transaction_id: int) -> str:
    """Return message for missing transaction."""
    return f"Transaction {transaction_id} not found"


def journal_not_found(journal_id: int) -> str:
    """Return message for missing journal."""
    return f"Journal {journal_id} not found"


def bill_not_found(bill_id: int) -> str:
    """Return message for missing bill."""
    return f"Bill {bill_id} not found"


def unknown_frequency(value: str) -> str:
    """Return message for an unrecognized repeat frequency."""
    return f"Unknown repeat frequency '{value}'"


def unbalanced_journal(total) -> str:
    """Return message for legs that do not sum to zero."""
    return f"Journal legs must sum to zero, got {total}"
