"""Account domain service."""

from typing import Optional, Union
from ledgerbook.database.base import Database
from ledgerbook.domain.entities import Account as AccountEntity, AccountType
from ledgerbook.domain.errors import ConflictError, ValidationError


class AccountService:
    """Service for managing accounts."""

    def __init__(self, db: Database):
        """Initialize account service.

        Args:
            db: Database instance
        """
        self.db = db

    def create_account(self, name: str, account_type: Union[str, AccountType]) -> int:
        """Create a new account.

        Args:
            name: Account name
            account_type: Account type label, e.g. "Expense account"

        Returns:
            Account ID

        Raises:
            ValidationError: If the name is empty or the type is unknown
            ConflictError: If account name already exists
        """
        name = name.strip()
        if not name:
            raise ValidationError("Account name cannot be empty")

        try:
            account_type = AccountType(account_type)
        except ValueError:
            valid = ", ".join(t.value for t in AccountType)
            raise ValidationError(f"Unknown account type '{account_type}'. Valid types: {valid}") from None

        for acc in self.db.list_accounts():
            if acc.name == name:
                raise ConflictError(f"Account with name '{name}' already exists")

        return self.db.create_account(name=name, account_type=account_type)

    def get_account(self, account_id: int) -> Optional[AccountEntity]:
        """Get account by ID.

        Args:
            account_id: Account ID

        Returns:
            Account entity or None if not found
        """
        return self.db.get_account(account_id)

    def list_accounts(self) -> list[AccountEntity]:
        """List all accounts."""
        return self.db.list_accounts()
