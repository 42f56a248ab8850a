"""SQLAlchemy models for ledgerbook database."""

from datetime import datetime, UTC
from decimal import Decimal
from sqlalchemy import (
    BigInteger,
    Column,
    Integer,
    String,
    ForeignKey,
    DateTime,
    Date,
    Boolean,
    Index,
    TypeDecorator,
    create_engine,
)
from sqlalchemy.orm import declarative_base, relationship, scoped_session, sessionmaker, Session

from ledgerbook.domain.amounts import AMOUNT_SCALE, AMOUNT_UNIT

Base = declarative_base()


class Amount(TypeDecorator):
    """Exact Decimal stored as a whole number of AMOUNT_UNIT.

    Integer storage keeps amounts and their SQL sums exact on backends
    without a native decimal type, such as SQLite.
    """

    impl = BigInteger
    cache_ok = True

    def process_bind_param(self, value, dialect):
        if value is None:
            return None
        value = Decimal(value)
        units = value.quantize(AMOUNT_UNIT)
        if units != value:
            raise ValueError(f"Amount {value} has more than {AMOUNT_SCALE} decimal places")
        return int(units.scaleb(AMOUNT_SCALE))

    def process_result_value(self, value, dialect):
        if value is None:
            return None
        return Decimal(int(value)).scaleb(-AMOUNT_SCALE)


class Account(Base):
    """Ledger account model."""

    __tablename__ = "accounts"

    id = Column(Integer, primary_key=True)
    name = Column(String, unique=True, nullable=False)
    account_type = Column(String, nullable=False)
    created_at = Column(DateTime, default=lambda: datetime.now(UTC), nullable=False)

    # Relationships
    transactions = relationship("Transaction", back_populates="account")


class Bill(Base):
    """Recurring bill model."""

    __tablename__ = "bills"

    id = Column(Integer, primary_key=True)
    name = Column(String, nullable=False)
    match = Column(String, nullable=False)
    amount_min = Column(Amount, nullable=False)
    amount_max = Column(Amount, nullable=False)
    date = Column(Date, nullable=False)
    repeat_freq = Column(String, nullable=False)
    skip = Column(Integer, default=0, nullable=False)
    automatch = Column(Boolean, default=True, nullable=False)
    active = Column(Boolean, default=True, nullable=False)
    created_at = Column(DateTime, default=lambda: datetime.now(UTC), nullable=False)
    deleted_at = Column(DateTime, nullable=True)

    # Relationships
    journals = relationship("Journal", back_populates="bill")


class Journal(Base):
    """Journal model grouping balanced transaction legs."""

    __tablename__ = "journals"

    id = Column(Integer, primary_key=True)
    description = Column(String, nullable=False)
    date = Column(Date, nullable=False)
    order = Column(Integer, default=0, nullable=False)
    journal_type = Column(String, nullable=False)
    completed = Column(Boolean, default=True, nullable=False)
    bill_id = Column(Integer, ForeignKey("bills.id"), nullable=True)
    created_at = Column(DateTime, default=lambda: datetime.now(UTC), nullable=False)
    deleted_at = Column(DateTime, nullable=True)

    # Ledger order lookups go date, order, id; balance sums join back on id
    __table_args__ = (
        Index("ix_journals_ledger_order", "date", "order", "id"),
        Index("ix_journals_bill_date", "bill_id", "date"),
        Index("ix_journals_type_date", "journal_type", "date"),
    )

    # Relationships
    bill = relationship("Bill", back_populates="journals")
    transactions = relationship("Transaction", back_populates="journal", cascade="all, delete-orphan")


class Transaction(Base):
    """Transaction (journal leg) model."""

    __tablename__ = "transactions"

    id = Column(Integer, primary_key=True)
    journal_id = Column(Integer, ForeignKey("journals.id"), nullable=False)
    account_id = Column(Integer, ForeignKey("accounts.id"), nullable=False)
    amount = Column(Amount, nullable=False)
    identifier = Column(Integer, default=0, nullable=False)
    description = Column(String, nullable=True)
    deleted_at = Column(DateTime, nullable=True)

    __table_args__ = (
        # Covers balance sums: per account, joined on journal, compared on identifier
        Index("ix_transactions_account_journal", "account_id", "journal_id", "identifier", "amount"),
    )

    # Relationships
    account = relationship("Account", back_populates="transactions")
    journal = relationship("Journal", back_populates="transactions")


def create_session_factory(database_url: str) -> scoped_session[Session]:
    """Create a thread-local SQLAlchemy session registry."""
    engine = create_engine(database_url, echo=False)
    Base.metadata.create_all(engine)
    return scoped_session(sessionmaker(bind=engine))
