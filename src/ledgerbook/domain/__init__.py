"""Domain layer for ledgerbook application."""

from importlib import import_module

_SERVICES = {
    "AccountService": "ledgerbook.domain.account",
    "BalanceService": "ledgerbook.domain.balance",
    "BillService": "ledgerbook.domain.bill",
    "BillMatcher": "ledgerbook.domain.bill_matcher",
    "BillScheduler": "ledgerbook.domain.bill_scheduler",
    "JournalService": "ledgerbook.domain.journal",
}

__all__ = list(_SERVICES)


# Services are imported lazily so the database layer can import entities
# without pulling in the services that depend on it
def __getattr__(name):
    if name in _SERVICES:
        return getattr(import_module(_SERVICES[name]), name)
    raise AttributeError(f"module '{__name__}' has no attribute '{name}'")
