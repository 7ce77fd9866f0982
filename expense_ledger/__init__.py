"""Command-line expense ledger backed by a single SQL table."""

from .errors import StoreError
from .store import ExpenseStore

__all__ = ["ExpenseStore", "StoreError"]
