"""ExpenseStore: one database session per operation, schema ensured first.

Every public method opens a fresh session, makes sure the ``expenses`` table
exists, runs its query, prints the result and releases the session on every
exit path. Database failures surface as ``StoreError``; deciding whether that
ends the process is left to the caller.
"""

from contextlib import contextmanager
from datetime import date
from decimal import Decimal
from typing import Iterator, Optional, Union

from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker

from . import crud, display
from .database import make_engine, make_session_factory, session_scope
from .errors import StoreError
from .logging_utils import get_logger
from .schemas import ExpenseCreate, ExpenseList, ExpenseRead

LOGGER = get_logger(__name__)

# ids are signed 64-bit integers in every supported backend
MIN_ID = -(2 ** 63)
MAX_ID = 2 ** 63 - 1


class ExpenseStore:
    def __init__(self, engine: Optional[Engine] = None) -> None:
        self._engine = engine
        self._session_factory = None

    @property
    def engine(self) -> Engine:
        """Built on first use."""
        if self._engine is None:
            self._engine = make_engine()
        return self._engine

    @property
    def session_factory(self) -> sessionmaker:
        if self._session_factory is None:
            self._session_factory = make_session_factory(self.engine)
        return self._session_factory

    @contextmanager
    def _session(self) -> Iterator[Session]:
        try:
            with session_scope(self.session_factory) as db:
                if crud.ensure_schema(db):
                    LOGGER.info("Created expenses table")
                yield db
        except SQLAlchemyError as e:
            raise StoreError(str(e)) from e

    def ensure_schema(self) -> None:
        with self._session():
            pass

    def list(self) -> ExpenseList:
        with self._session() as db:
            listing = ExpenseList.from_rows(crud.get_expenses(db))
        display.display_listing(listing)
        return listing

    def add(
        self,
        amount: Union[str, Decimal],
        memo: str,
        created_on: Optional[Union[str, date]] = None,
    ) -> ExpenseRead:
        """Insert one expense. `created_on` defaults to today."""
        expense_in = ExpenseCreate(amount=amount, memo=memo, created_on=created_on)
        with self._session() as db:
            expense = ExpenseRead.model_validate(crud.create_expense(db, expense_in))
        LOGGER.info("Added expense %s", expense.id)
        return expense

    def search(self, term: str) -> ExpenseList:
        with self._session() as db:
            listing = ExpenseList.from_rows(crud.search_expenses(db, term))
        display.display_listing(listing)
        return listing

    def delete_by_id(self, expense_id: Union[str, int]) -> Optional[ExpenseRead]:
        """
        Delete one expense and echo it. A missing id is reported, not raised.
        Returns the deleted expense, or None when nothing matched.
        """
        deleted = None
        try:
            key = int(expense_id)
        except (TypeError, ValueError):
            key = None
        if key is not None and not MIN_ID <= key <= MAX_ID:
            key = None

        with self._session() as db:
            if key is not None:
                expense = crud.get_expense(db, key)
                if expense is not None:
                    deleted = ExpenseRead.model_validate(expense)
                    crud.delete_expense(db, expense)

        if deleted is None:
            print(f"There is no expense with the id '{expense_id}'.")
            return None

        LOGGER.info("Deleted expense %s", deleted.id)
        print("The following expense has been deleted:")
        display.display_expenses([deleted])
        return deleted

    def delete_all(self) -> int:
        """Remove every expense. Callers are responsible for confirming first."""
        with self._session() as db:
            removed = crud.delete_all_expenses(db)
        LOGGER.info("Deleted %s expenses", removed)
        print("All expenses have been deleted.")
        return removed
